# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection property resolution for OpenAI-backed features.

Merges the shared connection configuration with a feature configuration.
A feature value wins when it has text; otherwise the shared value is used.
Headers are merged key by key with the feature map winning on collision.

Example:
    ```python
    resolved = resolve_connection_properties(
        ModelOpenAiConnectionConfig(api_key="sk-shared"),
        ModelOpenAiEmbeddingConfig(base_url="http://localhost:8000"),
        "embedding",
    )
    assert resolved.base_url == "http://localhost:8000"
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import SecretStr

from omniembedding.constants import (
    ENV_PREFIX_CONNECTION,
    HEADER_OPENAI_ORGANIZATION,
    HEADER_OPENAI_PROJECT,
)
from omniembedding.exceptions import ConfigurationError
from omniembedding.models.model_connection_config import ModelOpenAiConnectionConfig
from omniembedding.models.model_embedding_config import ModelOpenAiEmbeddingConfig
from omniembedding.models.model_resolved_connection import ModelResolvedConnection

logger = logging.getLogger(__name__)


def has_text(value: str | SecretStr | None) -> bool:
    """Return True if ``value`` contains at least one non-whitespace character."""
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    return bool(value and value.strip())


def _first_with_text(
    override: str | SecretStr | None,
    fallback: str | SecretStr | None,
) -> str | SecretStr | None:
    return override if has_text(override) else fallback


def merge_headers(
    common: Mapping[str, str],
    override: Mapping[str, str],
) -> dict[str, str]:
    """Merge two header maps; ``override`` wins on key collision.

    Neither input is modified.
    """
    merged = dict(common)
    merged.update(override)
    return merged


def resolve_connection_properties(
    common: ModelOpenAiConnectionConfig,
    feature: ModelOpenAiEmbeddingConfig,
    model_type: str,
) -> ModelResolvedConnection:
    """Resolve the connection used by one OpenAI feature.

    Args:
        common: Shared connection configuration.
        feature: Feature configuration whose connection fields override.
        model_type: Feature name used only in error messages
            (e.g. ``"embedding"``).

    Returns:
        Frozen resolved connection with non-empty base URL and API key.

    Raises:
        ConfigurationError: If base URL or API key is empty after fallback.
    """
    base_url = _first_with_text(feature.base_url, common.base_url)
    api_key = _first_with_text(feature.api_key, common.api_key)
    project_id = _first_with_text(feature.project_id, common.project_id)
    organization_id = _first_with_text(feature.organization_id, common.organization_id)

    feature_prefix = f"{ENV_PREFIX_CONNECTION}{model_type.upper()}_"

    if not has_text(base_url):
        raise ConfigurationError(
            f"OpenAI base URL must be set. Use the connection property: "
            f"{ENV_PREFIX_CONNECTION}BASE_URL or {feature_prefix}BASE_URL"
        )
    if not has_text(api_key):
        raise ConfigurationError(
            f"OpenAI API key must be set. Use the connection property: "
            f"{ENV_PREFIX_CONNECTION}API_KEY or {feature_prefix}API_KEY"
        )

    headers = merge_headers(common.headers, feature.headers)
    if has_text(organization_id):
        headers[HEADER_OPENAI_ORGANIZATION] = str(organization_id)
    if has_text(project_id):
        headers[HEADER_OPENAI_PROJECT] = str(project_id)

    if isinstance(api_key, str):
        api_key = SecretStr(api_key)

    resolved = ModelResolvedConnection(
        base_url=str(base_url),
        api_key=api_key,
        headers=headers,
    )
    logger.debug("Resolved %s connection: %s", model_type, resolved.describe())
    return resolved


__all__ = [
    "has_text",
    "merge_headers",
    "resolve_connection_properties",
]
