# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Embedding model wiring for application bootstrap.

This module provides the wire_openai_embedding_model function that decides
whether the OpenAI embedding model should be provided and, if so, registers
a factory for it in the component registry.

Conditions (all must hold):
    - The transport library (httpx) is importable.
    - The provider selection (OMNIEMBEDDING_MODEL_EMBEDDING / ``model.embedding``)
      is ``openai`` or absent.
    - No embedding model is registered yet; the first registration wins.

When a condition fails nothing is registered and no error is raised. The
model itself is built on first lookup: connection properties are resolved,
the API client is built and wrapped with the retry policy and observation
registry.

Client modules import httpx, so they are imported only once the conditions
hold.

Example:
    ```python
    settings = ModelEmbeddingAutoconfigSettings.from_environment()
    registry = build_registry(settings)
    model = registry.get(CAPABILITY_EMBEDDING_MODEL)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from omniembedding.constants import (
    CAPABILITY_EMBEDDING_MODEL,
    DEFAULT_COMPLETIONS_PATH,
    PROVIDER_OPENAI,
    TRANSPORT_MODULE,
)
from omniembedding.models.model_autoconfig_settings import (
    ModelEmbeddingAutoconfigSettings,
)
from omniembedding.models.model_connection_config import ModelOpenAiConnectionConfig
from omniembedding.models.model_embedding_config import ModelOpenAiEmbeddingConfig
from omniembedding.resolution.connection_resolver import (
    resolve_connection_properties,
)
from omniembedding.runtime.conditions import (
    is_component_missing,
    is_module_available,
    property_matches,
)
from omniembedding.runtime.registry import RegistryComponents

if TYPE_CHECKING:
    from omniembedding.clients.openai_api import AsyncClientFactory, SyncClientFactory
    from omniembedding.clients.openai_embedding_model import OpenAiEmbeddingModel
    from omniembedding.clients.response_error_handler import (
        ProtocolResponseErrorHandler,
    )
    from omniembedding.observability.observation import (
        ProtocolEmbeddingObservationConvention,
        ProtocolObservationRegistry,
    )
    from omniembedding.retry.retry_policy import ProtocolRetryPolicy

logger = logging.getLogger(__name__)

MODEL_TYPE_EMBEDDING = "embedding"


def build_openai_embedding_model(
    common: ModelOpenAiConnectionConfig,
    embedding: ModelOpenAiEmbeddingConfig,
    *,
    retry_policy: ProtocolRetryPolicy,
    response_error_handler: ProtocolResponseErrorHandler,
    sync_client_factory: SyncClientFactory | None = None,
    async_client_factory: AsyncClientFactory | None = None,
    observation_registry: ProtocolObservationRegistry | None = None,
    observation_convention: ProtocolEmbeddingObservationConvention | None = None,
) -> OpenAiEmbeddingModel:
    """Resolve the connection, build the API client and wrap it.

    Raises:
        ConfigurationError: If base URL, API key or a path cannot be resolved.
    """
    from omniembedding.clients.openai_api import build_openai_api
    from omniembedding.clients.openai_embedding_model import OpenAiEmbeddingModel

    resolved = resolve_connection_properties(common, embedding, MODEL_TYPE_EMBEDDING)

    api = build_openai_api(
        resolved,
        DEFAULT_COMPLETIONS_PATH,
        embedding.embeddings_path,
        sync_client_factory=sync_client_factory,
        async_client_factory=async_client_factory,
        response_error_handler=response_error_handler,
    )

    model = OpenAiEmbeddingModel(
        api,
        metadata_mode=embedding.metadata_mode,
        options=embedding.options,
        retry_policy=retry_policy,
        observation_registry=observation_registry,
    )

    if observation_convention is not None:
        model.set_observation_convention(observation_convention)

    logger.info(
        "OpenAI embedding model built (model=%s, embeddings_url=%s)",
        embedding.options.model,
        api.embeddings_url,
    )
    return model


def should_provide_openai_embedding_model(
    registry: RegistryComponents,
    settings: ModelEmbeddingAutoconfigSettings,
) -> bool:
    """Evaluate the registration conditions, logging the first that fails."""
    if not is_module_available(TRANSPORT_MODULE):
        logger.debug(
            "OpenAI embedding model skipped: %s is not installed", TRANSPORT_MODULE
        )
        return False

    if not property_matches(
        settings.embedding_model, PROVIDER_OPENAI, match_if_missing=True
    ):
        logger.debug(
            "OpenAI embedding model skipped: provider %r selected",
            settings.embedding_model,
        )
        return False

    if not is_component_missing(registry, CAPABILITY_EMBEDDING_MODEL):
        logger.debug(
            "OpenAI embedding model skipped: %s already registered",
            CAPABILITY_EMBEDDING_MODEL,
        )
        return False

    return True


def wire_openai_embedding_model(
    registry: RegistryComponents,
    settings: ModelEmbeddingAutoconfigSettings,
    *,
    retry_policy: ProtocolRetryPolicy | None = None,
    response_error_handler: ProtocolResponseErrorHandler | None = None,
    sync_client_factory: SyncClientFactory | None = None,
    async_client_factory: AsyncClientFactory | None = None,
    observation_registry: ProtocolObservationRegistry | None = None,
    observation_convention: ProtocolEmbeddingObservationConvention | None = None,
) -> bool:
    """Register a lazy OpenAI embedding model factory if conditions hold.

    Missing collaborators default to a ``TenacityRetryPolicy`` and a
    ``DefaultResponseErrorHandler`` built from ``settings.retry``.

    Args:
        registry: Registry receiving the component.
        settings: Loaded configuration.
        retry_policy: Retry policy wrapped around each call.
        response_error_handler: Classifies HTTP error responses.
        sync_client_factory: Builds the synchronous httpx client.
        async_client_factory: Builds the asynchronous httpx client.
        observation_registry: Observation registry (no-op when None).
        observation_convention: Custom observation naming convention.

    Returns:
        True if a factory was registered, False if any condition failed.
    """
    if not should_provide_openai_embedding_model(registry, settings):
        return False

    from omniembedding.clients.response_error_handler import (
        DefaultResponseErrorHandler,
    )
    from omniembedding.retry.retry_policy import TenacityRetryPolicy

    resolved_retry_policy = retry_policy or TenacityRetryPolicy(settings.retry)
    resolved_error_handler = response_error_handler or DefaultResponseErrorHandler(
        settings.retry
    )

    def _factory() -> OpenAiEmbeddingModel:
        return build_openai_embedding_model(
            settings.connection,
            settings.embedding,
            retry_policy=resolved_retry_policy,
            response_error_handler=resolved_error_handler,
            sync_client_factory=sync_client_factory,
            async_client_factory=async_client_factory,
            observation_registry=observation_registry,
            observation_convention=observation_convention,
        )

    registry.register_factory(CAPABILITY_EMBEDDING_MODEL, _factory)
    logger.info("OpenAI embedding model registered as %s", CAPABILITY_EMBEDDING_MODEL)
    return True


def build_registry(
    settings: ModelEmbeddingAutoconfigSettings,
    registry: RegistryComponents | None = None,
    *,
    observation_registry: ProtocolObservationRegistry | None = None,
    observation_convention: ProtocolEmbeddingObservationConvention | None = None,
) -> RegistryComponents:
    """Composition root: wire every provider into ``registry``.

    Components already present in ``registry`` are kept; wiring skips them.
    """
    registry = registry if registry is not None else RegistryComponents()
    wire_openai_embedding_model(
        registry,
        settings,
        observation_registry=observation_registry,
        observation_convention=observation_convention,
    )
    return registry


__all__: list[str] = [
    "MODEL_TYPE_EMBEDDING",
    "build_openai_embedding_model",
    "build_registry",
    "should_provide_openai_embedding_model",
    "wire_openai_embedding_model",
]
