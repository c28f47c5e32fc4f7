# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Embedding Auto-configuration Settings Model.

Aggregates every configuration record the embedding wiring reads: the
provider selection key, the shared OpenAI connection, the embedding feature
configuration and the retry policy.

Design Decisions:
    - Uses Pydantic for validation and serialization
    - Supports environment variable interpolation (e.g., ${OPENAI_API_KEY})
    - Supports loading from YAML files
    - Supports loading from environment variables (pydantic-settings prefixes)

YAML layout:
    model:
      embedding: openai
    openai:
      base_url: https://api.openai.com
      api_key: ${OPENAI_API_KEY}
      embedding:
        embeddings_path: /v1/embeddings
        metadata_mode: EMBED
        options:
          model: text-embedding-3-small
    retry:
      max_attempts: 5

Example:
    settings = ModelEmbeddingAutoconfigSettings.from_yaml("embedding.yaml")
    settings = ModelEmbeddingAutoconfigSettings.from_environment()
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from omniembedding.constants import ENV_EMBEDDING_MODEL_SELECTION
from omniembedding.models.model_connection_config import ModelOpenAiConnectionConfig
from omniembedding.models.model_embedding_config import ModelOpenAiEmbeddingConfig
from omniembedding.models.model_retry_config import ModelRetryConfig

_ENV_REFERENCE = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)\}")


class ModelEmbeddingAutoconfigSettings(BaseModel):
    """
    Complete configuration for wiring the OpenAI embedding model.

    Attributes:
        embedding_model: Selected embedding provider. None means no provider
            was chosen explicitly, which selects OpenAI.
        connection: Shared OpenAI connection configuration.
        embedding: Embedding feature configuration.
        retry: Retry policy configuration.
    """

    embedding_model: str | None = Field(
        default=None,
        description="Selected embedding provider (absent selects openai)",
        examples=["openai", "ollama", "none"],
    )

    connection: ModelOpenAiConnectionConfig = Field(
        default_factory=ModelOpenAiConnectionConfig,
        description="Shared OpenAI connection configuration",
    )

    embedding: ModelOpenAiEmbeddingConfig = Field(
        default_factory=ModelOpenAiEmbeddingConfig,
        description="Embedding feature configuration",
    )

    retry: ModelRetryConfig = Field(
        default_factory=ModelRetryConfig,
        description="Retry policy configuration",
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @field_validator("embedding_model", mode="before")
    @classmethod
    def normalize_embedding_model(cls, v: object) -> object:
        """Strip and lower-case the provider name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # ==========================================
    # Factory Methods
    # ==========================================

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ModelEmbeddingAutoconfigSettings:
        """
        Build settings from the nested YAML layout.

        Sections missing from ``data`` fall back to their environment-backed
        defaults.

        Raises:
            ValueError: If a section is not a mapping.
            pydantic.ValidationError: If configuration validation fails.
        """
        config_data: dict[str, Any] = {}

        model_section = _section(data, "model")
        if "embedding" in model_section:
            config_data["embedding_model"] = model_section["embedding"]

        if "openai" in data:
            openai_section = dict(_section(data, "openai"))
            embedding_section = _section(openai_section, "embedding")
            openai_section.pop("embedding", None)
            config_data["connection"] = ModelOpenAiConnectionConfig(**openai_section)
            if embedding_section:
                config_data["embedding"] = ModelOpenAiEmbeddingConfig(
                    **embedding_section
                )

        if "retry" in data:
            config_data["retry"] = ModelRetryConfig(**_section(data, "retry"))

        return cls.model_validate(config_data)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        *,
        interpolate_env: bool = True,
    ) -> ModelEmbeddingAutoconfigSettings:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.
            interpolate_env: Whether to interpolate environment variables.

        Raises:
            FileNotFoundError: If configuration file does not exist.
            yaml.YAMLError: If YAML parsing fails.
            ValueError: If environment variable interpolation fails.
            pydantic.ValidationError: If configuration validation fails.
        """
        data = _read_yaml_mapping(Path(path))
        if interpolate_env:
            data = expand_env_references(data)
        return cls.from_mapping(data)

    @classmethod
    def from_environment(cls) -> ModelEmbeddingAutoconfigSettings:
        """
        Load configuration from environment variables.

        The provider selection is read from OMNIEMBEDDING_MODEL_EMBEDDING;
        each nested record reads its own prefix (see the record docstrings).
        """
        return cls(
            embedding_model=os.environ.get(ENV_EMBEDDING_MODEL_SELECTION),
            connection=ModelOpenAiConnectionConfig(),
            embedding=ModelOpenAiEmbeddingConfig(),
            retry=ModelRetryConfig(),
        )


def expand_env_references(value: Any) -> Any:
    """Replace ${NAME} references in nested strings with environment values.

    Raises:
        ValueError: If a referenced variable is not set.
    """
    if isinstance(value, dict):
        return {key: expand_env_references(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_references(item) for item in value]
    if not isinstance(value, str):
        return value

    def _lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"Environment variable '{name}' referenced in config is not set")
        return os.environ[name]

    return _ENV_REFERENCE.sub(_lookup, value)


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return loaded


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Return ``data[key]`` as a mapping, treating None as empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Configuration section '{key}' must be a mapping")
    return value


__all__ = ["ModelEmbeddingAutoconfigSettings", "expand_env_references"]
