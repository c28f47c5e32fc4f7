# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Embedding feature configuration.

Connection fields here override the shared connection configuration when
they have text. Everything else is specific to the embeddings endpoint.
"""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from omniembedding.constants import DEFAULT_EMBEDDINGS_PATH, ENV_PREFIX_EMBEDDING
from omniembedding.enums import EnumMetadataMode
from omniembedding.models.model_embedding_options import (
    ModelOpenAiEmbeddingOptions,
)


class ModelOpenAiEmbeddingConfig(BaseSettings):
    """Pydantic Settings for the OpenAI embedding feature.

    Environment variables:
        OMNIEMBEDDING_OPENAI_EMBEDDING_BASE_URL: str (overrides shared)
        OMNIEMBEDDING_OPENAI_EMBEDDING_API_KEY: str (overrides shared)
        OMNIEMBEDDING_OPENAI_EMBEDDING_PROJECT_ID: str
        OMNIEMBEDDING_OPENAI_EMBEDDING_ORGANIZATION_ID: str
        OMNIEMBEDDING_OPENAI_EMBEDDING_HEADERS: JSON object (merged over shared)
        OMNIEMBEDDING_OPENAI_EMBEDDING_EMBEDDINGS_PATH: str (default /v1/embeddings)
        OMNIEMBEDDING_OPENAI_EMBEDDING_METADATA_MODE: ALL|EMBED|INFERENCE|NONE
        OMNIEMBEDDING_OPENAI_EMBEDDING_OPTIONS: JSON object of request options
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX_EMBEDDING,
        extra="ignore",
        frozen=True,
    )

    base_url: str | None = Field(
        default=None,
        description="Base URL override for the embeddings endpoint",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key override for the embeddings endpoint",
    )
    project_id: str | None = Field(default=None)
    organization_id: str | None = Field(default=None)
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers merged over the shared connection headers",
    )
    embeddings_path: str = Field(
        default=DEFAULT_EMBEDDINGS_PATH,
        description="Path of the embeddings endpoint relative to the base URL",
    )
    metadata_mode: EnumMetadataMode = Field(
        default=EnumMetadataMode.EMBED,
        description="Which document metadata is included in embedded text",
    )
    options: ModelOpenAiEmbeddingOptions = Field(
        default_factory=ModelOpenAiEmbeddingOptions,
        description="Default request options for every embeddings call",
    )

    @field_validator("metadata_mode", mode="before")
    @classmethod
    def normalize_metadata_mode(cls, v: object) -> object:
        """Accept metadata modes in any letter case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


__all__ = ["ModelOpenAiEmbeddingConfig"]
