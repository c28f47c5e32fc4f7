# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration models for omniembedding."""

from omniembedding.models.model_autoconfig_settings import (
    ModelEmbeddingAutoconfigSettings,
)
from omniembedding.models.model_connection_config import ModelOpenAiConnectionConfig
from omniembedding.models.model_document import ModelDocument
from omniembedding.models.model_embedding_config import ModelOpenAiEmbeddingConfig
from omniembedding.models.model_embedding_options import (
    ModelOpenAiEmbeddingOptions,
)
from omniembedding.models.model_resolved_connection import ModelResolvedConnection
from omniembedding.models.model_retry_config import ModelRetryConfig

__all__ = [
    "ModelDocument",
    "ModelEmbeddingAutoconfigSettings",
    "ModelOpenAiConnectionConfig",
    "ModelOpenAiEmbeddingConfig",
    "ModelOpenAiEmbeddingOptions",
    "ModelResolvedConnection",
    "ModelRetryConfig",
]
