# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP clients for OpenAI-compatible embedding endpoints.

Transport libraries are imported only here; wiring code receives clients
through the builder and the embedding model constructor.
"""

from __future__ import annotations

from omniembedding.clients.openai_api import (
    AsyncClientFactory,
    OpenAiApi,
    OpenAiApiBuilder,
    SyncClientFactory,
    build_openai_api,
)
from omniembedding.clients.openai_embedding_model import (
    EmbeddingResponseError,
    OpenAiEmbeddingModel,
)
from omniembedding.clients.response_error_handler import (
    DefaultResponseErrorHandler,
    ProtocolResponseErrorHandler,
)

__all__ = [
    "AsyncClientFactory",
    "DefaultResponseErrorHandler",
    "EmbeddingResponseError",
    "OpenAiApi",
    "OpenAiApiBuilder",
    "OpenAiEmbeddingModel",
    "ProtocolResponseErrorHandler",
    "SyncClientFactory",
    "build_openai_api",
]
