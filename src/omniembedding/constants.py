# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared constants for OpenAI embedding wiring.

Default endpoint values mirror the public OpenAI REST API. Environment
variable prefixes are grouped here so that settings models and error
messages reference one source.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_COMPLETIONS_PATH = "/v1/chat/completions"
DEFAULT_EMBEDDINGS_PATH = "/v1/embeddings"
DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"

# Environment variable prefixes
ENV_PREFIX_CONNECTION = "OMNIEMBEDDING_OPENAI_"
ENV_PREFIX_EMBEDDING = "OMNIEMBEDDING_OPENAI_EMBEDDING_"
ENV_PREFIX_RETRY = "OMNIEMBEDDING_RETRY_"

# Provider selection key: absent or "openai" selects this provider.
ENV_EMBEDDING_MODEL_SELECTION = "OMNIEMBEDDING_MODEL_EMBEDDING"
PROVIDER_OPENAI = "openai"

# Registry capability key for the embedding model component
CAPABILITY_EMBEDDING_MODEL = "embedding_model"

# Headers derived from connection identifiers
HEADER_OPENAI_ORGANIZATION = "OpenAI-Organization"
HEADER_OPENAI_PROJECT = "OpenAI-Project"

# Module whose presence gates registration
TRANSPORT_MODULE = "httpx"

__all__ = [
    "CAPABILITY_EMBEDDING_MODEL",
    "DEFAULT_BASE_URL",
    "DEFAULT_COMPLETIONS_PATH",
    "DEFAULT_EMBEDDINGS_PATH",
    "DEFAULT_EMBEDDING_MODEL",
    "ENV_EMBEDDING_MODEL_SELECTION",
    "ENV_PREFIX_CONNECTION",
    "ENV_PREFIX_EMBEDDING",
    "ENV_PREFIX_RETRY",
    "HEADER_OPENAI_ORGANIZATION",
    "HEADER_OPENAI_PROJECT",
    "PROVIDER_OPENAI",
    "TRANSPORT_MODULE",
]
