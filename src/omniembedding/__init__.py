# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""OmniEmbedding - conditional wiring of the OpenAI embedding model.

Quick Start:
    >>> from omniembedding import (
    ...     CAPABILITY_EMBEDDING_MODEL,
    ...     ModelEmbeddingAutoconfigSettings,
    ...     build_registry,
    ... )
    >>> settings = ModelEmbeddingAutoconfigSettings.from_environment()
    >>> registry = build_registry(settings)
    >>> model = registry.get(CAPABILITY_EMBEDDING_MODEL)  # doctest: +SKIP
    >>> vectors = model.embed(["Hello world"])  # doctest: +SKIP

Client classes are loaded lazily so the wiring can run (and decline) without
the transport library installed.
"""

from typing import TYPE_CHECKING

from omniembedding.constants import CAPABILITY_EMBEDDING_MODEL
from omniembedding.exceptions import (
    ConfigurationError,
    NonTransientAiError,
    OmniEmbeddingError,
    TransientAiError,
)
from omniembedding.models import (
    ModelEmbeddingAutoconfigSettings,
    ModelOpenAiConnectionConfig,
    ModelOpenAiEmbeddingConfig,
)
from omniembedding.resolution import resolve_connection_properties
from omniembedding.runtime import (
    RegistryComponents,
    build_registry,
    wire_openai_embedding_model,
)

# Lazy imports for runtime - only loaded when accessed
_lazy_imports = {
    "OpenAiApi": "omniembedding.clients.openai_api",
    "OpenAiEmbeddingModel": "omniembedding.clients.openai_embedding_model",
}

__version__ = "0.1.0"

__all__ = [
    # Wiring
    "CAPABILITY_EMBEDDING_MODEL",
    "RegistryComponents",
    "build_registry",
    "wire_openai_embedding_model",
    # Configuration
    "ModelEmbeddingAutoconfigSettings",
    "ModelOpenAiConnectionConfig",
    "ModelOpenAiEmbeddingConfig",
    "resolve_connection_properties",
    # Clients
    "OpenAiApi",
    "OpenAiEmbeddingModel",
    # Exceptions
    "ConfigurationError",
    "NonTransientAiError",
    "OmniEmbeddingError",
    "TransientAiError",
]


def __getattr__(name: str):
    """Lazy import for module attributes."""
    if name in _lazy_imports:
        import importlib

        module = importlib.import_module(_lazy_imports[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Type checking imports for IDE support
if TYPE_CHECKING:
    from omniembedding.clients.openai_api import OpenAiApi
    from omniembedding.clients.openai_embedding_model import OpenAiEmbeddingModel
