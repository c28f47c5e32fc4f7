# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime wiring for omniembedding.

Exports:
    RegistryComponents: Capability-keyed registry of lazy singletons.
    wire_openai_embedding_model: Conditional registration of the OpenAI
        embedding model.
    build_registry: Composition root wiring every provider.
"""

from omniembedding.runtime.conditions import (
    is_component_missing,
    is_module_available,
    property_matches,
)
from omniembedding.runtime.registry import RegistryComponents
from omniembedding.runtime.wiring import (
    build_openai_embedding_model,
    build_registry,
    should_provide_openai_embedding_model,
    wire_openai_embedding_model,
)

__all__ = [
    "RegistryComponents",
    "build_openai_embedding_model",
    "build_registry",
    "is_component_missing",
    "is_module_available",
    "property_matches",
    "should_provide_openai_embedding_model",
    "wire_openai_embedding_model",
]
