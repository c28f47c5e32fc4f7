# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registration predicates evaluated by the wiring functions."""

from __future__ import annotations

import importlib.util

from omniembedding.runtime.registry import RegistryComponents


def is_module_available(module_name: str) -> bool:
    """Return True if ``module_name`` can be imported in this interpreter."""
    try:
        return importlib.util.find_spec(module_name) is not None
    except (ImportError, ValueError):
        return False


def property_matches(
    value: str | None,
    having_value: str,
    *,
    match_if_missing: bool = False,
) -> bool:
    """Return True if a configuration value selects ``having_value``.

    Comparison ignores case and surrounding whitespace. A None value yields
    ``match_if_missing``.
    """
    if value is None:
        return match_if_missing
    return value.strip().lower() == having_value.strip().lower()


def is_component_missing(registry: RegistryComponents, capability: str) -> bool:
    """Return True if nothing is registered for ``capability`` yet."""
    return not registry.contains(capability)


__all__ = [
    "is_component_missing",
    "is_module_available",
    "property_matches",
]
