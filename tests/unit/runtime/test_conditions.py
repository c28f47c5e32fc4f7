# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for registration predicates."""

from __future__ import annotations

import pytest

from omniembedding.runtime import (
    RegistryComponents,
    is_component_missing,
    is_module_available,
    property_matches,
)

pytestmark = pytest.mark.unit


class TestPropertyMatches:
    def test_missing_uses_match_if_missing(self) -> None:
        assert property_matches(None, "openai", match_if_missing=True) is True
        assert property_matches(None, "openai") is False

    @pytest.mark.parametrize("value", ["openai", "OpenAI", "  openai "])
    def test_match_ignores_case_and_whitespace(self, value: str) -> None:
        assert property_matches(value, "openai") is True

    @pytest.mark.parametrize("value", ["ollama", "", "none"])
    def test_other_values_do_not_match(self, value: str) -> None:
        assert property_matches(value, "openai", match_if_missing=True) is False


class TestIsModuleAvailable:
    def test_installed_module(self) -> None:
        assert is_module_available("httpx") is True

    def test_missing_module(self) -> None:
        assert is_module_available("omniembedding_no_such_module") is False

    def test_missing_parent_package(self) -> None:
        assert is_module_available("omniembedding_no_such_pkg.sub") is False


class TestIsComponentMissing:
    def test_tracks_registration(self) -> None:
        registry = RegistryComponents()
        assert is_component_missing(registry, "cap") is True
        registry.register_factory("cap", object)
        assert is_component_missing(registry, "cap") is False
