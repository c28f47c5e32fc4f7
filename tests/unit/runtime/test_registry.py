# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for RegistryComponents."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from omniembedding.runtime import RegistryComponents

pytestmark = pytest.mark.unit


class TestRegistration:
    def test_first_registration_wins(self) -> None:
        registry = RegistryComponents()
        first, second = object(), object()
        assert registry.register("cap", first) is True
        assert registry.register("cap", second) is False
        assert registry.register_factory("cap", lambda: second) is False
        assert registry.get("cap") is first

    def test_capabilities_sorted(self) -> None:
        registry = RegistryComponents()
        registry.register("b", 1)
        registry.register_factory("a", lambda: 2)
        assert registry.capabilities() == ["a", "b"]


class TestLookup:
    def test_factory_runs_once(self) -> None:
        registry = RegistryComponents()
        factory = MagicMock(return_value="component")
        registry.register_factory("cap", factory)

        assert registry.is_resolved("cap") is False
        factory.assert_not_called()

        assert registry.get("cap") == "component"
        assert registry.get("cap") == "component"
        factory.assert_called_once()
        assert registry.is_resolved("cap") is True

    def test_failed_factory_stays_registered(self) -> None:
        registry = RegistryComponents()
        factory = MagicMock(side_effect=[ValueError("bad"), "component"])
        registry.register_factory("cap", factory)

        with pytest.raises(ValueError):
            registry.get("cap")
        assert registry.get("cap") == "component"

    def test_unregistered_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="missing"):
            RegistryComponents().get("missing")

    def test_get_optional(self) -> None:
        registry = RegistryComponents()
        assert registry.get_optional("cap") is None
        registry.register("cap", 7)
        assert registry.get_optional("cap") == 7


class TestShutdown:
    @pytest.mark.asyncio()
    async def test_closes_constructed_components(self) -> None:
        registry = RegistryComponents()
        async_component = MagicMock()
        async_component.aclose = AsyncMock()
        sync_component = MagicMock(spec=["close"])
        unbuilt = MagicMock()

        registry.register("async", async_component)
        registry.register("sync", sync_component)
        registry.register_factory("lazy", unbuilt)

        await registry.shutdown()

        async_component.aclose.assert_awaited_once()
        sync_component.close.assert_called_once()
        unbuilt.assert_not_called()
        assert registry.capabilities() == []
