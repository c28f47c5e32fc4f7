# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Component registry populated by the composition root.

Components are registered under capability keys either as ready instances
or as factories. Factories run once, on the first ``get``, and the result is
cached for the lifetime of the registry. The first registration for a
capability wins; later registrations are ignored.

Thread Safety:
    This class is NOT thread-safe. Registration and first lookups are
    expected to happen sequentially during bootstrap.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class RegistryComponents:
    """Capability-keyed registry of lazily constructed singletons."""

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}
        self._factories: dict[str, Callable[[], Any]] = {}

    def contains(self, capability: str) -> bool:
        """True if an instance or factory is registered for ``capability``."""
        return capability in self._instances or capability in self._factories

    def register(self, capability: str, instance: Any) -> bool:
        """Register a ready instance.

        Returns:
            True if registered, False if the capability was already taken.
        """
        if self.contains(capability):
            logger.debug("Capability %s already registered; ignoring instance", capability)
            return False
        self._instances[capability] = instance
        return True

    def register_factory(self, capability: str, factory: Callable[[], Any]) -> bool:
        """Register a factory invoked on first lookup.

        Returns:
            True if registered, False if the capability was already taken.
        """
        if self.contains(capability):
            logger.debug("Capability %s already registered; ignoring factory", capability)
            return False
        self._factories[capability] = factory
        return True

    def is_resolved(self, capability: str) -> bool:
        """True if ``capability`` has a constructed instance."""
        return capability in self._instances

    def get(self, capability: str) -> Any:
        """Return the component for ``capability``, constructing it if needed.

        Raises:
            KeyError: If nothing is registered for ``capability``.
            Exception: Whatever the factory raises; the factory stays
                registered so a later lookup retries construction.
        """
        if capability in self._instances:
            return self._instances[capability]
        factory = self._factories.get(capability)
        if factory is None:
            raise KeyError(f"No component registered for capability '{capability}'")
        instance = factory()
        self._instances[capability] = instance
        del self._factories[capability]
        logger.info("Constructed component for capability %s", capability)
        return instance

    def get_optional(self, capability: str) -> Any | None:
        """Return the component for ``capability`` or None if unregistered."""
        if not self.contains(capability):
            return None
        return self.get(capability)

    def capabilities(self) -> list[str]:
        """Sorted list of registered capability keys."""
        return sorted(set(self._instances) | set(self._factories))

    async def shutdown(self) -> None:
        """Close every constructed component and clear the registry.

        Components exposing ``aclose()`` are awaited; otherwise ``close()``
        is called when present. Unconstructed factories are discarded.
        """
        for capability, instance in list(self._instances.items()):
            aclose = getattr(instance, "aclose", None)
            close = getattr(instance, "close", None)
            if aclose is not None and inspect.iscoroutinefunction(aclose):
                await aclose()
            elif callable(close):
                close()
            logger.debug("Closed component for capability %s", capability)
        self._instances.clear()
        self._factories.clear()


__all__ = ["RegistryComponents"]
