# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Retry policies wrapped around remote model calls.

``TenacityRetryPolicy`` configures tenacity from ``ModelRetryConfig``:
exponential waits starting at ``initial_interval_seconds``, growing by
``multiplier`` and capped at ``max_interval_seconds``. Only
TransientAiError and httpx transport errors are retried; everything else
propagates on the first attempt.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar, runtime_checkable

import httpx
from tenacity import (
    AsyncRetrying,
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from omniembedding.exceptions import TransientAiError
from omniembedding.models.model_retry_config import ModelRetryConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    TransientAiError,
    httpx.TransportError,
)


@runtime_checkable
class ProtocolRetryPolicy(Protocol):
    """Executes a callable, retrying according to the policy."""

    def execute(self, fn: Callable[[], T]) -> T:
        """Run ``fn`` until it succeeds or the policy gives up."""
        ...

    async def aexecute(self, fn: Callable[[], Awaitable[T]]) -> T:
        """Await ``fn()`` until it succeeds or the policy gives up."""
        ...


class NoRetryPolicy:
    """Runs the callable exactly once."""

    def execute(self, fn: Callable[[], T]) -> T:
        return fn()

    async def aexecute(self, fn: Callable[[], Awaitable[T]]) -> T:
        return await fn()


class TenacityRetryPolicy:
    """Retry policy backed by tenacity.

    Args:
        config: Retry settings.
        sleep: Blocking sleep used between sync attempts.
        async_sleep: Sleep coroutine used between async attempts.
    """

    def __init__(
        self,
        config: ModelRetryConfig | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._config = config or ModelRetryConfig()
        self._sleep = sleep
        self._async_sleep = async_sleep

    @property
    def config(self) -> ModelRetryConfig:
        return self._config

    def _retry_kwargs(self) -> dict[str, object]:
        return {
            "stop": stop_after_attempt(self._config.max_attempts),
            "wait": wait_exponential(
                multiplier=self._config.initial_interval_seconds,
                exp_base=self._config.multiplier,
                max=self._config.max_interval_seconds,
            ),
            "retry": retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            "before_sleep": before_sleep_log(logger, logging.WARNING),
            "reraise": True,
        }

    def execute(self, fn: Callable[[], T]) -> T:
        retrying = Retrying(sleep=self._sleep, **self._retry_kwargs())
        return retrying(fn)

    async def aexecute(self, fn: Callable[[], Awaitable[T]]) -> T:
        retrying = AsyncRetrying(sleep=self._async_sleep, **self._retry_kwargs())
        return await retrying(fn)


__all__ = [
    "RETRYABLE_EXCEPTIONS",
    "NoRetryPolicy",
    "ProtocolRetryPolicy",
    "TenacityRetryPolicy",
]
