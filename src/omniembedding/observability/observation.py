# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Observation hooks for embedding calls.

An observation registry wraps each embedding call. The convention decides
how the observation is named. The package ships a no-op registry (default)
and a registry that logs durations; metric backends plug in through
``ProtocolObservationRegistry``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_OBSERVATION_NAME = "gen_ai.client.operation"
OPERATION_EMBEDDING = "embedding"
PROVIDER_NAME_OPENAI = "openai"


@dataclass
class EmbeddingObservationContext:
    """Mutable record describing one embedding call.

    Attributes:
        request_model: Model named in the request.
        input_count: Number of texts in the request.
        dimensions: Requested output dimension, if any.
        response_model: Model reported by the response.
        prompt_tokens: Prompt token usage reported by the response.
        error: Exception raised by the call, if any.
    """

    request_model: str
    input_count: int
    dimensions: int | None = None
    operation: str = OPERATION_EMBEDDING
    provider: str = PROVIDER_NAME_OPENAI
    response_model: str | None = None
    prompt_tokens: int | None = None
    error: BaseException | None = None
    attributes: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class ProtocolEmbeddingObservationConvention(Protocol):
    """Naming strategy for embedding observations."""

    def get_name(self) -> str:
        """Return the observation name."""
        ...

    def get_contextual_name(self, context: EmbeddingObservationContext) -> str:
        """Return a name specific to this call."""
        ...


class DefaultEmbeddingObservationConvention:
    """Names observations ``gen_ai.client.operation`` / ``embedding <model>``."""

    def get_name(self) -> str:
        return DEFAULT_OBSERVATION_NAME

    def get_contextual_name(self, context: EmbeddingObservationContext) -> str:
        if context.request_model:
            return f"{context.operation} {context.request_model}"
        return context.operation


@runtime_checkable
class ProtocolObservationRegistry(Protocol):
    """Registry producing a scope around each observed call."""

    def observe(
        self,
        context: EmbeddingObservationContext,
        convention: ProtocolEmbeddingObservationConvention,
    ) -> AbstractContextManager[EmbeddingObservationContext]:
        """Return a context manager that observes one call."""
        ...


class NoopObservationRegistry:
    """Observation registry that records nothing."""

    @contextmanager
    def observe(
        self,
        context: EmbeddingObservationContext,
        convention: ProtocolEmbeddingObservationConvention,
    ) -> Iterator[EmbeddingObservationContext]:
        yield context


class LoggingObservationRegistry:
    """Observation registry that logs each call's outcome and duration."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    @contextmanager
    def observe(
        self,
        context: EmbeddingObservationContext,
        convention: ProtocolEmbeddingObservationConvention,
    ) -> Iterator[EmbeddingObservationContext]:
        name = convention.get_contextual_name(context)
        started = time.perf_counter()
        try:
            yield context
        except Exception as exc:
            context.error = exc
            raise
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.log(
                self._level,
                "%s [%s] inputs=%d status=%s duration_ms=%.1f",
                convention.get_name(),
                name,
                context.input_count,
                "error" if context.error is not None else "ok",
                elapsed_ms,
                extra={
                    "observation": name,
                    "provider": context.provider,
                    "prompt_tokens": context.prompt_tokens,
                },
            )


NOOP_OBSERVATION_REGISTRY = NoopObservationRegistry()

__all__ = [
    "DEFAULT_OBSERVATION_NAME",
    "NOOP_OBSERVATION_REGISTRY",
    "DefaultEmbeddingObservationConvention",
    "EmbeddingObservationContext",
    "LoggingObservationRegistry",
    "NoopObservationRegistry",
    "ProtocolEmbeddingObservationConvention",
    "ProtocolObservationRegistry",
]
