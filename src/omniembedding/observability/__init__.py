"""Observation hooks for embedding calls."""

from omniembedding.observability.observation import (
    NOOP_OBSERVATION_REGISTRY,
    DefaultEmbeddingObservationConvention,
    EmbeddingObservationContext,
    LoggingObservationRegistry,
    NoopObservationRegistry,
    ProtocolEmbeddingObservationConvention,
    ProtocolObservationRegistry,
)

__all__ = [
    "NOOP_OBSERVATION_REGISTRY",
    "DefaultEmbeddingObservationConvention",
    "EmbeddingObservationContext",
    "LoggingObservationRegistry",
    "NoopObservationRegistry",
    "ProtocolEmbeddingObservationConvention",
    "ProtocolObservationRegistry",
]
