# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for observation registries and conventions."""

from __future__ import annotations

import logging

import pytest

from omniembedding.observability import (
    DefaultEmbeddingObservationConvention,
    EmbeddingObservationContext,
    LoggingObservationRegistry,
    NoopObservationRegistry,
    ProtocolEmbeddingObservationConvention,
    ProtocolObservationRegistry,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def context() -> EmbeddingObservationContext:
    return EmbeddingObservationContext(request_model="text-embedding-3-small", input_count=2)


class TestDefaultConvention:
    def test_protocol_conformance(self) -> None:
        assert isinstance(
            DefaultEmbeddingObservationConvention(),
            ProtocolEmbeddingObservationConvention,
        )

    def test_names(self, context: EmbeddingObservationContext) -> None:
        convention = DefaultEmbeddingObservationConvention()
        assert convention.get_name() == "gen_ai.client.operation"
        assert (
            convention.get_contextual_name(context)
            == "embedding text-embedding-3-small"
        )

    def test_contextual_name_without_model(self) -> None:
        context = EmbeddingObservationContext(request_model="", input_count=1)
        assert (
            DefaultEmbeddingObservationConvention().get_contextual_name(context)
            == "embedding"
        )


class TestRegistries:
    @pytest.mark.parametrize(
        "registry", [NoopObservationRegistry(), LoggingObservationRegistry()]
    )
    def test_protocol_conformance(self, registry: object) -> None:
        assert isinstance(registry, ProtocolObservationRegistry)

    def test_noop_yields_context(self, context: EmbeddingObservationContext) -> None:
        with NoopObservationRegistry().observe(
            context, DefaultEmbeddingObservationConvention()
        ) as observed:
            assert observed is context

    def test_logging_records_error(
        self,
        context: EmbeddingObservationContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        registry = LoggingObservationRegistry(level=logging.INFO)
        with caplog.at_level(logging.INFO), pytest.raises(RuntimeError):
            with registry.observe(context, DefaultEmbeddingObservationConvention()):
                raise RuntimeError("boom")
        assert isinstance(context.error, RuntimeError)
        assert "status=error" in caplog.text
