"""
Pytest configuration and fixtures for omniembedding tests.

Shared fixtures for configuration records, API handles and httpx mock
transports. Every test runs with OMNIEMBEDDING_* environment variables
removed so settings defaults are deterministic.
"""

import json
import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from omniembedding.clients.openai_api import OpenAiApi
from omniembedding.models import (
    ModelOpenAiConnectionConfig,
    ModelOpenAiEmbeddingConfig,
)

# =========================================================================
# Environment isolation
# =========================================================================


@pytest.fixture(autouse=True)
def _clean_omniembedding_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove OMNIEMBEDDING_* variables for the duration of each test."""
    for name in list(os.environ):
        if name.startswith("OMNIEMBEDDING_"):
            monkeypatch.delenv(name, raising=False)


# =========================================================================
# Configuration Fixtures
# =========================================================================


@pytest.fixture
def api_key() -> str:
    """Provide a realistic-looking test API key."""
    return "sk-test-1234567890abcdef"


@pytest.fixture
def common_config(api_key: str) -> ModelOpenAiConnectionConfig:
    """Shared connection configuration with a key and one header."""
    return ModelOpenAiConnectionConfig(
        base_url="https://api.openai.com",
        api_key=api_key,
        headers={"X-Team": "search"},
    )


@pytest.fixture
def embedding_config() -> ModelOpenAiEmbeddingConfig:
    """Embedding configuration with no connection overrides."""
    return ModelOpenAiEmbeddingConfig()


# =========================================================================
# Transport Fixtures
# =========================================================================


def embeddings_body(vectors: list[list[float]], model: str = "text-embedding-ada-002") -> dict[str, Any]:
    """Build an OpenAI-shaped embeddings response body."""
    return {
        "object": "list",
        "model": model,
        "data": [
            {"object": "embedding", "index": i, "embedding": vector}
            for i, vector in enumerate(vectors)
        ],
        "usage": {"prompt_tokens": 3, "total_tokens": 3},
    }


class RecordingHandler:
    """httpx MockTransport handler that records requests and replays responses."""

    def __init__(self, responses: list[httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses or [])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json=embeddings_body([[0.1, 0.2]]))

    def queue(self, *responses: httpx.Response) -> None:
        self._responses.extend(responses)

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_embeddings_body() -> Callable[..., dict[str, Any]]:
    """Expose the response body builder to tests."""
    return embeddings_body


@pytest.fixture
def recording_handler() -> RecordingHandler:
    """Handler returning a single-vector response unless primed."""
    return RecordingHandler()


@pytest.fixture
def sync_factory(recording_handler: RecordingHandler) -> Callable[..., httpx.Client]:
    """Sync client factory routed through the recording handler."""

    def _factory(**kwargs: Any) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(recording_handler), **kwargs)

    return _factory


@pytest.fixture
def async_factory(recording_handler: RecordingHandler) -> Callable[..., httpx.AsyncClient]:
    """Async client factory routed through the recording handler."""

    def _factory(**kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(recording_handler), **kwargs
        )

    return _factory


@pytest.fixture
def api(
    api_key: str,
    sync_factory: Callable[..., httpx.Client],
    async_factory: Callable[..., httpx.AsyncClient],
) -> OpenAiApi:
    """OpenAiApi handle wired to the recording handler."""
    return (
        OpenAiApi.builder()
        .base_url("https://api.openai.com")
        .api_key(api_key)
        .headers({"X-Team": "search"})
        .sync_client_factory(sync_factory)
        .async_client_factory(async_factory)
        .build()
    )
