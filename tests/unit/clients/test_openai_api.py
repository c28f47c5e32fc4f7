# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the OpenAiApi handle and builder.

Validates:
    - Builder validation of base URL, API key and endpoint paths
    - Immutability of the built handle's configuration
    - Lazy transport creation with bearer auth and resolved headers
    - Response error hook delegation
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
from pydantic import SecretStr

from omniembedding.clients.openai_api import OpenAiApi, build_openai_api
from omniembedding.exceptions import ConfigurationError, NonTransientAiError
from omniembedding.models import ModelResolvedConnection

pytestmark = pytest.mark.unit


@pytest.fixture
def resolved(api_key: str) -> ModelResolvedConnection:
    return ModelResolvedConnection(
        base_url="https://api.openai.com",
        api_key=SecretStr(api_key),
        headers={"X-Team": "search"},
    )


# =============================================================================
# Builder
# =============================================================================


class TestOpenAiApiBuilder:
    def test_defaults(self, api_key: str) -> None:
        api = OpenAiApi.builder().api_key(api_key).build()
        assert api.base_url == "https://api.openai.com"
        assert api.completions_path == "/v1/chat/completions"
        assert api.embeddings_path == "/v1/embeddings"
        assert api.headers == {}

    def test_missing_api_key_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="api_key"):
            OpenAiApi.builder().build()

    @pytest.mark.parametrize(
        ("setter", "name"),
        [
            ("base_url", "base_url"),
            ("completions_path", "completions_path"),
            ("embeddings_path", "embeddings_path"),
        ],
    )
    @pytest.mark.parametrize("blank", ["", "  "])
    def test_blank_values_raise(
        self, api_key: str, setter: str, name: str, blank: str
    ) -> None:
        builder = OpenAiApi.builder().api_key(api_key)
        getattr(builder, setter)(blank)
        with pytest.raises(ConfigurationError, match=name):
            builder.build()

    def test_builder_reusable(self, api_key: str) -> None:
        builder = OpenAiApi.builder().api_key(api_key).headers({"a": "1"})
        first = builder.build()
        builder.headers({"a": "2"})
        second = builder.build()
        assert first.headers == {"a": "1"}
        assert second.headers == {"a": "2"}


# =============================================================================
# build_openai_api
# =============================================================================


class TestBuildOpenAiApi:
    def test_copies_resolved_values(self, resolved: ModelResolvedConnection) -> None:
        api = build_openai_api(resolved, "/v1/chat/completions", "/v1/embeddings")
        assert api.base_url == resolved.base_url
        assert api.api_key == resolved.api_key
        assert api.headers == resolved.headers
        assert api.embeddings_url == "https://api.openai.com/v1/embeddings"
        assert api.completions_url == "https://api.openai.com/v1/chat/completions"

    def test_does_not_mutate_resolved(self, resolved: ModelResolvedConnection) -> None:
        api = build_openai_api(resolved, "/v1/chat/completions", "/v1/embeddings")
        api.headers["X-Injected"] = "1"
        assert resolved.headers == {"X-Team": "search"}
        assert "X-Injected" not in api.headers

    def test_empty_path_raises(self, resolved: ModelResolvedConnection) -> None:
        with pytest.raises(ConfigurationError, match="embeddings_path"):
            build_openai_api(resolved, "/v1/chat/completions", "")

    def test_identical_inputs_give_identical_configuration(
        self, resolved: ModelResolvedConnection
    ) -> None:
        first = build_openai_api(resolved, "/v1/chat/completions", "/v1/embeddings")
        second = build_openai_api(resolved, "/v1/chat/completions", "/v1/embeddings")
        assert first is not second
        assert (first.base_url, first.completions_path, first.embeddings_path) == (
            second.base_url,
            second.completions_path,
            second.embeddings_path,
        )
        assert first.headers == second.headers

    def test_build_creates_no_transport(self, resolved: ModelResolvedConnection) -> None:
        factory = MagicMock()
        build_openai_api(
            resolved,
            "/v1/chat/completions",
            "/v1/embeddings",
            sync_client_factory=factory,
            async_client_factory=factory,
        )
        factory.assert_not_called()


# =============================================================================
# Transport
# =============================================================================


class TestTransport:
    def test_request_headers_include_bearer(self, api: OpenAiApi, api_key: str) -> None:
        headers = api.request_headers()
        assert headers["Authorization"] == f"Bearer {api_key}"
        assert headers["X-Team"] == "search"
        assert headers["Content-Type"] == "application/json"

    def test_authorization_not_overridable_by_headers(self, api_key: str) -> None:
        api = (
            OpenAiApi.builder()
            .api_key(api_key)
            .headers({"Authorization": "Basic abc"})
            .build()
        )
        assert api.request_headers()["Authorization"] == f"Bearer {api_key}"

    def test_sync_client_created_once(self, api: OpenAiApi) -> None:
        assert api.sync_client() is api.sync_client()
        api.close()

    def test_request_carries_headers(
        self, api: OpenAiApi, recording_handler: Any, api_key: str
    ) -> None:
        with api:
            api.sync_client().post(api.embeddings_path, json={"input": ["x"]})
        request = recording_handler.requests[0]
        assert str(request.url) == "https://api.openai.com/v1/embeddings"
        assert request.headers["Authorization"] == f"Bearer {api_key}"
        assert request.headers["X-Team"] == "search"

    def test_error_response_routed_to_handler(
        self, api: OpenAiApi, recording_handler: Any
    ) -> None:
        recording_handler.queue(httpx.Response(401, json={"error": "bad key"}))
        with api, pytest.raises(NonTransientAiError, match="401"):
            api.sync_client().post(api.embeddings_path, json={"input": ["x"]})

    def test_custom_error_handler(self, recording_handler: Any, api_key: str) -> None:
        handler = MagicMock()
        handler.has_error.return_value = False

        def _factory(**kwargs: Any) -> httpx.Client:
            return httpx.Client(transport=httpx.MockTransport(recording_handler), **kwargs)

        api = (
            OpenAiApi.builder()
            .api_key(api_key)
            .sync_client_factory(_factory)
            .response_error_handler(handler)
            .build()
        )
        recording_handler.queue(httpx.Response(500))
        with api:
            response = api.sync_client().post(api.embeddings_path, json={})
        assert response.status_code == 500
        handler.has_error.assert_called_once()
        handler.handle_error.assert_not_called()

    @pytest.mark.asyncio()
    async def test_async_client_created_lazily_and_closed(
        self, api: OpenAiApi, recording_handler: Any
    ) -> None:
        client = api.async_client()
        assert api.async_client() is client
        await client.post(api.embeddings_path, json={"input": ["x"]})
        await api.aclose()
        assert client.is_closed
        assert len(recording_handler.requests) == 1

    def test_repr_masks_api_key(self, api: OpenAiApi, api_key: str) -> None:
        assert api_key not in repr(api)
