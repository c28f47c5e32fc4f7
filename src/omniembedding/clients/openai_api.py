# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Immutable OpenAI API client handle and its builder.

The handle stores where and how to reach the API: base URL, credential,
headers and endpoint paths. Transport clients are created lazily on first
use through injected factories, so building a handle never opens a
connection.

Example:
    ```python
    api = (
        OpenAiApi.builder()
        .base_url("https://api.openai.com")
        .api_key("sk-...")
        .embeddings_path("/v1/embeddings")
        .build()
    )
    with api:
        response = api.sync_client().post(api.embeddings_path, json=payload)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import SecretStr

from omniembedding.clients.response_error_handler import (
    DefaultResponseErrorHandler,
    ProtocolResponseErrorHandler,
)
from omniembedding.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_COMPLETIONS_PATH,
    DEFAULT_EMBEDDINGS_PATH,
)
from omniembedding.exceptions import ConfigurationError
from omniembedding.models.model_resolved_connection import ModelResolvedConnection
from omniembedding.utils.redaction import mask_secret

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

SyncClientFactory = Callable[..., httpx.Client]
AsyncClientFactory = Callable[..., httpx.AsyncClient]


class OpenAiApi:
    """Configured handle to an OpenAI-compatible REST API.

    Construct through ``OpenAiApi.builder()``. Configuration is read-only
    after construction; only the lazily created transport clients change.

    Thread Safety:
        Configuration reads are safe from any thread. Transport creation
        is not synchronized and is expected to happen on first use from
        the thread that owns the embedding model.
    """

    __slots__ = (
        "_api_key",
        "_async_client",
        "_async_client_factory",
        "_base_url",
        "_completions_path",
        "_embeddings_path",
        "_headers",
        "_response_error_handler",
        "_sync_client",
        "_sync_client_factory",
    )

    def __init__(
        self,
        *,
        base_url: str,
        api_key: SecretStr,
        headers: Mapping[str, str],
        completions_path: str,
        embeddings_path: str,
        sync_client_factory: SyncClientFactory,
        async_client_factory: AsyncClientFactory,
        response_error_handler: ProtocolResponseErrorHandler,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._headers = dict(headers)
        self._completions_path = completions_path
        self._embeddings_path = embeddings_path
        self._sync_client_factory = sync_client_factory
        self._async_client_factory = async_client_factory
        self._response_error_handler = response_error_handler
        self._sync_client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None

    @staticmethod
    def builder() -> OpenAiApiBuilder:
        """Return a new builder with default endpoint values."""
        return OpenAiApiBuilder()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> SecretStr:
        return self._api_key

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the configured headers (without Authorization)."""
        return dict(self._headers)

    @property
    def completions_path(self) -> str:
        return self._completions_path

    @property
    def embeddings_path(self) -> str:
        return self._embeddings_path

    @property
    def response_error_handler(self) -> ProtocolResponseErrorHandler:
        return self._response_error_handler

    @property
    def embeddings_url(self) -> str:
        """Full URL of the embeddings endpoint."""
        return _join_url(self._base_url, self._embeddings_path)

    @property
    def completions_url(self) -> str:
        """Full URL of the chat completions endpoint."""
        return _join_url(self._base_url, self._completions_path)

    def request_headers(self) -> dict[str, str]:
        """Headers sent with every request, including the bearer token."""
        headers = {"Content-Type": "application/json"}
        headers.update(self._headers)
        headers["Authorization"] = f"Bearer {self._api_key.get_secret_value()}"
        return headers

    # ==========================================
    # Transport
    # ==========================================

    def sync_client(self) -> httpx.Client:
        """Return the synchronous transport, creating it on first use."""
        if self._sync_client is None:
            self._sync_client = self._sync_client_factory(
                base_url=self._base_url,
                headers=self.request_headers(),
                event_hooks={"response": [self._check_response]},
            )
            logger.debug("OpenAiApi sync transport created for %s", self._base_url)
        return self._sync_client

    def async_client(self) -> httpx.AsyncClient:
        """Return the asynchronous transport, creating it on first use."""
        if self._async_client is None:
            self._async_client = self._async_client_factory(
                base_url=self._base_url,
                headers=self.request_headers(),
                event_hooks={"response": [self._acheck_response]},
            )
            logger.debug("OpenAiApi async transport created for %s", self._base_url)
        return self._async_client

    def _check_response(self, response: httpx.Response) -> None:
        if self._response_error_handler.has_error(response):
            response.read()
            self._response_error_handler.handle_error(response)

    async def _acheck_response(self, response: httpx.Response) -> None:
        if self._response_error_handler.has_error(response):
            await response.aread()
            self._response_error_handler.handle_error(response)

    def close(self) -> None:
        """Close the synchronous transport. Safe to call multiple times."""
        if self._sync_client is not None:
            self._sync_client.close()
            self._sync_client = None

    async def aclose(self) -> None:
        """Close both transports. Safe to call multiple times."""
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None
        self.close()

    def __enter__(self) -> OpenAiApi:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"OpenAiApi(base_url={self._base_url!r}, "
            f"api_key={mask_secret(self._api_key)!r}, "
            f"completions_path={self._completions_path!r}, "
            f"embeddings_path={self._embeddings_path!r})"
        )


class OpenAiApiBuilder:
    """Fluent builder for ``OpenAiApi``.

    Every setter returns the builder. ``build()`` validates and returns a
    new handle; the builder can be reused afterwards.
    """

    def __init__(self) -> None:
        self._base_url: str = DEFAULT_BASE_URL
        self._api_key: SecretStr | None = None
        self._headers: dict[str, str] = {}
        self._completions_path: str = DEFAULT_COMPLETIONS_PATH
        self._embeddings_path: str = DEFAULT_EMBEDDINGS_PATH
        self._sync_client_factory: SyncClientFactory = httpx.Client
        self._async_client_factory: AsyncClientFactory = httpx.AsyncClient
        self._response_error_handler: ProtocolResponseErrorHandler = (
            DefaultResponseErrorHandler()
        )

    def base_url(self, base_url: str) -> OpenAiApiBuilder:
        self._base_url = base_url
        return self

    def api_key(self, api_key: str | SecretStr) -> OpenAiApiBuilder:
        if isinstance(api_key, str):
            api_key = SecretStr(api_key)
        self._api_key = api_key
        return self

    def headers(self, headers: Mapping[str, str]) -> OpenAiApiBuilder:
        self._headers = dict(headers)
        return self

    def completions_path(self, path: str) -> OpenAiApiBuilder:
        self._completions_path = path
        return self

    def embeddings_path(self, path: str) -> OpenAiApiBuilder:
        self._embeddings_path = path
        return self

    def sync_client_factory(self, factory: SyncClientFactory) -> OpenAiApiBuilder:
        self._sync_client_factory = factory
        return self

    def async_client_factory(self, factory: AsyncClientFactory) -> OpenAiApiBuilder:
        self._async_client_factory = factory
        return self

    def response_error_handler(
        self, handler: ProtocolResponseErrorHandler
    ) -> OpenAiApiBuilder:
        self._response_error_handler = handler
        return self

    def build(self) -> OpenAiApi:
        """Validate the collected values and return a new ``OpenAiApi``.

        Raises:
            ConfigurationError: If base URL, API key or a path is empty.
        """
        _require_text(self._base_url, "base_url")
        if self._api_key is None or not self._api_key.get_secret_value().strip():
            raise ConfigurationError("api_key cannot be null or empty")
        _require_text(self._completions_path, "completions_path")
        _require_text(self._embeddings_path, "embeddings_path")

        return OpenAiApi(
            base_url=self._base_url,
            api_key=self._api_key,
            headers=self._headers,
            completions_path=self._completions_path,
            embeddings_path=self._embeddings_path,
            sync_client_factory=self._sync_client_factory,
            async_client_factory=self._async_client_factory,
            response_error_handler=self._response_error_handler,
        )


def build_openai_api(
    resolved: ModelResolvedConnection,
    completions_path: str,
    embeddings_path: str,
    *,
    sync_client_factory: SyncClientFactory | None = None,
    async_client_factory: AsyncClientFactory | None = None,
    response_error_handler: ProtocolResponseErrorHandler | None = None,
) -> OpenAiApi:
    """Build an ``OpenAiApi`` from a resolved connection.

    Missing factories and handler fall back to ``httpx.Client``,
    ``httpx.AsyncClient`` and ``DefaultResponseErrorHandler``.

    Raises:
        ConfigurationError: If either path is empty.
    """
    builder = (
        OpenAiApi.builder()
        .base_url(resolved.base_url)
        .api_key(resolved.api_key)
        .headers(resolved.headers)
        .completions_path(completions_path)
        .embeddings_path(embeddings_path)
    )
    if sync_client_factory is not None:
        builder.sync_client_factory(sync_client_factory)
    if async_client_factory is not None:
        builder.async_client_factory(async_client_factory)
    if response_error_handler is not None:
        builder.response_error_handler(response_error_handler)
    return builder.build()


def _require_text(value: Any, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{name} cannot be null or empty")


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


__all__ = [
    "AsyncClientFactory",
    "OpenAiApi",
    "OpenAiApiBuilder",
    "SyncClientFactory",
    "build_openai_api",
]
