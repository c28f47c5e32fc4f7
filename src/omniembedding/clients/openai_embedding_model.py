# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""OpenAI embedding model component.

Wraps an ``OpenAiApi`` handle with default request options, a retry policy
and an observation registry. Each call sends one request to the embeddings
endpoint; transport, retry and observation behaviour belong to the
injected collaborators.

Example:
    ```python
    model = OpenAiEmbeddingModel(
        api,
        metadata_mode=EnumMetadataMode.EMBED,
        options=ModelOpenAiEmbeddingOptions(model="text-embedding-3-small"),
        retry_policy=TenacityRetryPolicy(),
    )
    vectors = model.embed(["Hello", "World"])
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from omniembedding.clients.openai_api import OpenAiApi
from omniembedding.enums import EnumMetadataMode
from omniembedding.exceptions import OmniEmbeddingError
from omniembedding.models.model_document import ModelDocument
from omniembedding.models.model_embedding_options import (
    ModelOpenAiEmbeddingOptions,
)
from omniembedding.observability.observation import (
    NOOP_OBSERVATION_REGISTRY,
    DefaultEmbeddingObservationConvention,
    EmbeddingObservationContext,
    ProtocolEmbeddingObservationConvention,
    ProtocolObservationRegistry,
)
from omniembedding.retry.retry_policy import NoRetryPolicy, ProtocolRetryPolicy

logger = logging.getLogger(__name__)


class EmbeddingResponseError(OmniEmbeddingError):
    """Raised when the embeddings response body has an unexpected shape."""


class OpenAiEmbeddingModel:
    """Embedding model backed by an OpenAI-compatible embeddings endpoint.

    Owns its ``OpenAiApi`` handle exclusively; ``close()`` releases the
    handle's transports.
    """

    def __init__(
        self,
        api: OpenAiApi,
        metadata_mode: EnumMetadataMode = EnumMetadataMode.EMBED,
        options: ModelOpenAiEmbeddingOptions | None = None,
        retry_policy: ProtocolRetryPolicy | None = None,
        observation_registry: ProtocolObservationRegistry | None = None,
    ) -> None:
        self._api = api
        self._metadata_mode = metadata_mode
        self._options = options or ModelOpenAiEmbeddingOptions()
        self._retry_policy: ProtocolRetryPolicy = retry_policy or NoRetryPolicy()
        self._observation_registry: ProtocolObservationRegistry = (
            observation_registry or NOOP_OBSERVATION_REGISTRY
        )
        self._observation_convention: ProtocolEmbeddingObservationConvention = (
            DefaultEmbeddingObservationConvention()
        )

    @property
    def api(self) -> OpenAiApi:
        return self._api

    @property
    def metadata_mode(self) -> EnumMetadataMode:
        return self._metadata_mode

    @property
    def options(self) -> ModelOpenAiEmbeddingOptions:
        return self._options

    @property
    def retry_policy(self) -> ProtocolRetryPolicy:
        return self._retry_policy

    @property
    def observation_registry(self) -> ProtocolObservationRegistry:
        return self._observation_registry

    @property
    def observation_convention(self) -> ProtocolEmbeddingObservationConvention:
        return self._observation_convention

    def set_observation_convention(
        self, convention: ProtocolEmbeddingObservationConvention
    ) -> None:
        """Replace the default observation naming convention."""
        self._observation_convention = convention

    def dimensions(self) -> int | None:
        """Configured output dimension, or None when the model default applies."""
        return self._options.dimensions

    # ==========================================
    # Embedding calls
    # ==========================================

    def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed ``texts`` in one request.

        Returns:
            One vector per input text, in input order. Empty list for
            empty input.

        Raises:
            TransientAiError: If retries are exhausted on retryable errors.
            NonTransientAiError: On non-retryable error statuses.
            EmbeddingResponseError: If the response body is malformed.
        """
        if not texts:
            return []
        payload = self._build_payload(texts)
        context = self._new_context(texts)

        def _call() -> httpx.Response:
            return self._api.sync_client().post(self._api.embeddings_path, json=payload)

        with self._observation_registry.observe(context, self._observation_convention):
            response = self._retry_policy.execute(_call)
            return self._parse_response(response, len(texts), context)

    async def aembed(self, texts: Sequence[str]) -> list[list[float]]:
        """Async variant of ``embed`` using the API's async transport."""
        if not texts:
            return []
        payload = self._build_payload(texts)
        context = self._new_context(texts)

        async def _call() -> httpx.Response:
            return await self._api.async_client().post(
                self._api.embeddings_path, json=payload
            )

        with self._observation_registry.observe(context, self._observation_convention):
            response = await self._retry_policy.aexecute(_call)
            return self._parse_response(response, len(texts), context)

    def embed_documents(self, documents: Sequence[ModelDocument]) -> list[list[float]]:
        """Embed documents, rendering metadata according to the metadata mode."""
        return self.embed(
            [doc.formatted_content(self._metadata_mode) for doc in documents]
        )

    def close(self) -> None:
        self._api.close()

    async def aclose(self) -> None:
        await self._api.aclose()

    # ==========================================
    # Helpers
    # ==========================================

    def _build_payload(self, texts: Sequence[str]) -> dict[str, Any]:
        payload = self._options.to_request_params()
        payload["input"] = list(texts)
        return payload

    def _new_context(self, texts: Sequence[str]) -> EmbeddingObservationContext:
        return EmbeddingObservationContext(
            request_model=self._options.model,
            input_count=len(texts),
            dimensions=self._options.dimensions,
        )

    @staticmethod
    def _parse_response(
        response: httpx.Response,
        expected: int,
        context: EmbeddingObservationContext,
    ) -> list[list[float]]:
        response.raise_for_status()
        body = response.json()
        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise EmbeddingResponseError(
                f"Unexpected response format from embeddings endpoint: {type(body)}"
            )

        if not all(isinstance(item, dict) for item in body["data"]):
            raise EmbeddingResponseError(
                "Unexpected response format from embeddings endpoint: "
                "data entries must be objects"
            )
        data = sorted(body["data"], key=lambda item: item.get("index", 0))
        if len(data) != expected:
            raise EmbeddingResponseError(
                f"Embeddings response length mismatch: expected {expected}, got {len(data)}"
            )

        vectors: list[list[float]] = []
        for item in data:
            embedding = item.get("embedding")
            if not isinstance(embedding, list):
                raise EmbeddingResponseError(
                    f"Expected list for embedding, got {type(embedding)}"
                )
            vectors.append(embedding)

        context.response_model = body.get("model")
        usage = body.get("usage")
        if isinstance(usage, dict):
            context.prompt_tokens = usage.get("prompt_tokens")

        return vectors


__all__ = [
    "EmbeddingResponseError",
    "OpenAiEmbeddingModel",
]
