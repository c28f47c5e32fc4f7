# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP response error classification for remote model calls.

The handler is attached to the API client's transport as a response hook.
It turns error statuses into TransientAiError (the retry policy may try
again) or NonTransientAiError (fail fast).
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from omniembedding.exceptions import NonTransientAiError, TransientAiError
from omniembedding.models.model_retry_config import ModelRetryConfig

logger = logging.getLogger(__name__)

# HTTP status code boundaries for error classification
_HTTP_CLIENT_ERROR_MIN = 400
_HTTP_CLIENT_ERROR_MAX = 500  # Exclusive (4xx range)


@runtime_checkable
class ProtocolResponseErrorHandler(Protocol):
    """Strategy deciding whether a response is an error and raising for it."""

    def has_error(self, response: httpx.Response) -> bool:
        """Return True if ``response`` must be handled as an error."""
        ...

    def handle_error(self, response: httpx.Response) -> None:
        """Raise the exception describing ``response``. Body is already read."""
        ...


class DefaultResponseErrorHandler:
    """Classify error statuses using the retry configuration.

    Order of checks:
        1. status in ``on_http_codes``: transient
        2. 4xx and not ``on_client_errors``: non-transient
        3. status in ``exclude_on_http_codes``: non-transient
        4. anything else: transient
    """

    def __init__(self, retry_config: ModelRetryConfig | None = None) -> None:
        self._retry_config = retry_config or ModelRetryConfig()

    def has_error(self, response: httpx.Response) -> bool:
        return response.is_error

    def handle_error(self, response: httpx.Response) -> None:
        status = response.status_code
        body = response.text or "No response body available"
        message = f"{status} - {body}"
        config = self._retry_config

        if status in config.on_http_codes:
            raise TransientAiError(message, status_code=status)

        is_client_error = _HTTP_CLIENT_ERROR_MIN <= status < _HTTP_CLIENT_ERROR_MAX
        if not config.on_client_errors and is_client_error:
            raise NonTransientAiError(message, status_code=status)

        if status in config.exclude_on_http_codes:
            raise NonTransientAiError(message, status_code=status)

        logger.debug("Classified HTTP %d as transient", status)
        raise TransientAiError(message, status_code=status)


__all__ = [
    "DefaultResponseErrorHandler",
    "ProtocolResponseErrorHandler",
]
