# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exceptions for embedding model wiring.

Error Codes:
    - EMBWIRE_001: Configuration cannot be resolved (fatal at startup)
    - EMBWIRE_002: Remote API returned a retryable error status
    - EMBWIRE_003: Remote API returned a non-retryable error status
"""

from __future__ import annotations


class OmniEmbeddingError(Exception):
    """Base exception for all omniembedding errors."""


class ConfigurationError(OmniEmbeddingError, ValueError):
    """Raised when required connection settings cannot be resolved.

    Error code: EMBWIRE_001 - Configuration cannot be resolved (non-recoverable).

    Raised by the connection resolver and the API client builder when a
    required value (base URL, API key, endpoint path) is empty after all
    sources have been consulted. Propagates to the composition root and
    aborts startup.

    Example:
        >>> raise ConfigurationError("OpenAI API key must be set.")
        ConfigurationError: OpenAI API key must be set.
    """


class TransientAiError(OmniEmbeddingError):
    """Raised for HTTP error responses that may succeed on retry.

    Error code: EMBWIRE_002.

    Attributes:
        status_code: HTTP status code of the failed response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NonTransientAiError(OmniEmbeddingError):
    """Raised for HTTP error responses that will not succeed on retry.

    Error code: EMBWIRE_003.

    Attributes:
        status_code: HTTP status code of the failed response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "ConfigurationError",
    "NonTransientAiError",
    "OmniEmbeddingError",
    "TransientAiError",
]
