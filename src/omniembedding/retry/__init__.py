"""Retry policies for remote model calls."""

from omniembedding.retry.retry_policy import (
    RETRYABLE_EXCEPTIONS,
    NoRetryPolicy,
    ProtocolRetryPolicy,
    TenacityRetryPolicy,
)

__all__ = [
    "RETRYABLE_EXCEPTIONS",
    "NoRetryPolicy",
    "ProtocolRetryPolicy",
    "TenacityRetryPolicy",
]
