# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Retry policy configuration for remote model calls."""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from omniembedding.constants import ENV_PREFIX_RETRY


class ModelRetryConfig(BaseSettings):
    """Pydantic Settings for retrying remote model calls.

    Environment variables:
        OMNIEMBEDDING_RETRY_MAX_ATTEMPTS: int (default 10)
        OMNIEMBEDDING_RETRY_INITIAL_INTERVAL_SECONDS: float (default 2.0)
        OMNIEMBEDDING_RETRY_MULTIPLIER: float (default 5.0)
        OMNIEMBEDDING_RETRY_MAX_INTERVAL_SECONDS: float (default 180.0)
        OMNIEMBEDDING_RETRY_ON_CLIENT_ERRORS: bool (default false)
        OMNIEMBEDDING_RETRY_EXCLUDE_ON_HTTP_CODES: JSON list of status codes
        OMNIEMBEDDING_RETRY_ON_HTTP_CODES: JSON list of status codes
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX_RETRY,
        extra="ignore",
        frozen=True,
    )

    max_attempts: int = Field(default=10, ge=1, le=100)
    initial_interval_seconds: float = Field(default=2.0, gt=0)
    multiplier: float = Field(default=5.0, ge=1.0)
    max_interval_seconds: float = Field(default=180.0, gt=0)
    on_client_errors: bool = Field(
        default=False,
        description="Retry 4xx responses instead of failing fast",
    )
    exclude_on_http_codes: list[int] = Field(
        default_factory=list,
        description="Status codes that are never retried",
    )
    on_http_codes: list[int] = Field(
        default_factory=list,
        description="Status codes that are always retried",
    )

    @model_validator(mode="after")
    def validate_intervals(self) -> ModelRetryConfig:
        """Validate that the initial interval does not exceed the maximum."""
        if self.initial_interval_seconds > self.max_interval_seconds:
            raise ValueError(
                f"initial_interval_seconds ({self.initial_interval_seconds}) must not "
                f"exceed max_interval_seconds ({self.max_interval_seconds})"
            )
        return self


__all__ = ["ModelRetryConfig"]
