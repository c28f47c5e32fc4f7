# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolved connection produced by merging shared and feature configs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from omniembedding.utils.redaction import mask_secret


class ModelResolvedConnection(BaseModel):
    """Connection values after fallback and header merging.

    Attributes:
        base_url: Non-empty base URL.
        api_key: Non-empty API key.
        headers: Merged headers, including derived OpenAI identifier headers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(min_length=1)
    api_key: SecretStr
    headers: dict[str, str] = Field(default_factory=dict)

    def describe(self) -> str:
        """Return a log-safe one-line summary."""
        return (
            f"base_url={self.base_url} api_key={mask_secret(self.api_key)} "
            f"headers={sorted(self.headers)}"
        )


__all__ = ["ModelResolvedConnection"]
