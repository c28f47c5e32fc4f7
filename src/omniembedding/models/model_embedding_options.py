# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default request options for the embeddings endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omniembedding.constants import DEFAULT_EMBEDDING_MODEL
from omniembedding.enums import EnumEncodingFormat


class ModelOpenAiEmbeddingOptions(BaseModel):
    """Request options applied to every embeddings call.

    Attributes:
        model: Embedding model identifier.
        encoding_format: Format the vectors are returned in.
        dimensions: Output dimension for models that support shortening.
        user: End-user identifier forwarded for abuse monitoring.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    model: str = Field(
        default=DEFAULT_EMBEDDING_MODEL,
        min_length=1,
        description="Embedding model identifier",
        examples=["text-embedding-ada-002", "text-embedding-3-small"],
    )
    encoding_format: EnumEncodingFormat | None = Field(
        default=None,
        description="Format the vectors are returned in",
    )
    dimensions: int | None = Field(
        default=None,
        ge=1,
        description="Output dimension for models that support shortening",
    )
    user: str | None = Field(
        default=None,
        description="End-user identifier forwarded with the request",
    )

    def to_request_params(self) -> dict[str, Any]:
        """Return the options as request body fields, omitting unset values."""
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["ModelOpenAiEmbeddingOptions"]
