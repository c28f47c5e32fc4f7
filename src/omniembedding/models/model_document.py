# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Document record embedded through ``OpenAiEmbeddingModel.embed_documents``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omniembedding.enums import EnumMetadataMode


class ModelDocument(BaseModel):
    """Text content with optional metadata.

    Attributes:
        content: Document text.
        metadata: Key/value metadata; rendered as ``key: value`` lines
            when the metadata mode includes metadata.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    def formatted_content(self, mode: EnumMetadataMode) -> str:
        """Return the text to embed for ``mode``."""
        if not mode.includes_metadata or not self.metadata:
            return self.content
        metadata_text = "\n".join(f"{k}: {v}" for k, v in self.metadata.items())
        return f"{metadata_text}\n\n{self.content}"


__all__ = ["ModelDocument"]
