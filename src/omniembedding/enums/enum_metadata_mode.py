"""
Document metadata mode enum for omniembedding.

Controls which document metadata is included in the text sent for embedding.
"""

from enum import Enum


class EnumMetadataMode(str, Enum):
    """Metadata inclusion modes for document text."""
    ALL = "ALL"
    EMBED = "EMBED"
    INFERENCE = "INFERENCE"
    NONE = "NONE"

    @property
    def includes_metadata(self) -> bool:
        """True when metadata is embedded alongside document content."""
        return self in (EnumMetadataMode.ALL, EnumMetadataMode.EMBED)


__all__ = [
    "EnumMetadataMode",
]
