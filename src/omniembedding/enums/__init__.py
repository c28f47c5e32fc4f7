"""
Embedding Enums Package.

    from omniembedding.enums import EnumEncodingFormat, EnumMetadataMode
"""

from omniembedding.enums.enum_encoding_format import EnumEncodingFormat
from omniembedding.enums.enum_metadata_mode import EnumMetadataMode

__all__ = [
    "EnumEncodingFormat",
    "EnumMetadataMode",
]
