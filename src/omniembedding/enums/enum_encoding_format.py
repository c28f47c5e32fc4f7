"""
Embedding encoding format enum for omniembedding.
"""

from enum import Enum


class EnumEncodingFormat(str, Enum):
    """Wire formats the embeddings endpoint can return vectors in."""
    FLOAT = "float"
    BASE64 = "base64"


__all__ = [
    "EnumEncodingFormat",
]
