"""Connection property resolution."""

from omniembedding.resolution.connection_resolver import (
    has_text,
    merge_headers,
    resolve_connection_properties,
)

__all__ = [
    "has_text",
    "merge_headers",
    "resolve_connection_properties",
]
