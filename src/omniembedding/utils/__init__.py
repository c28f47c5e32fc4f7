"""Utility helpers for omniembedding."""

from omniembedding.utils.redaction import mask_secret

__all__ = ["mask_secret"]
