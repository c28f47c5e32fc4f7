# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret display utilities.

Renders credentials in a form safe for logs and error messages while
keeping enough of the value to tell two keys apart.
"""

from __future__ import annotations

from pydantic import SecretStr

_VISIBLE_SUFFIX = 4
_MIN_LENGTH_FOR_SUFFIX = 12


def mask_secret(value: str | SecretStr | None) -> str:
    """Mask a secret for display.

    Keys of at least 12 characters keep their first 3 and last 4 characters
    (``sk-****abcd``); shorter values are fully masked.

    Args:
        value: Plain or ``SecretStr`` secret, or None.

    Returns:
        Display-safe string. ``"(unset)"`` for None or empty values.
    """
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    if not value:
        return "(unset)"
    if len(value) < _MIN_LENGTH_FOR_SUFFIX:
        return "****"
    return f"{value[:3]}****{value[-_VISIBLE_SUFFIX:]}"


__all__ = ["mask_secret"]
