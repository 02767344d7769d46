"""ASCII case conversion."""

from __future__ import annotations

import string

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters; other characters are left as they are."""
    return text.translate(_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters; other characters are left as they are."""
    return text.translate(_UPPER)