"""Utilities for working with keys, labels, and stored values."""

from __future__ import annotations

from typing import Any

__all__ = [
    "_first_mismatch",
    "_is_key",
    "_same_value",
]

_SCALARS = (str, bytes, int, float, complex, bool)
_NUMBERS = (int, float)


def _is_key(obj: Any) -> bool:
    """Check if the object can be used as a key, i.e., it's a non-empty string."""
    return isinstance(obj, str) and obj != ""


def _first_mismatch(word: str, label: str) -> int | None:
    """Get the first position where the word and the label disagree.

    The first characters are assumed to agree already, since the label was
    selected by matching the word's first character.

    >>> _first_mismatch("waste", "water")
    2
    >>> _first_mismatch("slow", "slower") is None
    True
    """
    for i in range(1, min(len(word), len(label))):
        if word[i] != label[i]:
            return i
    return None


def _is_number(obj: Any) -> bool:
    return isinstance(obj, _NUMBERS) and not isinstance(obj, bool)


def _same_value(left: Any, right: Any) -> bool:
    """Compare stored values by identity, or by equality for scalars of the same type.

    Integers and floats compare across types, so ``2`` matches ``2.0``, but
    booleans only ever match booleans.
    """
    if left is right:
        return True
    if _is_number(left) and _is_number(right):
        return left == right
    return type(left) is type(right) and isinstance(left, _SCALARS) and left == right
