"""Positional access and simple predicates over a single string."""

from __future__ import annotations

import warnings
from collections import Counter
from typing import Any

from .guards import require, require_non_negative


def at(value: str, index: int) -> str | None:
    """Return the character at ``index``; negative indexes count from the end.

    Example:
        >>> at("foobar", 0), at("foobar", -1), at("foobar", 10)
        ('f', 'r', None)
    """
    if not value:
        return None
    length = len(value)
    position = index if index >= 0 else length + index
    if 0 <= position < length:
        return value[position]
    return None


def first(value: str, n: int) -> str | None:
    """Return the first ``n`` characters, or ``None`` for a missing or empty value."""
    if not value:
        return None
    require_non_negative(n, "n")
    return value[:n]


def head(value: str) -> str | None:
    """Return the first character, or ``None`` for a missing or empty value."""
    return first(value, 1)


def last(value: str, n: int) -> str:
    """Return the last ``n`` characters; the whole value when ``n`` exceeds it.

    Example:
        >>> last("foo", 2), last("foo", 10), last("foo", 0)
        ('oo', 'foo', '')
    """
    require(value)
    require_non_negative(n, "n")
    if n > len(value):
        return value
    return value[len(value) - n :]


def tail(value: str) -> str | None:
    """Return everything but the first character, or ``None`` when empty."""
    if not value:
        return None
    return value[1:]


def length(value: str) -> int:
    """Return the number of characters in ``value``."""
    require(value)
    return len(value)


def chars_count(value: str | None) -> dict[str, int]:
    """Count occurrences of each character, in order of first appearance.

    Example:
        >>> chars_count("abaca")
        {'a': 3, 'b': 1, 'c': 1}
        >>> chars_count(None)
        {}
    """
    if not value:
        return {}
    return dict(Counter(value))


def is_blank(value: str | None) -> bool:
    """Return True for ``None`` or the empty string."""
    return value is None or value == ""


def is_string(value: Any) -> bool:
    """Return True when ``value`` is a ``str``.

    Raises:
        InvalidArgumentError: When ``value`` is ``None``.
    """
    require(value)
    return isinstance(value, str)


def unequal(first_value: str | None, second_value: str | None) -> bool:
    """Return True when the two values differ."""
    return first_value != second_value


def inequal(first_value: str | None, second_value: str | None) -> bool:
    """Deprecated spelling of :func:`unequal`."""
    warnings.warn("inequal() is deprecated, use unequal()", DeprecationWarning, stacklevel=2)
    return unequal(first_value, second_value)


__all__ = [
    "at",
    "chars_count",
    "first",
    "head",
    "inequal",
    "is_blank",
    "is_string",
    "last",
    "length",
    "tail",
    "unequal",
]
