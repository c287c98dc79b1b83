"""Argument guards shared by the string functions."""

from __future__ import annotations

import re
from typing import Any

from .errors import InvalidArgumentError

NULL_MESSAGE = "'{name}' should be not None."


def require(value: Any, name: str = "value") -> None:
    """Raise :class:`InvalidArgumentError` when ``value`` is ``None``.

    Example:
        >>> require("text")
        >>> require(None, "needle")
        Traceback (most recent call last):
        ...
        strman.domain.errors.InvalidArgumentError: 'needle' should be not None.
    """
    if value is None:
        raise InvalidArgumentError(NULL_MESSAGE.format(name=name))


def require_non_negative(number: int, name: str) -> None:
    """Raise :class:`InvalidArgumentError` when ``number`` is negative."""
    if number < 0:
        raise InvalidArgumentError(f"'{name}' should be zero or positive, got {number}.")


def split_keeping_leading(value: str, pattern: str | re.Pattern[str]) -> list[str]:
    """Split on a regex and discard trailing empty segments.

    An input without any match comes back as a one-element list, even when
    it is empty.

    Example:
        >>> split_keeping_leading("a,b,,", ",")
        ['a', 'b']
        >>> split_keeping_leading("", ",")
        ['']
    """
    parts = re.split(pattern, value)
    if len(parts) == 1:
        return parts
    while parts and parts[-1] == "":
        parts.pop()
    return parts


__all__ = [
    "require",
    "require_non_negative",
    "split_keeping_leading",
]
