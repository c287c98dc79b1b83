"""Substring search and casing predicates.

Case-insensitive variants compare lowercased copies of both operands.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import InvalidArgumentError
from .guards import require


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def contains(value: str, needle: str, case_sensitive: bool = False) -> bool:
    """Return True when ``needle`` occurs in ``value``.

    Example:
        >>> contains("foo bar", "BAR")
        True
        >>> contains("foo bar", "BAR", case_sensitive=True)
        False
    """
    require(value)
    require(needle, "needle")
    return _fold(needle, case_sensitive) in _fold(value, case_sensitive)


def contains_all(value: str, needles: Iterable[str], case_sensitive: bool = False) -> bool:
    """Return True when every needle occurs in ``value``."""
    require(value)
    require(needles, "needles")
    return all(contains(value, needle, case_sensitive) for needle in needles)


def contains_any(value: str, needles: Iterable[str], case_sensitive: bool = False) -> bool:
    """Return True when at least one needle occurs in ``value``."""
    require(value)
    require(needles, "needles")
    return any(contains(value, needle, case_sensitive) for needle in needles)


def count_substr(value: str, sub_str: str, case_sensitive: bool = True, allow_overlapping: bool = False) -> int:
    """Count occurrences of ``sub_str`` in ``value``.

    Example:
        >>> count_substr("aaaAAAaaa", "aaa")
        2
        >>> count_substr("aaaAAAaaa", "aaa", case_sensitive=False)
        3
        >>> count_substr("aaaAAAaaa", "aaa", case_sensitive=False, allow_overlapping=True)
        7
    """
    require(value)
    require(sub_str, "sub_str")
    if not sub_str:
        raise InvalidArgumentError("'sub_str' should not be empty.")
    haystack = _fold(value, case_sensitive)
    needle = _fold(sub_str, case_sensitive)
    if not allow_overlapping:
        return haystack.count(needle)
    count = 0
    position = haystack.find(needle)
    while position != -1:
        count += 1
        position = haystack.find(needle, position + 1)
    return count


def ends_with(value: str, search: str, position: int | None = None, case_sensitive: bool = True) -> bool:
    """Return True when ``value[:position]`` ends with ``search``.

    Args:
        value: Text to inspect.
        search: Expected suffix.
        position: End of the inspected prefix; defaults to the full length.
        case_sensitive: Compare lowercased copies when False.

    Example:
        >>> ends_with("foo bar", "bar")
        True
        >>> ends_with("foo barr", "bar", 7)
        True
        >>> ends_with("foo bar", "BAR", case_sensitive=False)
        True
    """
    require(value)
    require(search, "search")
    end = len(value) if position is None else max(0, min(position, len(value)))
    return _fold(value[:end], case_sensitive).endswith(_fold(search, case_sensitive))


def starts_with(value: str, search: str, position: int = 0, case_sensitive: bool = True) -> bool:
    """Return True when ``value[position:]`` starts with ``search``."""
    require(value)
    require(search, "search")
    return _fold(value[max(0, position) :], case_sensitive).startswith(_fold(search, case_sensitive))


def index_of(value: str, needle: str, offset: int = 0, case_sensitive: bool = True) -> int:
    """Return the first index of ``needle`` at or after ``offset``, or -1."""
    require(value)
    require(needle, "needle")
    return _fold(value, case_sensitive).find(_fold(needle, case_sensitive), max(0, offset))


def last_index_of(value: str, needle: str, offset: int | None = None, case_sensitive: bool = True) -> int:
    """Return the last index of ``needle`` starting at or before ``offset``, or -1.

    Example:
        >>> last_index_of("foobarfoobar", "foo")
        6
        >>> last_index_of("foobarfoobar", "foo", 5)
        0
        >>> last_index_of("foobarfoobar", "FOO", case_sensitive=False)
        6
    """
    require(value)
    require(needle, "needle")
    start = len(value) if offset is None else offset
    if start < 0:
        return -1
    haystack = _fold(value, case_sensitive)
    return haystack.rfind(_fold(needle, case_sensitive), 0, start + len(needle))


def is_enclosed_between(value: str, left: str, right: str | None = None) -> bool:
    """Return True when ``value`` starts with ``left`` and ends with ``right``.

    ``right`` defaults to ``left``.

    Example:
        >>> is_enclosed_between("{{shekhar}}", "{{", "}}")
        True
        >>> is_enclosed_between("shekhar", "")
        True
        >>> is_enclosed_between("[shekhar", "[", "]")
        False
    """
    require(value)
    require(left, "left")
    closing = left if right is None else right
    return value.startswith(left) and value.endswith(closing)


def is_upper_case(value: str) -> bool:
    """Return True when no character of ``value`` is lowercase."""
    require(value)
    return not any(char.islower() for char in value)


def is_lower_case(value: str) -> bool:
    """Return True when no character of ``value`` is uppercase."""
    require(value)
    return not any(char.isupper() for char in value)


__all__ = [
    "contains",
    "contains_all",
    "contains_any",
    "count_substr",
    "ends_with",
    "index_of",
    "is_enclosed_between",
    "is_lower_case",
    "is_upper_case",
    "last_index_of",
    "starts_with",
]
