"""Breaking strings into pieces and assembling pieces into strings.

Regex based splits discard trailing empty segments, so ``"a b "`` splits
into two words rather than three.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .guards import require, require_non_negative, split_keeping_leading

_LINE_BREAK = re.compile(r"\r\n?|\n")


def chars(value: str) -> list[str]:
    """Return the characters of ``value`` as a list."""
    require(value)
    return list(value)


def words(value: str, delimiter: str = r"\s+") -> list[str]:
    """Split ``value`` on the ``delimiter`` regex.

    Example:
        >>> words("This is a string, with words!")
        ['This', 'is', 'a', 'string,', 'with', 'words!']
        >>> words("one_two_three", "_")
        ['one', 'two', 'three']
    """
    require(value)
    require(delimiter, "delimiter")
    return split_keeping_leading(value, delimiter)


def split(value: str, regex: str) -> list[str]:
    """Split ``value`` on the ``regex`` pattern."""
    require(value)
    require(regex, "regex")
    return split_keeping_leading(value, regex)


def lines(value: str | None) -> list[str]:
    """Split ``value`` on ``\\r\\n``, ``\\r`` and ``\\n`` line breaks.

    Example:
        >>> lines("Hello\\r\\nWorld\\rand\\nyou")
        ['Hello', 'World', 'and', 'you']
        >>> lines(None)
        []
    """
    if value is None:
        return []
    return split_keeping_leading(value, _LINE_BREAK)


def chop(value: str | None, step: int) -> list[str]:
    """Cut ``value`` into pieces of ``step`` characters; the last may be shorter.

    Example:
        >>> chop("whitespace", 3)
        ['whi', 'tes', 'pac', 'e']
        >>> chop("whitespace", 0)
        ['whitespace']
    """
    if not value:
        return []
    require_non_negative(step, "step")
    if step == 0:
        return [value]
    return [value[start : start + step] for start in range(0, len(value), step)]


def zip_strings(*inputs: str | None) -> list[str]:
    """Combine the characters at each position, stopping at the shortest input.

    Example:
        >>> zip_strings("abc", "def")
        ['ad', 'be', 'cf']
        >>> zip_strings("abc", None)
        []
    """
    if not inputs or any(not text for text in inputs):
        return []
    return ["".join(group) for group in zip(*inputs)]  # type: ignore[arg-type]


def between(value: str, start: str, end: str) -> list[str]:
    """Return every substring enclosed by ``start`` and ``end``.

    Example:
        >>> between("[abc][def]", "[", "]")
        ['abc', 'def']
        >>> between("<span>foo</span>", "<span>", "</span>")
        ['foo']
    """
    require(value)
    require(start, "start")
    require(end, "end")
    if not end:
        return []
    return [part[part.index(start) + len(start) :] for part in value.split(end) if start in part]


def join(strings: Iterable[str], separator: str) -> str:
    """Join ``strings`` with ``separator``."""
    require(strings, "strings")
    require(separator, "separator")
    return separator.join(strings)


def remove_empty_strings(strings: Iterable[str | None]) -> list[str]:
    """Drop ``None``, empty and whitespace-only entries.

    Example:
        >>> remove_empty_strings(["aa", "", "   ", "bb", None, "cc"])
        ['aa', 'bb', 'cc']
    """
    require(strings, "strings")
    return [text for text in strings if text is not None and text.strip()]


__all__ = [
    "between",
    "chars",
    "chop",
    "join",
    "lines",
    "remove_empty_strings",
    "split",
    "words",
    "zip_strings",
]
