"""Functions that build a new string from an existing one.

Covers concatenation, affix handling, padding, trimming, removal,
replacement and truncation. Every function validates its required
arguments before touching them and never mutates its input.
"""

from __future__ import annotations

import random
import re
from collections.abc import Iterable

from .errors import InvalidArgumentError
from .guards import require, require_non_negative
from .splitting import words

_WHITESPACE_RUN = re.compile(r"\s\s+")
_LEADING_WHITESPACE = re.compile(r"^\s+")
_TRAILING_WHITESPACE = re.compile(r"\s+$")
_NON_WORD = re.compile(r"[^\w]+", re.ASCII)
_WHITESPACE = re.compile(r"\s")


def append(value: str, *appends: str) -> str:
    """Append every argument to ``value``.

    Example:
        >>> append("f", "o", "o", "bar")
        'foobar'
    """
    return append_array(value, appends)


def append_array(value: str, appends: Iterable[str]) -> str:
    """Append every element of ``appends`` to ``value``."""
    require(value)
    require(appends, "appends")
    return value + "".join(appends)


def prepend(value: str, *prepends: str) -> str:
    """Prepend every argument, in order, to ``value``."""
    return prepend_array(value, prepends)


def prepend_array(value: str, prepends: Iterable[str]) -> str:
    """Prepend every element of ``prepends``, in order, to ``value``."""
    require(value)
    require(prepends, "prepends")
    return "".join(prepends) + value


def insert(value: str, substr: str, index: int) -> str:
    """Insert ``substr`` at ``index``; an index past the end leaves ``value`` as is."""
    require(value)
    require(substr, "substr")
    require_non_negative(index, "index")
    if index > len(value):
        return value
    return value[:index] + substr + value[index:]


def ensure_left(value: str, prefix: str, case_sensitive: bool = True) -> str:
    """Prefix ``value`` with ``prefix`` unless it already starts with it.

    Example:
        >>> ensure_left("bar", "foo")
        'foobar'
        >>> ensure_left("FOObar", "foo", case_sensitive=False)
        'FOObar'
    """
    require(value)
    require(prefix, "prefix")
    if case_sensitive:
        present = value.startswith(prefix)
    else:
        present = value.lower().startswith(prefix.lower())
    return value if present else prefix + value


def ensure_right(value: str, suffix: str, case_sensitive: bool = True) -> str:
    """Suffix ``value`` with ``suffix`` unless it already ends with it."""
    require(value)
    require(suffix, "suffix")
    if case_sensitive:
        present = value.endswith(suffix)
    else:
        present = value.lower().endswith(suffix.lower())
    return value if present else value + suffix


def remove_left(value: str, prefix: str, case_sensitive: bool = True) -> str:
    """Strip ``prefix`` from the start of ``value`` when present.

    The remainder keeps its original casing.

    Example:
        >>> remove_left("foofoo", "foo")
        'foo'
        >>> remove_left("FOObar", "foo", case_sensitive=False)
        'bar'
    """
    require(value)
    require(prefix, "prefix")
    if case_sensitive:
        present = value.startswith(prefix)
    else:
        present = value.lower().startswith(prefix.lower())
    return value[len(prefix) :] if present else value


def remove_right(value: str, suffix: str, case_sensitive: bool = True) -> str:
    """Strip ``suffix`` from the end of ``value`` when present.

    Example:
        >>> remove_right("Remove the END at the end", " END", case_sensitive=False)
        'Remove the END at the'
    """
    require(value)
    require(suffix, "suffix")
    if case_sensitive:
        present = value.endswith(suffix)
    else:
        present = value.lower().endswith(suffix.lower())
    return value[: len(value) - len(suffix)] if present else value


def remove_non_words(value: str) -> str:
    """Drop every character outside ``[A-Za-z0-9_]``."""
    require(value)
    return _NON_WORD.sub("", value)


def remove_spaces(value: str) -> str:
    """Drop every whitespace character."""
    require(value)
    return _WHITESPACE.sub("", value)


def repeat(value: str, multiplier: int) -> str:
    """Concatenate ``multiplier`` copies of ``value``."""
    require(value)
    require_non_negative(multiplier, "multiplier")
    return value * multiplier


def replace(value: str, search: str, new_value: str, case_sensitive: bool = True) -> str:
    """Replace every literal occurrence of ``search`` with ``new_value``.

    Example:
        >>> replace("foo bar FOO", "foo", "x", case_sensitive=False)
        'x bar x'
    """
    require(value)
    require(search, "search")
    require(new_value, "new_value")
    if case_sensitive:
        return value.replace(search, new_value)
    return re.sub(re.escape(search), lambda _match: new_value, value, flags=re.IGNORECASE)


def reverse(value: str) -> str:
    """Return ``value`` with its characters in reverse order."""
    require(value)
    return value[::-1]


def left_pad(value: str, pad: str, length: int) -> str:
    """Prepend ``pad`` until ``value`` reaches ``length`` characters.

    ``pad`` is repeated once per missing character, so a multi-character
    pad overshoots.

    Example:
        >>> left_pad("1", "0", 5)
        '00001'
        >>> left_pad("12345", "0", 3)
        '12345'
    """
    require(value)
    require(pad, "pad")
    if len(value) > length:
        return value
    return pad * (length - len(value)) + value


def right_pad(value: str, pad: str, length: int) -> str:
    """Append ``pad`` until ``value`` reaches ``length`` characters."""
    require(value)
    require(pad, "pad")
    if len(value) > length:
        return value
    return value + pad * (length - len(value))


def left_trim(value: str) -> str:
    """Remove leading whitespace."""
    require(value)
    return _LEADING_WHITESPACE.sub("", value)


def right_trim(value: str) -> str:
    """Remove trailing whitespace."""
    require(value)
    return _TRAILING_WHITESPACE.sub("", value)


def _char_class(chars: tuple[str, ...]) -> str:
    return "[" + "".join(re.escape(char) for char in chars) + "]+"


def trim_start(value: str | None, *chars: str) -> str | None:
    """Remove leading whitespace, or leading ``chars`` when any are given.

    Returns ``None`` for a missing or empty value.

    Example:
        >>> trim_start("-_-abc-_-", "_", "-")
        'abc-_-'
        >>> trim_start("   abc")
        'abc'
    """
    if not value:
        return None
    if not chars:
        return left_trim(value)
    return re.sub("^" + _char_class(chars), "", value)


def trim_end(value: str | None, *chars: str) -> str | None:
    """Remove trailing whitespace, or trailing ``chars`` when any are given."""
    if not value:
        return None
    if not chars:
        return right_trim(value)
    return re.sub(_char_class(chars) + "$", "", value)


def collapse_whitespace(value: str) -> str:
    """Trim ``value`` and replace every run of two or more whitespace with one space.

    Example:
        >>> collapse_whitespace("  foo    bar  ")
        'foo bar'
    """
    require(value)
    return _WHITESPACE_RUN.sub(" ", value.strip())


def surround(value: str, prefix: str | None = None, suffix: str | None = None) -> str:
    """Wrap ``value`` between ``prefix`` and ``suffix``.

    ``suffix`` defaults to ``prefix``; a missing prefix counts as empty.

    Example:
        >>> surround("div", "<", ">")
        '<div>'
        >>> surround("foo", "*")
        '*foo*'
    """
    require(value)
    opening = prefix if prefix is not None else ""
    closing = suffix if suffix is not None else opening
    return opening + value + closing


def truncate(value: str, length: int, filler: str) -> str:
    """Cut ``value`` to ``length`` characters, ending with ``filler``.

    Raises:
        InvalidArgumentError: When ``length`` is negative, or when ``value``
            must be cut and ``filler`` alone is longer than ``length``.

    Example:
        >>> truncate("foo bar", 3, ".")
        'fo.'
        >>> truncate("A Javascript string manipulation library.", 16, "...")
        'A Javascript ...'
    """
    require(value)
    require(filler, "filler")
    require_non_negative(length, "length")
    if length == 0:
        return ""
    if length >= len(value):
        return value
    if len(filler) > length:
        raise InvalidArgumentError(f"'filler' is longer than 'length' ({len(filler)} > {length}).")
    return value[: length - len(filler)] + filler


def safe_truncate(value: str, length: int, filler: str) -> str:
    """Truncate to at most ``length`` characters without breaking a word.

    Whole words are kept while the words so far, the separating spaces and
    ``filler`` still fit; ``filler`` is then appended.

    Example:
        >>> safe_truncate("foo bar", 4, ".")
        'foo.'
        >>> safe_truncate("A Javascript string manipulation library.", 16, "...")
        'A Javascript...'
        >>> safe_truncate("A Javascript string manipulation library.", 14, "...")
        'A...'
    """
    require(value)
    require(filler, "filler")
    require_non_negative(length, "length")
    if length == 0:
        return ""
    if length >= len(value):
        return value
    kept: list[str] = []
    kept_length = 0
    for word in words(value):
        if kept_length + len(word) + len(filler) + len(kept) > length:
            break
        kept.append(word)
        kept_length = len(" ".join(kept))
    return " ".join(kept) + filler


def slice_text(value: str, begin: int, end: int | None = None) -> str:
    """Return the characters from ``begin`` up to, not including, ``end``."""
    require(value)
    return value[begin:end]


def shuffle(value: str) -> str:
    """Return a random permutation of the characters of ``value``."""
    require(value)
    return "".join(random.sample(value, len(value)))


__all__ = [
    "append",
    "append_array",
    "collapse_whitespace",
    "ensure_left",
    "ensure_right",
    "insert",
    "left_pad",
    "left_trim",
    "prepend",
    "prepend_array",
    "remove_left",
    "remove_non_words",
    "remove_right",
    "remove_spaces",
    "repeat",
    "replace",
    "reverse",
    "right_pad",
    "right_trim",
    "safe_truncate",
    "shuffle",
    "slice_text",
    "surround",
    "trim_end",
    "trim_start",
    "truncate",
]
