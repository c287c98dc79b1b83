"""Case conversions between prose, camelCase, StudlyCase, kebab and snake forms."""

from __future__ import annotations

import re

from .editing import collapse_whitespace
from .guards import require

_STUDLY_SEPARATOR = re.compile(r"\s*(?:_|-|\s)\s*")
_LOWER_THEN_UPPER = re.compile(r"([a-z\d])([A-Z]+)")
_DASH_OR_SPACE_RUN = re.compile(r"[-\s]+")
_START_CASE_SEPARATOR = re.compile(r"\s|_|-|(?<=[a-z])(?=[A-Z])")


def upper_first(value: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    require(value)
    return value[:1].upper() + value[1:]


def lower_first(value: str) -> str:
    """Lowercase the first character and leave the rest untouched."""
    require(value)
    return value[:1].lower() + value[1:]


def capitalize(value: str) -> str:
    """Uppercase the first character and lowercase the rest.

    Example:
        >>> capitalize("fRED")
        'Fred'
    """
    require(value)
    return value[:1].upper() + value[1:].lower()


def swap_case(value: str | None) -> str:
    """Swap the case of every cased character; ``None`` becomes ``""``.

    Example:
        >>> swap_case("AaBbCcDd")
        'aAbBcCdD'
    """
    if not value:
        return ""
    return "".join(char.lower() if char.isupper() else char.upper() for char in value)


def to_studly_case(value: str) -> str:
    """Join the words of ``value`` with each word's first letter uppercased.

    Words are separated by whitespace, ``_`` or ``-``.

    Example:
        >>> to_studly_case("hello world")
        'HelloWorld'
        >>> to_studly_case("-camel--case")
        'CamelCase'
    """
    require(value)
    parts = _STUDLY_SEPARATOR.split(collapse_whitespace(value))
    return "".join(upper_first(part) for part in parts if part.strip())


def to_camel_case(value: str | None) -> str:
    """StudlyCase with a lowercase first letter; ``None`` becomes ``""``.

    Example:
        >>> to_camel_case("CamelCase")
        'camelCase'
        >>> to_camel_case("camel_case")
        'camelCase'
    """
    if not value:
        return ""
    return lower_first(to_studly_case(value))


def _split_before_uppercase(value: str) -> list[str]:
    parts: list[str] = []
    current = ""
    for char in value:
        if char.isupper() and current:
            parts.append(current)
            current = ""
        current += char
    parts.append(current)
    return parts


def to_decamelize(value: str | None, separator: str | None = None) -> str:
    """Lowercase the words of the camelCase form of ``value`` and join them.

    Args:
        value: Text in any supported case.
        separator: Joiner between words; defaults to a single space.

    Example:
        >>> to_decamelize("helloWorld")
        'hello world'
        >>> to_decamelize("helloWorld", "_")
        'hello_world'
    """
    joiner = " " if separator is None else separator
    return joiner.join(part.lower() for part in _split_before_uppercase(to_camel_case(value)))


def to_kebab_case(value: str | None) -> str:
    """Return the ``lowercase-hyphenated`` form of ``value``.

    Example:
        >>> to_kebab_case("Foo Bar")
        'foo-bar'
        >>> to_kebab_case("-de--camelize")
        'de-camelize'
    """
    return to_decamelize(value, "-")


def to_snake_case(value: str | None) -> str:
    """Return the ``lowercase_underscored`` form of ``value``."""
    return to_decamelize(value, "_")


def dasherize(value: str | None) -> str:
    """Alias of :func:`to_kebab_case` accepting ``None``."""
    return to_kebab_case(value)


def underscored(value: str | None) -> str:
    """Lowercase ``value`` with ``_`` between words and at camel humps.

    Example:
        >>> underscored("the underscored  string-method")
        'the_underscored_string_method'
        >>> underscored("theUnderscoredStringMethod")
        'the_underscored_string_method'
    """
    if not value:
        return ""
    text = _LOWER_THEN_UPPER.sub(r"\1_\2", value.strip())
    return _DASH_OR_SPACE_RUN.sub("_", text).lower()


def humanize(value: str | None) -> str:
    """Turn identifiers into a capitalised phrase.

    Example:
        >>> humanize("   capitalize dash-CamelCase_underscore trim  ")
        'Capitalize dash camel case underscore trim'
    """
    return upper_first(underscored(value).replace("_", " "))


def start_case(value: str) -> str:
    """Capitalise each word; words split at whitespace, ``_``, ``-`` and camel humps.

    Example:
        >>> start_case("--foo-bar--")
        'Foo Bar'
        >>> start_case("fooBar")
        'Foo Bar'
    """
    require(value)
    parts = _START_CASE_SEPARATOR.split(value)
    return " ".join(upper_first(part.lower()) for part in parts if part.strip())


__all__ = [
    "capitalize",
    "dasherize",
    "humanize",
    "lower_first",
    "start_case",
    "swap_case",
    "to_camel_case",
    "to_decamelize",
    "to_kebab_case",
    "to_snake_case",
    "to_studly_case",
    "underscored",
    "upper_first",
]
