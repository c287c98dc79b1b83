"""ASCII folding and URL slug derivation.

Contents:
    * :func:`transliterate` - fold table characters to their ASCII tokens.
    * :func:`slugify` - derive a lowercase, hyphen-separated ASCII slug.
"""

from __future__ import annotations

import re

from .ascii_table import ASCII_TABLE
from .guards import require

_WHITESPACE_RUN = re.compile(r"\s\s+")
_NON_WORD_RUN = re.compile(r"\W+", re.ASCII)


def transliterate(value: str) -> str:
    """Replace every character listed in the folding table with its ASCII token.

    Table entries are applied in definition order and the replacements
    accumulate. Characters absent from the table pass through unchanged.

    Args:
        value: Text to fold.

    Returns:
        The folded text.

    Raises:
        InvalidArgumentError: When ``value`` is ``None``.

    Example:
        >>> transliterate("fóõ bár")
        'foo bar'
        >>> transliterate("Ærøskøbing")
        'AEroskobing'
        >>> transliterate("漢字")
        '漢字'
    """
    require(value)
    result = value
    for token, sources in ASCII_TABLE.items():
        for source in sources:
            if source in result:
                result = result.replace(source, token)
    return result


def slugify(value: str) -> str:
    """Derive a URL slug: lowercase ASCII words joined by single hyphens.

    Steps: trim, lowercase, collapse whitespace runs, transliterate, turn
    ``&`` into ``-and-``, split on runs of non-word characters and join the
    non-empty segments with ``-``.

    Raises:
        InvalidArgumentError: When ``value`` is ``None``.

    Example:
        >>> slugify("foo & bar")
        'foo-and-bar'
        >>> slugify("  Fóõ   Bár!  ")
        'foo-bar'
        >>> slugify("!!!")
        ''
    """
    require(value)
    text = _WHITESPACE_RUN.sub(" ", value.strip().lower())
    text = transliterate(text).replace("&", "-and-")
    return "-".join(segment.lower() for segment in _NON_WORD_RUN.split(text) if segment)


__all__ = [
    "slugify",
    "transliterate",
]
