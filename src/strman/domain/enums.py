"""Type-safe domain enums for output formats, codecs and case styles."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Codec(str, Enum):
    """Reversible text codecs exposed by the ``encode``/``decode`` commands.

    Attributes:
        BASE64: UTF-8 bytes rendered as standard base64.
        BIN: 16 binary digits per UTF-16 code unit.
        DEC: 5 decimal digits per UTF-16 code unit.
        HEX: 4 lowercase hexadecimal digits per UTF-16 code unit.
        HTML: Named HTML character references.

    Example:
        >>> Codec("hex") is Codec.HEX
        True
    """

    BASE64 = "base64"
    BIN = "bin"
    DEC = "dec"
    HEX = "hex"
    HTML = "html"


class CaseStyle(str, Enum):
    """Case conversions exposed by the ``case`` command.

    Example:
        >>> CaseStyle.KEBAB.value
        'kebab'
        >>> sorted(style.value for style in CaseStyle)[:3]
        ['camel', 'capitalize', 'humanize']
    """

    CAMEL = "camel"
    STUDLY = "studly"
    KEBAB = "kebab"
    SNAKE = "snake"
    START = "start"
    HUMANIZE = "humanize"
    UNDERSCORED = "underscored"
    SWAP = "swap"
    CAPITALIZE = "capitalize"


__all__ = [
    "CaseStyle",
    "Codec",
    "OutputFormat",
]
