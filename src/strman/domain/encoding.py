"""Reversible encodings: base64, fixed-width radix digits and HTML entities.

The radix codecs render each UTF-16 code unit of the input as a
zero-padded group of digits, so characters outside the Basic Multilingual
Plane take two groups.
"""

from __future__ import annotations

import base64
import binascii
import html
import re
from functools import lru_cache
from html.entities import codepoint2name, html5

from .errors import InvalidArgumentError
from .guards import require

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_REGEX_SPECIALS = re.compile(r"[\\^$*+\-?.|(){}\[\]]")

BIN_DIGITS = 16
DEC_DIGITS = 5
HEX_DIGITS = 4


def base64_encode(value: str) -> str:
    """Encode the UTF-8 bytes of ``value`` as base64.

    Example:
        >>> base64_encode("strman")
        'c3RybWFu'
    """
    require(value)
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def base64_decode(value: str) -> str:
    """Decode base64 text back to a UTF-8 string.

    Raises:
        InvalidArgumentError: When ``value`` is not valid base64 or UTF-8.
    """
    require(value)
    try:
        return base64.b64decode(value, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise InvalidArgumentError(f"Invalid base64 input: {exc}") from exc


def _to_radix(number: int, radix: int) -> str:
    if number == 0:
        return "0"
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, radix)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= len(_DIGITS):
        raise InvalidArgumentError(f"'radix' should be between 2 and {len(_DIGITS)}, got {radix}.")


def encode(value: str, digits: int, radix: int) -> str:
    """Render each UTF-16 code unit as ``digits`` zero-padded digits in ``radix``.

    Example:
        >>> encode("A", 4, 16)
        '0041'
        >>> encode("漢", 4, 16)
        '6f22'
    """
    require(value)
    _check_radix(radix)
    raw = value.encode("utf-16-be", "surrogatepass")
    units = (int.from_bytes(raw[offset : offset + 2], "big") for offset in range(0, len(raw), 2))
    return "".join(_to_radix(unit, radix).rjust(digits, "0") for unit in units)


def decode(value: str, digits: int, radix: int) -> str:
    """Reverse :func:`encode`.

    Raises:
        InvalidArgumentError: When a group is not a number in ``radix`` or
            the code units do not form valid text.
    """
    require(value)
    _check_radix(radix)
    if digits <= 0:
        raise InvalidArgumentError(f"'digits' should be positive, got {digits}.")
    try:
        units = [int(value[offset : offset + digits], radix) for offset in range(0, len(value), digits)]
        raw = b"".join(unit.to_bytes(2, "big") for unit in units)
        return raw.decode("utf-16-be", "surrogatepass")
    except (ValueError, OverflowError) as exc:
        raise InvalidArgumentError(f"Invalid base-{radix} input {value!r}: {exc}") from exc


def bin_encode(value: str) -> str:
    """Encode each code unit as 16 binary digits."""
    return encode(value, BIN_DIGITS, 2)


def bin_decode(value: str) -> str:
    """Decode groups of 16 binary digits."""
    return decode(value, BIN_DIGITS, 2)


def dec_encode(value: str) -> str:
    """Encode each code unit as 5 decimal digits.

    Example:
        >>> dec_encode("A")
        '00065'
    """
    return encode(value, DEC_DIGITS, 10)


def dec_decode(value: str) -> str:
    """Decode groups of 5 decimal digits."""
    return decode(value, DEC_DIGITS, 10)


def hex_encode(value: str) -> str:
    """Encode each code unit as 4 lowercase hexadecimal digits."""
    return encode(value, HEX_DIGITS, 16)


def hex_decode(value: str) -> str:
    """Decode groups of 4 hexadecimal digits."""
    return decode(value, HEX_DIGITS, 16)


@lru_cache(maxsize=1)
def _entity_names() -> dict[str, str]:
    names = {chr(codepoint): name for codepoint, name in codepoint2name.items()}
    for reference, text in html5.items():
        if reference.endswith(";") and len(text) == 1 and ord(text) > 127:
            names.setdefault(text, reference[:-1])
    return names


def html_encode(value: str) -> str:
    """Replace characters that have a named HTML entity with that entity.

    Example:
        >>> html_encode("á & Ш")
        '&aacute; &amp; &SHcy;'
    """
    require(value)
    names = _entity_names()
    return "".join(f"&{names[char]};" if char in names else char for char in value)


def html_decode(value: str) -> str:
    """Resolve named and numeric HTML character references.

    Example:
        >>> html_decode("&aacute;&#65;&ZHcy;")
        'áAЖ'
    """
    require(value)
    return html.unescape(value)


def escape_reg_exp(value: str) -> str:
    """Backslash-escape regular expression metacharacters.

    Example:
        >>> escape_reg_exp("How much is (2+3)? 5")
        'How much is \\\\(2\\\\+3\\\\)\\\\? 5'
    """
    require(value)
    return _REGEX_SPECIALS.sub(lambda match: "\\" + match.group(0), value)


__all__ = [
    "BIN_DIGITS",
    "DEC_DIGITS",
    "HEX_DIGITS",
    "base64_decode",
    "base64_encode",
    "bin_decode",
    "bin_encode",
    "dec_decode",
    "dec_encode",
    "decode",
    "encode",
    "escape_reg_exp",
    "hex_decode",
    "hex_encode",
    "html_decode",
    "html_encode",
]
