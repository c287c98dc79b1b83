"""Positional string formatting and number formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import InvalidArgumentError
from .guards import require

_POSITIONAL_MARKER = re.compile(r"\{(\w+)}")


def format_string(value: str, *params: str) -> str:
    """Replace ``{0}``, ``{1}`` ... with the matching positional parameter.

    Raises:
        InvalidArgumentError: When a marker names a missing or non-numeric index.

    Example:
        >>> format_string("{0} bar {1}", "foo", "baz")
        'foo bar baz'
        >>> format_string("{1}{0}{1}", "a", "b")
        'bab'
    """
    require(value)

    def substitute(match: re.Match[str]) -> str:
        marker = match.group(1)
        if not marker.isdecimal():
            raise InvalidArgumentError(f"Placeholder {{{marker}}} is not a positional index.")
        index = int(marker)
        if index >= len(params):
            raise InvalidArgumentError(f"No parameter supplied for placeholder {{{marker}}}.")
        return params[index]

    return _POSITIONAL_MARKER.sub(substitute, value)


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """How :func:`format_number` renders digits.

    Attributes:
        precision: Number of decimal places, rounded half up.
        decimal_point: Separator between integer and fractional digits.
        thousands_separator: Separator between groups of three integer digits.

    Example:
        >>> NumberFormatOptions(2, ",", ".").decimal_point
        ','
    """

    precision: int = 0
    decimal_point: str = "."
    thousands_separator: str = ","

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise InvalidArgumentError(f"'precision' should be zero or positive, got {self.precision}.")


def format_number(number: int | float | Decimal, options: NumberFormatOptions | None = None) -> str:
    """Render ``number`` with grouped thousands and a fixed number of decimals.

    Example:
        >>> format_number(1000)
        '1,000'
        >>> format_number(1000, NumberFormatOptions(2))
        '1,000.00'
        >>> format_number(1000000.754, NumberFormatOptions(2, ",", "."))
        '1.000.000,75'
        >>> format_number(1000.754, NumberFormatOptions(0, ",", "."))
        '1.001'
    """
    require(number, "number")
    opts = options if options is not None else NumberFormatOptions()
    try:
        amount = Decimal(str(number))
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Cannot format {number!r} as a number.") from exc
    if not amount.is_finite():
        raise InvalidArgumentError(f"Cannot format non-finite number {number!r}.")
    rounded = amount.quantize(Decimal(1).scaleb(-opts.precision), rounding=ROUND_HALF_UP)
    rendered = format(rounded, f",.{opts.precision}f")
    integer_part, _, fraction = rendered.partition(".")
    integer_part = integer_part.replace(",", opts.thousands_separator)
    if not fraction:
        return integer_part
    return integer_part + opts.decimal_point + fraction


__all__ = [
    "NumberFormatOptions",
    "format_number",
    "format_string",
]
