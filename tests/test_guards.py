"""Argument guards: None checks, sign checks and trailing-empty splits."""

from __future__ import annotations

import pytest

from strman.domain.errors import InvalidArgumentError
from strman.domain.guards import require, require_non_negative, split_keeping_leading


@pytest.mark.os_agnostic
def test_when_value_is_present_require_returns_none() -> None:
    """Empty strings are values too."""
    assert require("") is None


@pytest.mark.os_agnostic
def test_when_value_is_none_require_names_the_argument() -> None:
    """The message names the offending parameter."""
    with pytest.raises(InvalidArgumentError, match="'needle' should be not None."):
        require(None, "needle")


@pytest.mark.os_agnostic
def test_when_number_is_negative_require_non_negative_raises() -> None:
    """Negative counts are rejected with the parameter name."""
    with pytest.raises(InvalidArgumentError, match="'times'"):
        require_non_negative(-1, "times")


@pytest.mark.os_agnostic
def test_when_number_is_zero_require_non_negative_accepts_it() -> None:
    """Zero is a valid count."""
    assert require_non_negative(0, "times") is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "pattern", "expected"),
    [
        ("a,b,,", ",", ["a", "b"]),
        (",a", ",", ["", "a"]),
        ("", ",", [""]),
        ("abc", ",", ["abc"]),
        (",,", ",", []),
    ],
)
def test_split_keeping_leading_drops_only_trailing_empties(value: str, pattern: str, expected: list[str]) -> None:
    """Leading empties survive, trailing ones are discarded."""
    assert split_keeping_leading(value, pattern) == expected
