"""Domain enum tests: member values, string equality, and exhaustive member counts."""

from __future__ import annotations

import pytest

from strman.domain.enums import CaseStyle, Codec, OutputFormat

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_member_values(member: OutputFormat, expected_value: str) -> None:
    """Each OutputFormat member must have the expected string value."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    """OutputFormat must have exactly 2 members."""
    assert len(OutputFormat) == 2


# ======================== Codec ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["base64", "bin", "dec", "hex", "html"])
def test_codec_round_trips_through_its_value(value: str) -> None:
    """Every codec name resolves back to its member."""
    assert Codec(value).value == value
    assert Codec(value) == value


@pytest.mark.os_agnostic
def test_codec_member_count() -> None:
    """Codec must have exactly 5 members."""
    assert len(Codec) == 5


@pytest.mark.os_agnostic
def test_when_codec_is_unknown_it_raises_value_error() -> None:
    """Unknown codec names are rejected by the enum itself."""
    with pytest.raises(ValueError, match="rot13"):
        Codec("rot13")


# ======================== CaseStyle ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (CaseStyle.CAMEL, "camel"),
        (CaseStyle.STUDLY, "studly"),
        (CaseStyle.KEBAB, "kebab"),
        (CaseStyle.SNAKE, "snake"),
        (CaseStyle.START, "start"),
        (CaseStyle.HUMANIZE, "humanize"),
        (CaseStyle.UNDERSCORED, "underscored"),
        (CaseStyle.SWAP, "swap"),
        (CaseStyle.CAPITALIZE, "capitalize"),
    ],
)
def test_case_style_member_values(member: CaseStyle, expected_value: str) -> None:
    """Each CaseStyle member must have the expected string value."""
    assert member.value == expected_value


@pytest.mark.os_agnostic
def test_case_style_member_count() -> None:
    """CaseStyle must have exactly 9 members."""
    assert len(CaseStyle) == 9
