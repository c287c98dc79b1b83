"""Case conversions."""

from __future__ import annotations

import pytest

from strman.domain.casing import (
    capitalize,
    dasherize,
    humanize,
    lower_first,
    start_case,
    swap_case,
    to_camel_case,
    to_decamelize,
    to_kebab_case,
    to_snake_case,
    to_studly_case,
    underscored,
    upper_first,
)
from strman.domain.errors import InvalidArgumentError

DECAMELIZE_FIXTURES = [
    "deCamelize",
    "de-Camelize",
    "de camelize",
    "de  camelize",
    "de Camelize",
    "de-camelize",
    "-de--camelize",
    "de_camelize",
    "     de_camelize",
]


@pytest.mark.os_agnostic
def test_upper_and_lower_first_touch_only_the_first_character() -> None:
    """The rest of the value keeps its case."""
    assert upper_first("fred") == "Fred"
    assert upper_first("FRED") == "FRED"
    assert lower_first("FRED") == "fRED"
    assert lower_first("Fred") == "fred"
    assert upper_first("") == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["FRED", "fRED", "fred"])
def test_capitalize_lowercases_the_rest(value: str) -> None:
    """Only the first character is uppercase afterwards."""
    assert capitalize(value) == "Fred"


@pytest.mark.os_agnostic
def test_swap_case_inverts_each_cased_character() -> None:
    """Uncased characters are kept; missing input becomes empty."""
    assert swap_case("AaBbCcDd") == "aAbBcCdD"
    assert swap_case("Hello 42!") == "hELLO 42!"
    assert swap_case(None) == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "value",
    [
        "CamelCase",
        "camelCase",
        "Camel case",
        "Camel  case",
        "camel Case",
        "camel-case",
        "-camel--case",
        "camel_case",
        "     camel_case",
    ],
)
def test_to_camel_case_normalises_separators(value: str) -> None:
    """Every separator style yields the same camelCase form."""
    assert to_camel_case(value) == "camelCase"


@pytest.mark.os_agnostic
def test_to_camel_case_edge_values() -> None:
    """Single letters survive and missing input becomes empty."""
    assert to_camel_case("c") == "c"
    assert to_camel_case("") == ""
    assert to_camel_case(None) == ""


@pytest.mark.os_agnostic
def test_to_studly_case_uppercases_every_word() -> None:
    """StudlyCase starts with an uppercase letter."""
    assert to_studly_case("hello world") == "HelloWorld"
    assert to_studly_case("-camel--case") == "CamelCase"
    with pytest.raises(InvalidArgumentError):
        to_studly_case(None)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", DECAMELIZE_FIXTURES)
def test_to_decamelize_separates_words_with_spaces(value: str) -> None:
    """The default joiner is a single space."""
    assert to_decamelize(value) == "de camelize"


@pytest.mark.os_agnostic
def test_to_decamelize_uses_the_given_separator() -> None:
    """Custom joiners replace the space."""
    assert to_decamelize("camelCase", "_") == "camel_case"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", DECAMELIZE_FIXTURES)
def test_to_kebab_case(value: str) -> None:
    """Words are joined with hyphens."""
    assert to_kebab_case(value) == "de-camelize"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", DECAMELIZE_FIXTURES)
def test_to_snake_case(value: str) -> None:
    """Words are joined with underscores."""
    assert to_snake_case(value) == "de_camelize"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "expected"),
    [("thisIsATest", "this-is-a-test"), ("123thisIsATest", "123this-is-a-test"), (None, "")],
)
def test_dasherize_splits_camel_humps(value: str | None, expected: str) -> None:
    """Every uppercase letter starts a new word."""
    assert dasherize(value) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("MozTransform", "moz_transform"),
        ("fooBarBaz", "foo_bar_baz"),
        ("the underscored  string-method", "the_underscored_string_method"),
        ("", ""),
        (None, ""),
    ],
)
def test_underscored(value: str | None, expected: str) -> None:
    """Camel humps, dashes and spaces all become underscores."""
    assert underscored(value) == expected


@pytest.mark.os_agnostic
def test_humanize_produces_a_capitalised_phrase() -> None:
    """Identifiers read as a sentence fragment."""
    assert humanize("   capitalize dash-CamelCase_underscore trim  ") == "Capitalize dash camel case underscore trim"
    assert humanize(None) == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("--dashes--", "Dashes"),
        ("camelCase", "Camel Case"),
        ("--foo-bar--", "Foo Bar"),
        ("__FOO_BAR__", "Foo Bar"),
        ("hello world", "Hello World"),
    ],
)
def test_start_case_capitalises_every_word(value: str, expected: str) -> None:
    """Separators and camel humps both break words."""
    assert start_case(value) == expected
