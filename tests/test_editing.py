"""String editing: concatenation, affixes, padding, trimming and truncation."""

from __future__ import annotations

import pytest

from strman.domain.editing import (
    append,
    append_array,
    collapse_whitespace,
    ensure_left,
    ensure_right,
    insert,
    left_pad,
    left_trim,
    prepend,
    prepend_array,
    remove_left,
    remove_non_words,
    remove_right,
    remove_spaces,
    repeat,
    replace,
    reverse,
    right_pad,
    right_trim,
    safe_truncate,
    shuffle,
    slice_text,
    surround,
    trim_end,
    trim_start,
    truncate,
)
from strman.domain.errors import InvalidArgumentError

LIBRARY = "A Javascript string manipulation library."


# ======================== append / prepend / insert ========================


@pytest.mark.os_agnostic
def test_append_concatenates_in_order() -> None:
    """Varargs and iterables behave the same."""
    assert append("f", "o", "o", "b", "a", "r") == "foobar"
    assert append("foobar") == "foobar"
    assert append("", "foobar") == "foobar"
    assert append_array("f", ["o", "o", "b", "a", "r"]) == "foobar"
    assert append_array("foobar", []) == "foobar"


@pytest.mark.os_agnostic
def test_prepend_concatenates_in_order() -> None:
    """Prefixes keep their own order."""
    assert prepend("r", "f", "o", "o", "b", "a") == "foobar"
    assert prepend("bar", "foo") == "foobar"
    assert prepend_array("r", ["f", "o", "o", "b", "a"]) == "foobar"
    assert prepend_array("foobar", []) == "foobar"


@pytest.mark.os_agnostic
def test_when_value_is_none_append_raises() -> None:
    """A missing base value is an argument error."""
    with pytest.raises(InvalidArgumentError):
        append(None, "x")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        prepend_array(None, ["x"])  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "substr", "index", "expected"),
    [
        ("fbar", "oo", 1, "foobar"),
        ("foo", "bar", 3, "foobar"),
        ("foobar", "x", 5, "foobaxr"),
        ("foobar", "x", 6, "foobarx"),
        ("foo bar", "asadasd", 100, "foo bar"),
    ],
)
def test_insert_places_substring_at_index(value: str, substr: str, index: int, expected: str) -> None:
    """An index past the end leaves the value unchanged."""
    assert insert(value, substr, index) == expected


@pytest.mark.os_agnostic
def test_when_index_is_negative_insert_raises() -> None:
    """Negative positions are rejected."""
    with pytest.raises(InvalidArgumentError):
        insert("foo", "x", -1)


# ======================== affixes ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["foobar", "bar"])
def test_ensure_left_adds_missing_prefix(value: str) -> None:
    """The prefix is added only once."""
    assert ensure_left(value, "foo") == "foobar"


@pytest.mark.os_agnostic
def test_ensure_left_case_insensitive() -> None:
    """A differently cased prefix counts as present."""
    assert ensure_left("foobar", "FOO", False) == "foobar"
    assert ensure_left("bar", "FOO", False) == "FOObar"


@pytest.mark.os_agnostic
def test_ensure_right_adds_missing_suffix() -> None:
    """Case sensitivity decides whether 'BAR' satisfies 'bar'."""
    assert [ensure_right(v, "bar", False) for v in ("foo", "foobar", "fooBAR")] == ["foobar", "foobar", "fooBAR"]
    assert [ensure_right(v, "bar") for v in ("foo", "foobar", "fooBAR")] == ["foobar", "foobar", "fooBARbar"]


@pytest.mark.os_agnostic
def test_remove_left_strips_one_prefix() -> None:
    """Only one occurrence is removed and only at the start."""
    assert remove_left("foobar", "foo") == "bar"
    assert remove_left("bar", "foo") == "bar"
    assert remove_left("barfoo", "foo") == "barfoo"
    assert remove_left("foofoo", "foo") == "foo"
    assert remove_left("foobar", "FOO", False) == "bar"


@pytest.mark.os_agnostic
def test_remove_left_keeps_the_remainder_casing() -> None:
    """Case-insensitive matching does not lowercase the result."""
    assert remove_left("This HAS A THIS IN FRONT", "THIS ", False) == "HAS A THIS IN FRONT"


@pytest.mark.os_agnostic
def test_remove_right_strips_one_suffix() -> None:
    """Only one occurrence is removed and only at the end."""
    assert remove_right("foobar", "bar") == "foo"
    assert remove_right("foo", "bar") == "foo"
    assert remove_right("barfoo", "bar") == "barfoo"
    assert remove_right("barbar", "bar") == "bar"
    assert remove_right("foobar", "BAR", False) == "foo"
    assert remove_right("Remove the END at the end", " END", False) == "Remove the END at the"


@pytest.mark.os_agnostic
def test_surround_wraps_the_value() -> None:
    """The suffix defaults to the prefix; a missing prefix is empty."""
    assert surround("foo", "bar") == "barfoobar"
    assert surround("shekhar", "***") == "***shekhar***"
    assert surround("", ">") == ">>"
    assert surround("bar", "") == "bar"
    assert surround("f") == "f"
    assert surround("div", "<", ">") == "<div>"


# ======================== removal and replacement ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["foo bar", "foo&bar-", "foobar"])
def test_remove_non_words_keeps_word_characters(value: str) -> None:
    """Punctuation and spaces disappear."""
    assert remove_non_words(value) == "foobar"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["foo bar", "foo bar ", " foo bar", " foo bar ", "foo\tbar\n"])
def test_remove_spaces_drops_all_whitespace(value: str) -> None:
    """Every whitespace character is removed."""
    assert remove_spaces(value) == "foobar"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("times", "expected"), [(0, ""), (1, "1"), (3, "111"), (5, "11111")])
def test_repeat_concatenates_copies(times: int, expected: str) -> None:
    """Zero copies is the empty string."""
    assert repeat("1", times) == expected


@pytest.mark.os_agnostic
def test_when_multiplier_is_negative_repeat_raises() -> None:
    """Negative repetition counts are rejected."""
    with pytest.raises(InvalidArgumentError, match="multiplier"):
        repeat("1", -1)


@pytest.mark.os_agnostic
def test_replace_substitutes_every_occurrence() -> None:
    """Case-insensitive replacement keeps the surrounding text as is."""
    assert replace("foo bar foo", "foo", "bar") == "bar bar bar"
    assert replace("FOO bar foo", "foo", "bar", False) == "bar bar bar"
    assert replace("One and two and THREE and Four", "and", "&", False) == "One & two & THREE & Four"


@pytest.mark.os_agnostic
def test_replace_treats_search_and_replacement_literally() -> None:
    """Regex metacharacters and backreferences have no special meaning."""
    assert replace("a.b.c", ".", r"\1", False) == r"a\1b\1c"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("value", "expected"), [("", ""), ("foo", "oof"), ("shekhar", "rahkehs"), ("foo_", "_oof")])
def test_reverse(value: str, expected: str) -> None:
    """Characters come back in reverse order."""
    assert reverse(value) == expected


# ======================== padding and trimming ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["1", "01", "001", "0001", "00001"])
def test_left_pad_fills_to_length(value: str) -> None:
    """Already long enough values are unchanged."""
    assert left_pad(value, "0", 5) == "00001"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", "10000"), ("10", "10000"), ("1000", "10000"), ("10000", "10000"), ("10000000", "10000000")],
)
def test_right_pad_fills_to_length(value: str, expected: str) -> None:
    """Longer values are never cut."""
    assert right_pad(value, "0", 5) == expected


@pytest.mark.os_agnostic
def test_left_and_right_trim() -> None:
    """Each side trims only its own end."""
    assert left_trim("     strman") == "strman"
    assert left_trim("     strman  ") == "strman  "
    assert right_trim("strman   ") == "strman"
    assert right_trim("   strman") == "   strman"


@pytest.mark.os_agnostic
def test_trim_start_defaults_to_whitespace() -> None:
    """Empty and missing values yield None."""
    assert trim_start("   abc   ") == "abc   "
    assert trim_start("abc") == "abc"
    assert trim_start("") is None
    assert trim_start(None) is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "chars"),
    [("-_-abc-_-", ("_", "-")), ("-_-!abc-_-", ("_", "-", "!")), ("-_-#abc-_-", ("_", "-", "!", "#"))],
)
def test_trim_start_removes_given_characters(value: str, chars: tuple[str, ...]) -> None:
    """Any mix of the listed characters is removed."""
    assert trim_start(value, *chars) == "abc-_-"


@pytest.mark.os_agnostic
def test_trim_end_defaults_to_whitespace() -> None:
    """Empty and missing values yield None."""
    assert trim_end("   abc   ") == "   abc"
    assert trim_end("abc") == "abc"
    assert trim_end("") is None
    assert trim_end(None) is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "chars"),
    [("-_-abc-_-", ("_", "-")), ("-_-abc!-_-", ("_", "-", "!")), ("-_-abc#-_-", ("_", "-", "!", "#"))],
)
def test_trim_end_removes_given_characters(value: str, chars: tuple[str, ...]) -> None:
    """Any mix of the listed characters is removed."""
    assert trim_end(value, *chars) == "-_-abc"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", ["foo bar", "     foo     bar    ", " foo     bar   ", "    foo     bar "])
def test_collapse_whitespace_leaves_single_spaces(value: str) -> None:
    """Runs shrink to one space and the ends are trimmed."""
    assert collapse_whitespace(value) == "foo bar"


# ======================== truncation ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "length", "filler", "expected"),
    [
        ("foo bar", 0, ".", ""),
        ("foo bar", 3, ".", "fo."),
        ("foo bar", 2, ".", "f."),
        ("foo bar", 4, ".", "foo."),
        ("foo bar", 7, ".", "foo bar"),
        ("foo bar", 8, ".", "foo bar"),
        (LIBRARY, 16, "...", "A Javascript ..."),
        (LIBRARY, 15, "...", "A Javascript..."),
        (LIBRARY, 14, "...", "A Javascrip..."),
    ],
)
def test_truncate_cuts_and_appends_filler(value: str, length: int, filler: str, expected: str) -> None:
    """The filler counts towards the target length."""
    assert truncate(value, length, filler) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "length", "filler", "expected"),
    [
        ("foo bar", 0, ".", ""),
        ("foo bar", 4, ".", "foo."),
        ("foo bar", 3, ".", "."),
        ("foo bar", 2, ".", "."),
        ("foo bar", 7, ".", "foo bar"),
        ("foo bar", 8, ".", "foo bar"),
        (LIBRARY, 16, "...", "A Javascript..."),
        (LIBRARY, 15, "...", "A Javascript..."),
        (LIBRARY, 14, "...", "A..."),
        (LIBRARY, 13, "...", "A..."),
    ],
)
def test_safe_truncate_keeps_whole_words(value: str, length: int, filler: str, expected: str) -> None:
    """Words are never cut in the middle."""
    assert safe_truncate(value, length, filler) == expected


@pytest.mark.os_agnostic
def test_when_length_is_negative_truncation_raises() -> None:
    """Negative lengths are argument errors for both variants."""
    with pytest.raises(InvalidArgumentError):
        truncate("foo", -1, ".")
    with pytest.raises(InvalidArgumentError):
        safe_truncate("foo", -1, ".")


@pytest.mark.os_agnostic
def test_when_filler_is_longer_than_length_truncate_raises() -> None:
    """The result never exceeds the requested length."""
    with pytest.raises(InvalidArgumentError, match="filler"):
        truncate("foo bar", 2, "...")


@pytest.mark.os_agnostic
def test_filler_as_long_as_length_replaces_the_whole_text() -> None:
    """A filler of exactly ``length`` characters is returned on its own."""
    assert truncate("foo bar", 3, "...") == "..."


# ======================== slicing and shuffling ========================


@pytest.mark.os_agnostic
def test_slice_text_uses_half_open_bounds() -> None:
    """The end index is exclusive and optional."""
    assert slice_text("foobar", 1, 3) == "oo"
    assert slice_text("foobar", 3) == "bar"


@pytest.mark.os_agnostic
def test_shuffle_permutes_the_characters() -> None:
    """A shuffle keeps the same multiset of characters."""
    assert sorted(shuffle("shekhar")) == sorted("shekhar")
    assert shuffle("") == ""
