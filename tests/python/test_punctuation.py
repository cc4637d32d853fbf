"""
Tests for trim_punctuation.

Each trimming step is exercised on its own, then in combination, using
values as they appear in real catalog records.
"""

import pytest
from marcrules import trim_punctuation


class TestTrailingSeparators:
    """Trailing commas, slashes, semicolons and colons."""

    @pytest.mark.parametrize("value, expected", [
        ("Smith, Jane,", "Smith, Jane"),
        ("Systems programming /", "Systems programming"),
        ("New York ;", "New York"),
        ("Systems programming :", "Systems programming"),
        ("Title / ", "Title"),
        ("Title :  ", "Title"),
        ("Places, ;", "Places,"),
        ("Title /", "Title"),
        ("Title /\t", "Title"),
        ("Title,\n", "Title"),
        ("Title ;: \t ", "Title"),
    ])
    def test_strips_trailing_run(self, value, expected):
        """Test the trailing separator run and surrounding spaces are removed."""
        assert trim_punctuation(value) == expected

    def test_leaves_interior_punctuation(self):
        """Test separators inside the value are kept."""
        assert trim_punctuation("Smith, Jane, 1975-") == "Smith, Jane, 1975-"

    def test_only_one_space_before_run(self):
        """Test spaces before the separator run beyond the first are kept."""
        assert trim_punctuation("Title  /") == "Title "

    def test_whitespace_without_separator_is_kept(self):
        """Test trailing whitespace alone is not a separator run."""
        assert trim_punctuation("Moby Dick   ") == "Moby Dick   "


class TestTrailingPeriod:
    """Trailing periods after three or more word characters."""

    @pytest.mark.parametrize("value, expected", [
        ("Jane Smith.", "Jane Smith"),
        ("Computer programming.", "Computer programming"),
        ("2020.", "2020"),
        ("abc.  ", "abc"),
    ])
    def test_drops_period_after_word(self, value, expected):
        """Test a period after a long word is removed."""
        assert trim_punctuation(value) == expected

    @pytest.mark.parametrize("value", [
        "ed.",
        "Smith, J.",
        "Jr.",
        "U.S.A.",
        "Music (1950s).",
    ])
    def test_keeps_abbreviation_period(self, value):
        """Test periods after short abbreviations or punctuation are kept."""
        assert trim_punctuation(value) == value

    def test_period_exposed_by_separator_removal(self):
        """Test a period uncovered by separator trimming is still considered."""
        assert trim_punctuation("History.,") == "History"
        assert trim_punctuation("ab., ") == "ab."


class TestBrackets:
    """Leading and trailing square brackets."""

    def test_strips_enclosing_brackets(self):
        assert trim_punctuation("[interior]") == "interior"

    def test_strips_lone_leading_bracket(self):
        assert trim_punctuation("[only-left") == "only-left"

    def test_strips_lone_trailing_bracket(self):
        assert trim_punctuation("only-right]") == "only-right"

    def test_interior_brackets_prevent_stripping(self):
        """Test nothing is stripped when brackets appear inside."""
        assert trim_punctuation("[a[b]c]") == "[a[b]c]"
        assert trim_punctuation("[1990?] [i.e. 1991]") == "[1990?] [i.e. 1991]"

    def test_empty_brackets_are_kept(self):
        assert trim_punctuation("[]") == "[]"

    def test_brackets_after_separator(self):
        """Test brackets exposed by separator trimming are stripped."""
        assert trim_punctuation("[New York] :") == "New York"


class TestTrimBehavior:
    """General properties of trim_punctuation."""

    @pytest.mark.parametrize("value", [
        "Systems programming : a practical guide / Jane Smith.",
        "Smith, Jane,",
        "[New York] :",
        "[S.l. :",
        "Example Press,",
        "ed.",
        "",
        "plain",
    ])
    def test_idempotent(self, value):
        """Test trimming a trimmed value changes nothing."""
        once = trim_punctuation(value)
        assert trim_punctuation(once) == once

    def test_returns_new_string(self):
        """Test the input is left as it was."""
        value = "Jane Smith."
        trimmed = trim_punctuation(value)
        assert value == "Jane Smith."
        assert trimmed == "Jane Smith"

    def test_empty_string(self):
        assert trim_punctuation("") == ""

    @pytest.mark.parametrize("value, once, twice", [
        ("abc.]", "abc.", "abc"),
        ("[abcd,]", "abcd,", "abcd"),
        ("Places, ;", "Places,", "Places"),
    ])
    def test_not_idempotent_when_brackets_or_runs_hide_punctuation(self, value, once, twice):
        """Test each step runs once, so punctuation it uncovers stays put."""
        assert trim_punctuation(value) == once
        assert trim_punctuation(once) == twice
