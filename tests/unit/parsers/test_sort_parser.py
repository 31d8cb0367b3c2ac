"""
Tests for the sort expression parser.
"""

from __future__ import annotations

import pytest

from sortparam.exceptions import SortConfigurationError
from sortparam.models import Direction, Order, Sort
from sortparam.parsers.sort_parser import (
    has_text,
    not_only_dots,
    parse_sort,
    tokenize,
)


# -------------------------------------------------------------------------
# Test: tokenize
# -------------------------------------------------------------------------


class TestTokenize:
    """Tests for tokenize() function."""

    def test_splits_on_delimiter(self) -> None:
        """Test basic splitting keeps token order."""
        assert tokenize("firstname,lastname,asc", ",") == [
            "firstname",
            "lastname",
            "asc",
        ]

    def test_drops_empty_tokens(self) -> None:
        """Test empty tokens between delimiters are dropped."""
        assert tokenize(",firstname,,lastname,", ",") == ["firstname", "lastname"]

    def test_drops_blank_tokens(self) -> None:
        """Test whitespace-only tokens are dropped."""
        assert tokenize("a, ,desc", ",") == ["a", "desc"]

    @pytest.mark.parametrize("token", [".", "..", "...", " . "])
    def test_drops_dot_only_tokens(self, token: str) -> None:
        """Test tokens made only of dots are dropped."""
        assert tokenize(f"name,{token},desc", ",") == ["name", "desc"]

    def test_keeps_dotted_paths(self) -> None:
        """Test nested property paths survive."""
        assert tokenize("address.city,desc", ",") == ["address.city", "desc"]

    def test_does_not_trim(self) -> None:
        """Test surviving tokens are kept verbatim."""
        assert tokenize("a, desc", ",") == ["a", " desc"]

    def test_multi_character_delimiter(self) -> None:
        """Test a literal multi-character delimiter."""
        assert tokenize("a::b::desc", "::") == ["a", "b", "desc"]

    def test_empty_source(self) -> None:
        """Test an empty source has no tokens."""
        assert tokenize("", ",") == []

    @pytest.mark.parametrize("delimiter", ["", "  "])
    def test_blank_delimiter_rejected(self, delimiter: str) -> None:
        """Test a blank delimiter is a configuration error."""
        with pytest.raises(SortConfigurationError) as exc_info:
            tokenize("a,b", delimiter)

        assert exc_info.value.field_name == "property_delimiter"


class TestTextHelpers:
    """Tests for has_text() and not_only_dots()."""

    def test_has_text(self) -> None:
        """Test text detection."""
        assert has_text("a") is True
        assert has_text(" a ") is True
        assert has_text("") is False
        assert has_text("   ") is False
        assert has_text(None) is False

    def test_not_only_dots(self) -> None:
        """Test dot-only detection."""
        assert not_only_dots("a.b") is True
        assert not_only_dots("...") is False
        assert not_only_dots(". .") is False


# -------------------------------------------------------------------------
# Test: parse_sort
# -------------------------------------------------------------------------


class TestParseSort:
    """Tests for parse_sort() function."""

    def test_no_values_is_unsorted(self) -> None:
        """Test an empty source list gives unsorted."""
        assert parse_sort([], ",") is Sort.unsorted()

    def test_none_is_unsorted(self) -> None:
        """Test a missing source list gives unsorted."""
        assert parse_sort(None, ",") is Sort.unsorted()

    def test_empty_value_is_unsorted(self) -> None:
        """Test a single empty value gives unsorted."""
        assert parse_sort([""], ",") is Sort.unsorted()

    def test_none_entries_skipped(self) -> None:
        """Test None entries are skipped without error."""
        assert parse_sort([None, "name,desc", None], ",") == Sort.of(
            [Order.desc("name")]
        )

    def test_properties_with_trailing_direction(self) -> None:
        """Test the trailing direction applies to every property."""
        assert list(parse_sort(["firstname,lastname,asc"], ",")) == [
            Order.asc("firstname"),
            Order.asc("lastname"),
        ]

    def test_multiple_values_concatenate(self) -> None:
        """Test each value contributes its own direction group."""
        assert list(parse_sort(["firstname,asc", "lastname,desc"], ",")) == [
            Order.asc("firstname"),
            Order.desc("lastname"),
        ]

    def test_without_direction_defaults_to_ascending(self) -> None:
        """Test values without a direction sort ascending."""
        assert list(parse_sort(["firstname,lastname"], ",")) == [
            Order.asc("firstname"),
            Order.asc("lastname"),
        ]

    def test_direction_is_case_insensitive(self) -> None:
        """Test upper-case direction words are recognized."""
        assert list(parse_sort(["name,DESC"], ",")) == [Order.desc("name")]

    def test_dot_only_token_dropped(self) -> None:
        """Test dot-only tokens are dropped and valid properties kept."""
        assert list(parse_sort(["name,...,desc"], ",")) == [Order.desc("name")]

    def test_only_dots_and_direction_is_unsorted(self) -> None:
        """Test a value with only dots and a direction yields nothing."""
        assert parse_sort(["...,asc"], ",") is Sort.unsorted()

    def test_direction_word_alone_yields_nothing(self) -> None:
        """Test a value holding only a direction word gives no orders."""
        assert parse_sort(["asc"], ",") is Sort.unsorted()
        assert list(parse_sort(["desc", "name,desc"], ",")) == [Order.desc("name")]

    def test_unrecognized_last_token_is_property(self) -> None:
        """Test an unknown last token is kept as a property."""
        assert list(parse_sort(["name, desc"], ",")) == [
            Order.asc("name"),
            Order.asc(" desc"),
        ]

    def test_nested_property_path(self) -> None:
        """Test dotted property paths are kept."""
        assert list(parse_sort(["address.city,desc"], ",")) == [
            Order.desc("address.city")
        ]

    def test_custom_delimiter(self) -> None:
        """Test parsing with another delimiter."""
        assert list(parse_sort(["a;b;desc"], ";")) == [Order.desc("a"), Order.desc("b")]

    def test_default_delimiter_is_comma(self) -> None:
        """Test the delimiter argument defaults to a comma."""
        assert list(parse_sort(["a,desc"])) == [Order.desc("a")]

    def test_repeated_properties_kept(self) -> None:
        """Test the same property may appear more than once."""
        assert list(parse_sort(["a,asc", "a,desc"], ",")) == [
            Order.asc("a"),
            Order.desc("a"),
        ]

    def test_result_directions(self) -> None:
        """Test per-value directions in a longer request."""
        sort = parse_sort(["a,b,desc", "c", "d,asc"], ",")

        assert [(o.property, o.direction) for o in sort] == [
            ("a", Direction.DESC),
            ("b", Direction.DESC),
            ("c", Direction.ASC),
            ("d", Direction.ASC),
        ]
