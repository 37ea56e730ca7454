"""Tests for the CSS selector parser."""

import pytest

from selector_builder import (
    DuplicateUniqueError,
    NO_RANK,
    OrderViolationError,
    css_selector_builder as builder,
)
from selector_builder.parser import ParseError, parse_selector


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    @pytest.mark.parametrize(
        "source",
        [
            "div",
            "#main.container.editable",
            'a[href$=".png"]:focus',
            "li#first.item[data-x]:hover::before",
            "p::first-line",
            "*.item",
            "tr:nth-of-type(even)",
            "input[type=\"text\"]:not(.disabled)",
            ":not(:nth-child(2))",
            "li:is(:hover, :focus-visible)",
            "a:not(:is(.x, :has(b)))",
            "[data-x=\"a]b\"]",
            "a[title='x]y'].link",
        ],
    )
    def test_round_trip(self, source: str):
        assert parse_selector(source).stringify() == source

    def test_matches_builder(self):
        expected = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert parse_selector('a[href$=".png"]:focus') == expected

    def test_surrounding_whitespace_ignored(self):
        assert parse_selector("  div.a \n").stringify() == "div.a"


# ---------------------------------------------------------------------------
# Complex selectors
# ---------------------------------------------------------------------------


class TestComplex:
    def test_adjacent_sibling(self):
        assert parse_selector("div#main + p").stringify() == "div#main + p"

    def test_combinator_without_spaces(self):
        assert parse_selector("ul>li~p+a").stringify() == "ul > li ~ p + a"

    def test_descendant_is_padded(self):
        assert parse_selector("div span").stringify() == "div   span"

    def test_builder_output_round_trips(self):
        source = (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )
        assert parse_selector(source).stringify() == source

    def test_combined_rank_reset(self):
        assert parse_selector("a > b").last_rank == NO_RANK

    def test_unique_kind_allowed_in_each_compound(self):
        assert parse_selector("#a > #b").stringify() == "#a > #b"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestBuilderErrors:
    def test_order_violation(self):
        with pytest.raises(OrderViolationError):
            parse_selector(".c1#main")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateUniqueError):
            parse_selector("div#a#b")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateUniqueError):
            parse_selector("p::before::after")

    def test_error_in_second_compound(self):
        with pytest.raises(OrderViolationError):
            parse_selector("div > :hover.a")


class TestParseErrors:
    @pytest.mark.parametrize("source", ["", "   ", "div[", "> a", "a >", "#", "a..b"])
    def test_malformed(self, source: str):
        with pytest.raises(ParseError):
            parse_selector(source)

    def test_position_reported(self):
        with pytest.raises(ParseError) as exc_info:
            parse_selector("div..x")
        assert exc_info.value.column == 5

    def test_position_accounts_for_leading_whitespace(self):
        source = "\n  div..x"
        with pytest.raises(ParseError) as exc_info:
            parse_selector(source)
        assert (exc_info.value.line, exc_info.value.column) == (2, 7)
        assert exc_info.value.location == "line 2, column 7"
        assert exc_info.value.source == source

    def test_summary_is_single_line(self):
        with pytest.raises(ParseError) as exc_info:
            parse_selector("div[")
        assert exc_info.value.summary
        assert "\n" not in exc_info.value.summary

    def test_unbalanced_arguments(self):
        with pytest.raises(ParseError):
            parse_selector(":not(:nth-child(2)")

    def test_unterminated_quote_in_attribute(self):
        with pytest.raises(ParseError):
            parse_selector('[data-x="a]')
