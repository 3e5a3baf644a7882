"""Tests for model normalization, row matching and quote extraction."""

from __future__ import annotations

import pytest

from src.sheet_pricing.matcher import (
    find_by_model,
    norm,
    parse_number,
    quote_from_row,
)


ROWS = [
    {"model": "SUPER R9", "quote price": "98000"},
    {"model": "DUKE R9", "quote price": "123000"},
    {"model": "Trail_X 200 (2024)", "quote price": "45000"},
]


class TestNorm:
    def test_hyphen_and_region_suffix(self):
        assert norm("Duke-R9 (India)") == norm("duke r9") == "duke r9"

    def test_none_is_empty(self):
        assert norm(None) == ""

    def test_non_string_coerced(self):
        assert norm(250) == "250"

    def test_nbsp_and_runs_of_whitespace(self):
        assert norm("  DUKE\u00a0\u00a0 R9\t") == "duke r9"

    def test_underscore_and_hyphen(self):
        assert norm("trail_x-200") == "trail x 200"

    def test_parentheses_non_greedy(self):
        assert norm("a (b) c (d)") == "a c"

    def test_only_parenthesized(self):
        assert norm("(discontinued)") == ""


class TestFindByModel:
    def test_exact_match(self):
        assert find_by_model(ROWS, "duke-r9")["quote price"] == "123000"

    def test_exact_preferred_over_earlier_substring(self):
        rows = [
            {"model": "DUKE R9 PRO", "quote price": "1"},
            {"model": "DUKE R9", "quote price": "2"},
        ]
        assert find_by_model(rows, "Duke R9")["quote price"] == "2"

    def test_query_contained_in_model(self):
        assert find_by_model(ROWS, "trail x")["quote price"] == "45000"

    def test_model_contained_in_query(self):
        assert find_by_model(ROWS, "DUKE R9 Black Edition")["quote price"] == "123000"

    def test_ambiguous_substring_first_row_wins(self):
        assert find_by_model(ROWS, "R9")["model"] == "SUPER R9"

    def test_unknown_model_not_found(self):
        assert find_by_model(ROWS, "UNKNOWN") is None

    def test_empty_query_not_found(self):
        assert find_by_model(ROWS, "") is None
        assert find_by_model(ROWS, None) is None
        assert find_by_model(ROWS, "(x)") is None

    def test_blank_model_rows_do_not_swallow_queries(self):
        rows = [{"model": "", "quote price": "1"}, {"quote price": "2"}]
        assert find_by_model(rows, "UNKNOWN") is None

    def test_no_rows(self):
        assert find_by_model([], "DUKE R9") is None


class TestQuoteFromRow:
    @pytest.mark.parametrize(
        "cell,expected",
        [
            ("123000", 123000),
            (" 98500.6 ", 98501),
            ("2.5", 3),
            ("-2.5", -2),
            ("1e3", 1000),
            (".5", 1),
        ],
    )
    def test_numeric(self, cell, expected):
        assert quote_from_row({"quote price": cell}) == expected

    @pytest.mark.parametrize(
        "cell", ["", "   ", "call us", "1,200", "NaN", "inf", "1e400", "1_000"]
    )
    def test_absent(self, cell):
        assert quote_from_row({"quote price": cell}) is None

    def test_missing_column(self):
        assert quote_from_row({"model": "DUKE R9"}) is None

    def test_parse_number_none(self):
        assert parse_number(None) is None
