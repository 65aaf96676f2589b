"""
Tests for the similarity primitives.
"""

import pytest
from datetime import date

from expense_recon.utils.similarity import (
    amount_similarity,
    amounts_match,
    date_delta_days,
    normalize_text,
    string_similarity,
)


TEXT_PAIRS = [
    ("Shoprite", "Shoprite"),
    ("Shoprite Lekki", "SHOPRITE LEKKI PHASE 1"),
    ("kitten", "sitting"),
    ("", "x"),
    ("", ""),
    ("Uber", "  uber  "),
    ("Chicken Republic", "CHICKEN REP IKEJA"),
    ("a", "b"),
    ("Total Energies", "TOTALENERGIES MARKETING"),
]


class TestStringSimilarity:
    """Test suite for string_similarity."""

    def test_identical_strings(self):
        assert string_similarity("Shoprite", "Shoprite") == 1.0

    def test_empty_against_non_empty(self):
        assert string_similarity("", "x") == 0.0
        assert string_similarity("x", "") == 0.0

    def test_both_empty_are_identical(self):
        assert string_similarity("", "") == 1.0

    def test_none_treated_as_empty(self):
        assert string_similarity(None, "Shoprite") == 0.0
        assert string_similarity(None, None) == 1.0

    def test_case_and_whitespace_ignored(self):
        assert string_similarity("  SHOPRITE ", "shoprite") == 1.0

    def test_whitespace_only_is_empty(self):
        assert string_similarity("   ", "shoprite") == 0.0

    def test_levenshtein_ratio(self):
        """kitten -> sitting needs 3 edits over 7 characters."""
        assert string_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_prefix_insertions(self):
        """8 inserted characters over a 22 character description."""
        similarity = string_similarity("Shoprite Lekki", "SHOPRITE LEKKI PHASE 1")
        assert similarity == pytest.approx(14 / 22)

    def test_no_shared_characters(self):
        assert string_similarity("KFC", "Uber Trip") == 0.0

    @pytest.mark.parametrize("a,b", TEXT_PAIRS)
    def test_symmetric(self, a, b):
        assert string_similarity(a, b) == string_similarity(b, a)

    @pytest.mark.parametrize("a,b", TEXT_PAIRS)
    def test_bounded(self, a, b):
        assert 0.0 <= string_similarity(a, b) <= 1.0

    def test_deterministic(self):
        first = string_similarity("Chicken Republic", "CHICKEN REP IKEJA")
        second = string_similarity("Chicken Republic", "CHICKEN REP IKEJA")
        assert first == second

    def test_normalize_text(self):
        assert normalize_text("  Mixed Case  ") == "mixed case"
        assert normalize_text(None) == ""


class TestDateDelta:
    """Test suite for date_delta_days."""

    def test_same_day(self):
        assert date_delta_days(date(2024, 3, 1), date(2024, 3, 1)) == 0

    def test_absolute_difference(self):
        assert date_delta_days(date(2024, 3, 1), date(2024, 3, 4)) == 3
        assert date_delta_days(date(2024, 3, 4), date(2024, 3, 1)) == 3

    def test_leap_year(self):
        assert date_delta_days(date(2024, 2, 28), date(2024, 3, 1)) == 2

    def test_across_years(self):
        assert date_delta_days(date(2023, 12, 31), date(2024, 1, 30)) == 30


class TestAmountsMatch:
    """Test suite for amounts_match."""

    def test_exact(self):
        assert amounts_match(100, 100) is True

    def test_within_tolerance(self):
        """1 / 100.5 is just under 1%."""
        assert amounts_match(100, 101) is True

    def test_outside_tolerance(self):
        """10 / 105 is about 9.5%."""
        assert amounts_match(100, 110) is False

    def test_sign_ignored(self):
        assert amounts_match(15000, -15000) is True
        assert amounts_match(-100, 101) is True

    def test_both_zero(self):
        assert amounts_match(0, 0) is True

    def test_zero_against_non_zero(self):
        assert amounts_match(0, 5) is False

    def test_custom_tolerance(self):
        assert amounts_match(100, 110, tolerance=0.1) is True
        assert amounts_match(100, 101, tolerance=0.0) is False


class TestAmountSimilarity:
    """Test suite for amount_similarity."""

    def test_equal(self):
        assert amount_similarity(250, -250) == 1.0

    def test_fifty_percent_apart(self):
        """50 / 125 relative difference."""
        assert amount_similarity(100, 150) == pytest.approx(0.6)

    def test_floored_at_zero(self):
        assert amount_similarity(0, 10) == 0.0
        assert amount_similarity(100, 300) == 0.0
