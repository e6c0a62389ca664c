"""Tests for edit-distance scoring."""

import pytest

from inventory_assistant.matching.edit_distance import (
    adaptive_threshold,
    distance_confidence,
    find_all_matches,
    find_best_match,
    fuzzy_match,
    highlight_differences,
    levenshtein_distance,
    round_half_up,
)
from inventory_assistant.matching.schemas import MatchType


class TestLevenshteinDistance:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize("text", ["", "a", "Karim", "Abdul Karim"])
    def test_identity_is_zero(self, text: str):
        """A string is zero edits from itself."""
        assert levenshtein_distance(text, text) == 0

    def test_classic_example(self):
        """kitten -> sitting takes three edits."""
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_symmetric(self):
        """Distance does not depend on argument order."""
        assert levenshtein_distance("Rahman", "Rahaman") == levenshtein_distance(
            "Rahaman", "Rahman"
        )

    def test_empty_string_is_length_of_other(self):
        """Distance from empty string is the other string's length."""
        assert levenshtein_distance("", "Hossain") == 7
        assert levenshtein_distance("Hossain", "") == 7

    def test_case_sensitive(self):
        """Differing case counts as substitutions."""
        assert levenshtein_distance("karim", "KARIM") == 5

    def test_none_treated_as_empty(self):
        """None input is coerced to an empty string."""
        assert levenshtein_distance(None, "abc") == 3


class TestConfidenceHelpers:
    """Tests for threshold and confidence helpers."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("", 0), ("ab", 1), ("Jhon", 2), ("karim", 2), ("Abdul Karim", 3)],
    )
    def test_adaptive_threshold(self, text: str, expected: int):
        """Threshold is 30% of length, rounded up, capped at 3."""
        assert adaptive_threshold(text) == expected

    def test_distance_confidence(self):
        """Confidence falls linearly with distance."""
        assert distance_confidence(0, 3) == 100
        assert distance_confidence(1, 3) == 67
        assert distance_confidence(1, 2) == 50
        assert distance_confidence(2, 2) == 0

    def test_distance_confidence_clamped(self):
        """Distances past the threshold never go below 0."""
        assert distance_confidence(3, 2) == 0

    def test_distance_confidence_zero_threshold(self):
        """Empty input only scores on an exact hit."""
        assert distance_confidence(0, 0) == 100
        assert distance_confidence(1, 0) == 0

    def test_round_half_up(self):
        """Halves round up rather than to even."""
        assert round_half_up(22.5) == 23
        assert round_half_up(0.5) == 1
        assert round_half_up(40.9) == 41


class TestFuzzyMatch:
    """Tests for fuzzy_match."""

    def test_within_threshold(self):
        """Two edits match at the default threshold."""
        assert fuzzy_match("Karim", "kareem") is True

    def test_outside_threshold(self):
        """Two edits do not match at threshold 1."""
        assert fuzzy_match("Karim", "kareem", threshold=1) is False

    def test_case_insensitive(self):
        """Case differences are ignored."""
        assert fuzzy_match("SARAH", "sarah", threshold=0) is True


class TestFindBestMatch:
    """Tests for find_best_match."""

    def test_finds_closest_option(self):
        """Single typo in a long name gives a confident match."""
        result = find_best_match("Abdul Karm", ["Sarah Wilson", "Abdul Karim"])

        assert result.match == "Abdul Karim"
        assert result.confidence == 67

    def test_transposition_at_threshold(self):
        """'Jhon' is two substitutions from 'John': a match at confidence 0."""
        result = find_best_match("Jhon", ["John", "Jane", "Bob"])

        assert result.match == "John"
        assert result.confidence == 0

    def test_tie_keeps_first_seen(self):
        """Equal distances keep the earlier option."""
        result = find_best_match("Rahmen", ["Rahmon", "Rahman"])

        assert result.match == "Rahmon"
        assert result.confidence == 50

    def test_no_match(self):
        """Nothing within threshold returns no match and confidence 0."""
        result = find_best_match("Zed", ["Abdul Karim", "Sarah Wilson"])

        assert result.match is None
        assert result.confidence == 0

    def test_empty_options(self):
        """Empty candidate list returns no match."""
        assert find_best_match("Karim", []).match is None


class TestFindAllMatches:
    """Tests for find_all_matches."""

    def test_sorted_and_stable(self):
        """Results are sorted by confidence; ties keep input order."""
        matches = find_all_matches("Rahmen", ["Rahmon", "Rahman", "Rahmen"], 50)

        assert [m.match for m in matches] == ["Rahmen", "Rahmon", "Rahman"]
        assert [m.confidence for m in matches] == [100, 50, 50]
        assert all(m.match_type == MatchType.FUZZY for m in matches)

    def test_min_confidence_filters(self):
        """Options below min_confidence are dropped."""
        matches = find_all_matches("Rahmen", ["Rahmon", "Rahmen"], 60)

        assert [m.match for m in matches] == ["Rahmen"]

    def test_far_options_excluded_even_at_zero(self):
        """Options beyond the threshold never appear."""
        matches = find_all_matches("Karim", ["Sarah Wilson"], 0)

        assert matches == []


class TestHighlightDifferences:
    """Tests for highlight_differences."""

    def test_same_value_unchanged(self):
        """Case-only difference returns the match as-is."""
        assert highlight_differences("sarah", "Sarah") == "Sarah"

    def test_correction_annotated(self):
        """Corrected values mention the original input."""
        assert (
            highlight_differences("Jhon", "John") == 'John (corrected from "Jhon")'
        )
