"""Tests for fuzzy matching and scoring."""

import pytest

from taskboard_tui.search import DEFAULT_WEIGHTS, NO_MATCH, ScoringWeights, match
from taskboard_tui.search.matcher import fold_case


class TestEmptyQuery:
    """Empty query always matches with a neutral score."""

    @pytest.mark.parametrize("text", ["", "Fix login bug", "   ", "ÄÖÜ"])
    def test_empty_query_matches(self, text):
        result = match(text, "")
        assert result.matched is True
        assert result.score == 0
        assert result.positions == ()


class TestSubsequence:
    """Tests for the ordered-subsequence test."""

    def test_non_contiguous_match(self):
        """Letters may be spread across the text."""
        result = match("Deploy service", "dpy")
        assert result.matched is True
        assert result.positions == (0, 2, 5)

    def test_case_insensitive(self):
        result = match("FIX Login", "fix login")
        assert result.matched is True
        assert result.positions == tuple(range(9))

    def test_order_matters(self):
        """Same letters in the wrong order do not match."""
        assert match("Deploy service", "ypd") is NO_MATCH

    def test_missing_character(self):
        assert match("Fix login bug", "fixz") is NO_MATCH

    def test_query_longer_than_text(self):
        assert match("ab", "abc") is NO_MATCH

    def test_greedy_first_occurrence(self):
        """Each query char takes its first available occurrence."""
        result = match("a_b_ab", "ab")
        assert result.positions == (0, 2)

    def test_duplicate_query_characters(self):
        result = match("bookkeeper", "oke")
        assert result.positions == (1, 3, 5)

    def test_non_ascii_not_folded(self):
        """Case folding is ASCII-only."""
        assert match("Äpfel", "äpfel") is NO_MATCH
        assert match("äpfel", "äpfel").matched is True

    def test_positions_stay_aligned_with_original_text(self):
        """Folding never changes string length, so positions index the original."""
        text = "İstanbul trip"
        result = match(text, "trip")
        assert result.matched is True
        assert all(0 <= p < len(text) for p in result.positions)
        assert "".join(text[p] for p in result.positions) == "trip"

    def test_non_string_input_degrades_to_no_match(self):
        assert match(None, "abc") is NO_MATCH  # type: ignore[arg-type]
        assert match("abc", None) is NO_MATCH  # type: ignore[arg-type]
        assert match(42, "4") is NO_MATCH  # type: ignore[arg-type]

    def test_positions_strictly_increasing(self):
        result = match("the quick brown fox jumps", "tqbfj")
        assert result.matched is True
        assert list(result.positions) == sorted(set(result.positions))


class TestScoring:
    """Tests for the scoring formula."""

    def test_exact_match_score(self):
        # base 100 + exact 1000 + prefix 500 + 4 consecutive pairs
        assert match("Login", "login").score == 1800

    def test_prefix_match_score(self):
        assert match("Login flow", "login").score == 800

    def test_mid_string_match_score(self):
        # 4 consecutive pairs, first match at index 5
        assert match("User login flow", "login").score == 290

    def test_gap_penalty(self):
        # positions (0, 2, 5): 3 skipped characters
        assert match("Deploy service", "dpy").score == 85

    def test_exact_beats_prefix_beats_mid_string(self):
        exact = match("Login", "login").score
        prefix = match("Login flow", "login").score
        middle = match("User login flow", "login").score
        assert exact > prefix > middle

    def test_consecutive_beats_scattered(self):
        assert match("xx login", "log").score > match("xx l_o_g", "log").score

    def test_earlier_match_beats_later(self):
        assert match("a login", "login").score > match("a long login", "login").score

    def test_custom_weights(self):
        weights = ScoringWeights(base=0, exact=0, prefix=0, consecutive=1, first_position=0, gap=0)
        assert match("Login", "login", weights).score == 4

    def test_default_weights(self):
        assert DEFAULT_WEIGHTS == ScoringWeights(
            base=100, exact=1000, prefix=500, consecutive=50, first_position=2, gap=5
        )

    def test_invalid_weight_raises(self):
        with pytest.raises(ValueError, match="Invalid scoring weight"):
            ScoringWeights(gap="5")  # type: ignore[arg-type]


class TestFoldCase:
    def test_ascii_only(self):
        assert fold_case("ABC xyz ÄÖ") == "abc xyz ÄÖ"
