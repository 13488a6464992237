"""Unit tests for top-N selection and alphabetical ordering."""

import pytest

from tagcloud.errors import InvalidArgument
from tagcloud.frequency import compute_word_frequencies
from tagcloud.ranking import (
    order_alphabetically,
    rank_by_count,
    select_top,
)


class TestSelectTop:
    """Tests for select_top."""

    def test_selects_highest_counts(self, sample_text):
        """The most frequent words come first; ties go alphabetically."""
        frequencies = compute_word_frequencies(sample_text)

        selection = select_top(frequencies, 3)

        assert selection == [("the", 3), ("cat", 2), ("mat", 1)]

    @pytest.mark.parametrize("n", [1, 2, 4, 6])
    def test_selection_has_exactly_n_entries(self, sample_text, n):
        frequencies = compute_word_frequencies(sample_text)

        assert len(select_top(frequencies, n)) == n

    def test_selection_is_non_increasing_by_count(self):
        frequencies = {"a": 1, "b": 5, "c": 3, "d": 5, "e": 2}

        counts = [count for _, count in select_top(frequencies, 5)]

        assert counts == sorted(counts, reverse=True)

    def test_tie_break_is_alphabetical(self):
        """Equal counts are ordered by word regardless of insertion order."""
        frequencies = {"zeta": 2, "alpha": 2, "mu": 2, "beta": 1}

        selection = select_top(frequencies, 2)

        assert selection == [("alpha", 2), ("mu", 2)]

    def test_selection_is_deterministic(self):
        """Tables with the same content select the same words."""
        first = {"b": 1, "a": 1, "c": 1}
        second = {"c": 1, "a": 1, "b": 1}

        assert select_top(first, 2) == select_top(second, 2)

    def test_n_larger_than_distinct_words_raises(self, sample_text):
        frequencies = compute_word_frequencies(sample_text)

        with pytest.raises(InvalidArgument) as exc_info:
            select_top(frequencies, 7)

        assert exc_info.value.name == "N"
        assert "6 distinct words" in exc_info.value.reason

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_n_raises(self, n):
        with pytest.raises(InvalidArgument):
            select_top({"a": 1}, n)

    @pytest.mark.parametrize("n", [None, "3", 2.0, True])
    def test_non_integer_n_raises(self, n):
        with pytest.raises(InvalidArgument):
            select_top({"a": 1, "b": 2, "c": 3}, n)

    def test_does_not_modify_table(self):
        frequencies = {"a": 2, "b": 1}

        select_top(frequencies, 1)

        assert frequencies == {"a": 2, "b": 1}


class TestRankByCount:
    """Tests for rank_by_count."""

    def test_ranks_every_entry(self):
        ranked = rank_by_count({"b": 1, "a": 1, "c": 4})

        assert ranked == [("c", 4), ("a", 1), ("b", 1)]


class TestOrderAlphabetically:
    """Tests for order_alphabetically."""

    def test_orders_by_word(self):
        ordered = order_alphabetically([("the", 3), ("cat", 2), ("mat", 1)])

        assert ordered == [("cat", 2), ("mat", 1), ("the", 3)]

    def test_ignores_case(self):
        """Comparison is case-insensitive."""
        ordered = order_alphabetically([("banana", 1), ("Apple", 2), ("cherry", 3)])

        assert [w for w, _ in ordered] == ["Apple", "banana", "cherry"]

    def test_output_is_non_decreasing(self, sample_text):
        selection = select_top(compute_word_frequencies(sample_text), 6)

        words = [w.lower() for w, _ in order_alphabetically(selection)]

        assert words == sorted(words)

    def test_keeps_counts(self):
        selection = [("b", 7), ("a", 9)]

        assert sorted(order_alphabetically(selection)) == sorted(selection)
