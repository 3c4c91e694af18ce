"""Tests for aggregate module."""

from collections import Counter

import pytest

from symbol_clusters.aggregate import COMBINED_SCOPE, FrequencyAggregator

F1 = ["fun main() {", "    println(\"hi\");", "}"]
F2 = ["x := y != z;", "if (a >= b) { c++; }"]


class TestFrequencyAggregator:
    """Test per-extension and combined counting."""

    def test_round_trip_line(self):
        agg = FrequencyAggregator()
        agg.add_line("kt", "a!!b")

        assert agg.extension_tables["kt"] == Counter({"!": 2, "!!": 1})
        assert agg.combined == Counter({"!": 2, "!!": 1})

    def test_line_is_trimmed(self):
        agg = FrequencyAggregator()
        agg.add_line("kt", "   word   ")
        assert len(agg) == 0

    def test_scope_created_on_first_counted_window(self):
        agg = FrequencyAggregator()
        agg.add_lines("kt", ["onlylettershere", "AndMore"])
        assert "kt" not in agg.extension_tables
        assert list(agg.scopes()) == []

        agg.add_line("kt", "a;")
        assert "kt" in agg.extension_tables

    def test_scopes_order_and_combined_last(self):
        agg = FrequencyAggregator()
        agg.add_line("kt", "{}")
        agg.add_line("java", "();")
        names = [name for name, _ in agg.scopes()]
        assert names == ["kt", "java", COMBINED_SCOPE]

    def test_combined_is_sum_of_extensions(self):
        agg = FrequencyAggregator()
        agg.add_lines("kt", F1)
        agg.add_lines("java", F2)

        expected = agg.extension_tables["kt"] + agg.extension_tables["java"]
        assert agg.combined == expected

    def test_extension_named_like_combined_scope_stays_separate(self):
        agg = FrequencyAggregator()
        agg.add_line(COMBINED_SCOPE, "!")
        agg.add_line("kt", "!")
        assert agg.extension_tables[COMBINED_SCOPE] == Counter({"!": 1})
        assert agg.combined == Counter({"!": 2})

    def test_order_independent(self):
        forward = FrequencyAggregator()
        forward.add_lines("kt", F1)
        forward.add_lines("java", F2)

        backward = FrequencyAggregator()
        backward.add_lines("java", F2)
        backward.add_lines("kt", F1)

        interleaved = FrequencyAggregator()
        for i in range(max(len(F1), len(F2))):
            if i < len(F2):
                interleaved.add_line("java", F2[i])
            if i < len(F1):
                interleaved.add_line("kt", F1[i])

        for agg in (backward, interleaved):
            assert agg.extension_tables == forward.extension_tables
            assert agg.combined == forward.combined

    def test_merge_matches_sequential(self):
        sequential = FrequencyAggregator()
        sequential.add_lines("kt", F1)
        sequential.add_lines("kt", F2)

        first = FrequencyAggregator()
        first.add_lines("kt", F1)
        second = FrequencyAggregator()
        second.add_lines("kt", F2)
        first.merge(second)

        assert first.extension_tables == sequential.extension_tables
        assert first.combined == sequential.combined

    def test_width_one_counts_singles_only(self):
        agg = FrequencyAggregator(window_width=1)
        agg.add_line("kt", "a != b;")
        assert agg.extension_tables["kt"] == Counter({"!": 1, "=": 1, ";": 1, " ": 2})

    @pytest.mark.parametrize("width", [0, 4])
    def test_invalid_width(self, width):
        with pytest.raises(ValueError):
            FrequencyAggregator(window_width=width)

    def test_no_key_starts_with_letter(self):
        agg = FrequencyAggregator()
        agg.add_lines("kt", F1 + F2)
        assert not any(cluster[0].isalpha() for cluster in agg.combined)
