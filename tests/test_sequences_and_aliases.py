"""
Unit tests for sequence helpers and alias consistency checks.
"""

import random

from iconkit.rename.aliases import validate_aliases
from iconkit.util.sequences import merge_arrays, shuffle


class TestMergeArrays:
    """Tests for merge_arrays."""

    def test_union_keeps_first_occurrence_order(self):
        assert merge_arrays(["a", "b", "a"], ["c", "b", "d"]) == ["a", "b", "c", "d"]

    def test_inputs_untouched(self):
        first, second = [1, 2], [2, 3]

        merge_arrays(first, second)

        assert first == [1, 2]
        assert second == [2, 3]

    def test_empty_inputs(self):
        assert merge_arrays([], []) == []


class TestShuffle:
    """Tests for shuffle."""

    def test_returns_permutation_copy(self):
        items = list(range(20))

        shuffled = shuffle(items, rng=random.Random(7))

        assert items == list(range(20))
        assert sorted(shuffled) == items
        assert shuffled is not items

    def test_reproducible_with_seeded_rng(self):
        items = ["a", "b", "c", "d", "e"]

        assert shuffle(items, random.Random(3)) == shuffle(items, random.Random(3))

    def test_short_sequences(self):
        assert shuffle([]) == []
        assert shuffle(["only"]) == ["only"]


class TestValidateAliases:
    """Tests for validate_aliases."""

    def test_consistent_collection(self):
        metadata = {
            "house": {"aliases": ["home"]},
            "circle": {"tags": ["round"]},
        }

        assert validate_aliases(metadata) == []

    def test_reports_each_problem(self):
        metadata = {
            "a": {"aliases": ["a", "x", "x", "b"]},
            "b": {"aliases": ["x"]},
            "c": {"aliases": "x"},
        }

        issues = {(issue.icon, issue.alias, issue.reason) for issue in validate_aliases(metadata)}

        assert issues == {
            ("a", "a", "self reference"),
            ("a", "x", "duplicate"),
            ("a", "b", "shadows an icon"),
            ("b", "x", "also an alias of a"),
            ("c", "x", "not a list"),
        }

    def test_non_string_entries_reported(self):
        """Entries that are not strings should be flagged and skipped."""
        metadata = {"home": {"aliases": [["x"], {"name": "y"}, 3, "house"]}}

        issues = [(issue.alias, issue.reason) for issue in validate_aliases(metadata)]

        assert issues == [
            ("['x']", "not a string"),
            ("{'name': 'y'}", "not a string"),
            ("3", "not a string"),
        ]
