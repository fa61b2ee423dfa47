"""Tests for ordered navigation: higher, lower, ceiling and floor.

The sample tree is::

         5
       /   \\
      3     8
     / \\   / \\
    1   4 7   9
"""

import pytest

from ordertreelib import OrderedTree
from ordertreelib.testing import make_sample_tree


@pytest.fixture
def sample_tree():
    return make_sample_tree()


class TestHigher:

    @pytest.mark.parametrize("probe, expected", [
        (5, 7),
        (0, 1),
        (1, 3),
        (2, 3),
        (3, 4),
        (4, 5),    # answer is an ancestor reached before turning right
        (4.5, 5),
        (6, 7),
        (7, 8),
        (8, 9),
        (9, None),
        (100, None),
    ])
    def test_higher(self, sample_tree, probe, expected):
        assert sample_tree.higher(probe) == expected

    def test_higher_on_empty_tree(self):
        assert OrderedTree().higher(1) is None

    def test_higher_none(self, sample_tree):
        assert sample_tree.higher(None) is None

    def test_higher_skips_saved_candidate_correctly(self):
        """A left turn remembers the parent even if the walk later turns right."""
        tree = make_sample_tree([5, 3])
        assert tree.higher(4) == 5
        assert tree.higher(3) == 5


class TestLower:

    @pytest.mark.parametrize("probe, expected", [
        (5, 4),
        (10, 9),
        (9, 8),
        (8, 7),
        (7, 5),    # answer is an ancestor reached before turning left
        (6, 5),
        (4, 3),
        (3, 1),
        (2, 1),
        (1, None),
        (-3, None),
    ])
    def test_lower(self, sample_tree, probe, expected):
        assert sample_tree.lower(probe) == expected

    def test_lower_on_empty_tree(self):
        assert OrderedTree().lower(1) is None

    def test_lower_none(self, sample_tree):
        assert sample_tree.lower(None) is None

    def test_lower_remembers_candidate(self):
        tree = make_sample_tree([5, 8])
        assert tree.lower(6) == 5


class TestCeilingFloor:

    def test_documented_examples(self, sample_tree):
        assert sample_tree.ceiling(6) == 7
        assert sample_tree.floor(6) == 5
        assert sample_tree.higher(5) == 7
        assert sample_tree.lower(5) == 4

    @pytest.mark.parametrize("value", [1, 3, 4, 5, 7, 8, 9])
    def test_present_element_is_its_own_bound(self, sample_tree, value):
        assert sample_tree.ceiling(value) == value
        assert sample_tree.floor(value) == value

    def test_out_of_range(self, sample_tree):
        assert sample_tree.ceiling(10) is None
        assert sample_tree.floor(0) is None
        assert sample_tree.ceiling(0) == 1
        assert sample_tree.floor(10) == 9

    def test_empty_tree(self):
        tree = OrderedTree()
        assert tree.ceiling(1) is None
        assert tree.floor(1) is None

    def test_none(self, sample_tree):
        assert sample_tree.ceiling(None) is None
        assert sample_tree.floor(None) is None


class TestAgainstSortedList:
    """Cross-check navigation with a brute-force search over the sorted elements."""

    ELEMENTS = [50, 20, 80, 10, 30, 70, 90, 25, 35, 65, 75, 5, 95]

    def test_all_probes(self):
        tree = make_sample_tree(self.ELEMENTS)
        ordered = sorted(self.ELEMENTS)
        for probe in range(0, 101):
            above = [e for e in ordered if e > probe]
            below = [e for e in ordered if e < probe]
            assert tree.higher(probe) == (above[0] if above else None)
            assert tree.lower(probe) == (below[-1] if below else None)
            at_or_above = [e for e in ordered if e >= probe]
            at_or_below = [e for e in ordered if e <= probe]
            assert tree.ceiling(probe) == (at_or_above[0] if at_or_above else None)
            assert tree.floor(probe) == (at_or_below[-1] if at_or_below else None)
