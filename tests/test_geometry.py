"""
Heap Geometry Tests
====================
Validates:
- Child/parent index arithmetic
- Root is its own parent
- is_heap over flat lists
"""

from __future__ import annotations

import operator

import pytest

from prioheap.heap.geometry import is_heap, left_child, parent, right_child


class TestIndexArithmetic:
    """Verify implicit-tree index math."""

    @pytest.mark.parametrize(
        "index,left,right",
        [(0, 1, 2), (1, 3, 4), (2, 5, 6), (3, 7, 8), (10, 21, 22)],
    )
    def test_children(self, index, left, right):
        assert left_child(index) == left
        assert right_child(index) == right

    @pytest.mark.parametrize(
        "index,expected",
        [(1, 0), (2, 0), (3, 1), (4, 1), (5, 2), (6, 2), (21, 10), (22, 10)],
    )
    def test_parent(self, index, expected):
        assert parent(index) == expected

    def test_root_is_its_own_parent(self):
        """Upward repair terminates at the root."""
        assert parent(0) == 0

    def test_parent_inverts_children(self):
        for i in range(100):
            assert parent(left_child(i)) == i
            assert parent(right_child(i)) == i


class TestIsHeap:
    """Verify the flat-list invariant check."""

    @pytest.mark.parametrize(
        "items",
        [[], [1], [1, 2], [1, 1, 1], [1, 3, 2, 4, 6, 7, 5]],
    )
    def test_valid_heaps(self, items):
        assert is_heap(items, operator.lt) is True

    @pytest.mark.parametrize(
        "items",
        [[2, 1], [1, 2, 0], [1, 3, 2, 4, 2]],
    )
    def test_invalid_heaps(self, items):
        assert is_heap(items, operator.lt) is False
