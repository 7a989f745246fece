"""
PRIOHEAP — Heap Index Geometry
===============================
Implicit binary tree over a flat list: no node objects, only index arithmetic.

    left_child(i)  = 2i + 1
    right_child(i) = 2i + 2
    parent(i)      = (i + 1) // 2 - 1      (parent(0) == 0)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from prioheap.heap.ordering import LessThan

T = TypeVar("T")

ROOT = 0


def left_child(index: int) -> int:
    return 2 * index + 1


def right_child(index: int) -> int:
    return 2 * index + 2


def parent(index: int) -> int:
    """
    Index of the parent node.

    The root is treated as its own parent; upward repair stops there.
    """
    if index <= ROOT:
        return ROOT
    return (index + 1) // 2 - 1


def is_heap(items: Sequence[T], less: LessThan[T]) -> bool:
    """True when no element is strictly less than its parent."""
    for i in range(1, len(items)):
        if less(items[i], items[parent(i)]):
            return False
    return True
