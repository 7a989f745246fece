"""
PRIOHEAP — Heap Package
========================
Generic array-backed min-heap with pluggable ordering and repair strategy.

Public API:
    MinHeap - the container
    BubbleRepairer, SiftRepairer, build_repairer - repair strategies
    natural_order, reverse_order, by_key - comparators
    format_tree, pretty_print - diagnostics
"""

from prioheap.heap.ordering import (
    Comparator,
    Ordering,
    by_key,
    less_than,
    natural_order,
    reverse_order,
)
from prioheap.heap.repair import (
    BubbleRepairer,
    HeapRepairer,
    RepairReport,
    SiftRepairer,
    build_repairer,
)
from prioheap.heap.container import MinHeap
from prioheap.heap.diagnostics import format_tree, pretty_print

__all__ = [
    "Comparator",
    "Ordering",
    "by_key",
    "less_than",
    "natural_order",
    "reverse_order",
    "BubbleRepairer",
    "HeapRepairer",
    "RepairReport",
    "SiftRepairer",
    "build_repairer",
    "MinHeap",
    "format_tree",
    "pretty_print",
]
