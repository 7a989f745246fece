"""
PRIOHEAP — Ordering Capability
===============================
Three-way comparators used for every heap decision.

A comparator takes two elements and returns a negative, zero or positive
integer (``Ordering.LESS`` / ``EQUAL`` / ``GREATER``).  The heap only ever
asks "is ``a`` strictly less than ``b``?", so partial orders are accepted:
incomparable elements report ``EQUAL`` and are left where they are.

Usage:
    from prioheap.heap.ordering import by_key, reverse_order

    newest_first = reverse_order(by_key(lambda event: event.timestamp))
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], int]
LessThan = Callable[[T, T], bool]


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def natural_order(a: Any, b: Any) -> Ordering:
    """Compare using the operands' own ``<`` operator."""
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(comparator: Comparator[T]) -> Comparator[T]:
    """Return a comparator that inverts ``comparator``."""

    def _reversed(a: T, b: T) -> int:
        return comparator(b, a)

    _reversed.__name__ = f"reverse_order({getattr(comparator, '__name__', comparator)!s})"
    return _reversed


def by_key(
    key: Callable[[T], K],
    comparator: Comparator[K] = natural_order,
) -> Comparator[T]:
    """Return a comparator that orders elements by ``key(element)``."""

    def _keyed(a: T, b: T) -> int:
        return comparator(key(a), key(b))

    _keyed.__name__ = f"by_key({getattr(key, '__name__', key)!s})"
    return _keyed


def less_than(comparator: Comparator[T]) -> LessThan[T]:
    """Derive the strict ``a < b`` predicate from a three-way comparator."""

    def _less(a: T, b: T) -> bool:
        return comparator(a, b) < 0

    return _less
