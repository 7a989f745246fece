"""
PRIOHEAP — Min-Heap Container
==============================
Array-backed binary min-heap, generic over a three-way comparator.

The container owns a dense ``list``; index 0 is the root and the list length
is the heap size.  Every mutation is followed by a repair (see
``prioheap.heap.repair``), after which each element is no greater than its
children under the configured ordering.

Thread safety: NOT thread-safe.  Wrap the whole container in a lock if it
is shared between threads.

Usage:
    heap = MinHeap.from_collection([5, 3, 8])
    heap.insert(1)
    smallest = heap.extract_minimum()
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from prioheap.core.exceptions import EmptyContainerError, InvalidIndexError
from prioheap.heap.geometry import ROOT, left_child, right_child
from prioheap.heap.ordering import Comparator, less_than, natural_order
from prioheap.heap.repair import HeapRepairer, RepairReport, build_repairer

T = TypeVar("T")


class MinHeap(Generic[T]):
    """
    Binary min-heap over a flat list.

    ``comparator`` decides the ordering (``natural_order`` by default);
    ``repairer`` decides how the invariant is restored (built from
    settings when omitted).
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        *,
        comparator: Comparator[T] = natural_order,
        repairer: HeapRepairer | None = None,
    ) -> None:
        self._comparator = comparator
        self._less = less_than(comparator)
        self._repairer = repairer or build_repairer()
        self._items: list[T] = []
        self._last_repair: RepairReport | None = None

        if items is not None:
            self._items.extend(items)
            self._last_repair = self._repairer.heapify(self._items, self._less)

    @classmethod
    def from_collection(
        cls,
        items: Iterable[T],
        *,
        comparator: Comparator[T] = natural_order,
        repairer: HeapRepairer | None = None,
    ) -> MinHeap[T]:
        """Build a heap holding exactly ``items``, repaired once."""
        return cls(items, comparator=comparator, repairer=repairer)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def comparator(self) -> Comparator[T]:
        return self._comparator

    @property
    def repairer(self) -> HeapRepairer:
        return self._repairer

    @property
    def last_repair(self) -> RepairReport | None:
        """Report of the most recent repair, ``None`` before the first one."""
        return self._last_repair

    @property
    def is_empty(self) -> bool:
        return not self._items

    # ── Mutation ─────────────────────────────────────────────────────────

    def insert(self, item: T) -> RepairReport:
        """
        Add ``item`` and repair.

        With the default bubble strategy the whole list is repaired, so any
        existing element may move, not only the new leaf's ancestors.
        """
        self._last_repair = self._repairer.push(self._items, item, self._less)
        return self._last_repair

    def extract_minimum(self) -> T:
        """
        Remove and return the root element.

        Raises ``EmptyContainerError`` (before touching the list) when the
        heap is empty.
        """
        self._ensure_not_empty("extract_minimum")
        minimum, self._last_repair = self._repairer.pop_root(self._items, self._less)
        return minimum

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    # ── Queries ──────────────────────────────────────────────────────────

    def peek_minimum(self) -> T:
        """Return the root element without removing it."""
        self._ensure_not_empty("peek_minimum")
        return self._items[ROOT]

    def verify(self, start_index: int = ROOT, shallow_only: bool = False) -> bool:
        """
        Check the min-heap invariant below ``start_index``.

        Recurses through the whole subtree unless ``shallow_only`` is set,
        in which case only the node's immediate children are compared.
        Indices past the end describe an empty subtree and verify ``True``.
        """
        if start_index < ROOT:
            raise InvalidIndexError(
                f"start_index must be non-negative, got {start_index}",
                operation="verify",
                size=len(self._items),
            )
        if start_index >= len(self._items):
            return True

        left = left_child(start_index)
        right = right_child(start_index)

        for child in (left, right):
            if child < len(self._items) and self._less(
                self._items[child], self._items[start_index]
            ):
                return False

        if shallow_only:
            return True
        return self.verify(left) and self.verify(right)

    def to_list(self) -> list[T]:
        """Copy of the elements in physical storage order."""
        return list(self._items)

    def _ensure_not_empty(self, operation: str) -> None:
        if not self._items:
            raise EmptyContainerError(
                f"{operation} called on an empty heap",
                operation=operation,
                size=0,
            )

    # ── Dunder ───────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"MinHeap({self._items!r}, repairer={self._repairer!r})"
