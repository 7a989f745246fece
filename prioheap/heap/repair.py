"""
PRIOHEAP — Heap Repair Strategies
==================================
Algorithms that restore the min-heap invariant after a bulk load, an
insert or a root extraction.

BubbleRepairer (default)
    Every mutation is followed by a *full* repair: "fix" every index from
    the back of the list down to 1, bubbling each element toward the root,
    and run that whole descending pass ``passes`` times (2 by default).
    Extraction removes the root by shifting the remaining elements down
    one slot.  Cost per mutation is O(n·h).

    Two passes are not enough for every input (the smallest failures seen
    have 66 elements).  With ``converge=True`` further passes run until the
    invariant holds; each swap removes at least one index inversion, so
    this always terminates.

SiftRepairer
    Classical bottom-up sift-down heapify, O(log n) sift-up insert and
    last-to-root sift-down extraction.  Same invariant and extraction
    order, different physical layout.

Usage:
    repairer = BubbleRepairer(passes=2, converge=True)
    report = repairer.heapify(items, less)
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from prioheap.core.config import RepairStrategy, get_settings
from prioheap.core.exceptions import InvalidConfigurationError
from prioheap.core.logging import get_logger
from prioheap.heap.geometry import ROOT, is_heap, left_child, parent, right_child
from prioheap.heap.ordering import LessThan

if TYPE_CHECKING:
    from prioheap.core.config import Settings

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class RepairReport:
    """Work done by one repair call."""

    strategy: RepairStrategy
    size: int
    passes: int = 0
    swaps: int = 0


class HeapRepairer(abc.ABC):
    """
    Abstract base for repair strategies.

    Repairers own the list mutations that must be followed by a repair
    (append and root removal) so each strategy can pick its own
    removal scheme.
    """

    strategy: RepairStrategy

    def __init__(self, *, trace_swaps: bool = False) -> None:
        self.trace_swaps = trace_swaps

    @abc.abstractmethod
    def heapify(self, items: list[T], less: LessThan[T]) -> RepairReport:
        """Reorder ``items`` in place so the min-heap invariant holds."""

    @abc.abstractmethod
    def push(self, items: list[T], item: T, less: LessThan[T]) -> RepairReport:
        """Append ``item`` and repair."""

    @abc.abstractmethod
    def pop_root(
        self, items: list[T], less: LessThan[T]
    ) -> tuple[T, RepairReport]:
        """Remove and return ``items[0]``, then repair. ``items`` must be non-empty."""

    def _swap(self, items: list[Any], child: int, par: int) -> None:
        if self.trace_swaps:
            logger.debug(
                "heap.repair.swap",
                child=items[child],
                child_index=child,
                parent=items[par],
                parent_index=par,
            )
        items[child], items[par] = items[par], items[child]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(trace_swaps={self.trace_swaps!r})"


class BubbleRepairer(HeapRepairer):
    """Whole-array, multi-pass bubble-up repair."""

    strategy = RepairStrategy.BUBBLE

    def __init__(
        self,
        passes: int = 2,
        *,
        converge: bool = True,
        trace_swaps: bool = False,
    ) -> None:
        if passes < 1:
            raise InvalidConfigurationError(
                f"passes must be at least 1, got {passes}",
                operation="BubbleRepairer",
            )
        super().__init__(trace_swaps=trace_swaps)
        self.passes = passes
        self.converge = converge

    def heapify(self, items: list[T], less: LessThan[T]) -> RepairReport:
        report = RepairReport(strategy=self.strategy, size=len(items))
        for _ in range(self.passes):
            self._run_pass(items, less, report)

        if self.converge and not is_heap(items, less):
            while not is_heap(items, less):
                self._run_pass(items, less, report)
            logger.warning(
                "heap.repair.extra_passes",
                configured_passes=self.passes,
                total_passes=report.passes,
                size=len(items),
            )
        return report

    def push(self, items: list[T], item: T, less: LessThan[T]) -> RepairReport:
        items.append(item)
        return self.heapify(items, less)

    def pop_root(
        self, items: list[T], less: LessThan[T]
    ) -> tuple[T, RepairReport]:
        root = items.pop(ROOT)
        return root, self.heapify(items, less)

    def _run_pass(
        self, items: list[T], less: LessThan[T], report: RepairReport
    ) -> None:
        report.passes += 1
        if self.trace_swaps:
            logger.debug(
                "heap.repair.pass", pass_number=report.passes, size=len(items)
            )
        for index in range(len(items) - 1, ROOT, -1):
            report.swaps += self._fix(items, index, less)

    def _fix(self, items: list[T], index: int, less: LessThan[T]) -> int:
        """
        Bubble ``items[index]`` toward the root.

        Walks the whole path up to the root's children, comparing each node
        with its parent whether or not the previous level swapped.
        """
        swaps = 0
        while True:
            par = parent(index)
            if less(items[index], items[par]):
                self._swap(items, index, par)
                swaps += 1
            if par == ROOT:
                return swaps
            index = par

    def __repr__(self) -> str:
        return (
            f"BubbleRepairer(passes={self.passes!r}, converge={self.converge!r}, "
            f"trace_swaps={self.trace_swaps!r})"
        )


class SiftRepairer(HeapRepairer):
    """Classical sift-down / sift-up heap maintenance."""

    strategy = RepairStrategy.SIFT

    def heapify(self, items: list[T], less: LessThan[T]) -> RepairReport:
        report = RepairReport(strategy=self.strategy, size=len(items), passes=1)
        for index in range(len(items) // 2 - 1, ROOT - 1, -1):
            report.swaps += self._sift_down(items, index, less)
        return report

    def push(self, items: list[T], item: T, less: LessThan[T]) -> RepairReport:
        items.append(item)
        report = RepairReport(strategy=self.strategy, size=len(items), passes=1)
        report.swaps = self._sift_up(items, len(items) - 1, less)
        return report

    def pop_root(
        self, items: list[T], less: LessThan[T]
    ) -> tuple[T, RepairReport]:
        last = items.pop()
        report = RepairReport(strategy=self.strategy, size=len(items), passes=1)
        if not items:
            return last, report
        root = items[ROOT]
        items[ROOT] = last
        report.swaps = self._sift_down(items, ROOT, less)
        return root, report

    def _sift_down(self, items: list[T], pos: int, less: LessThan[T]) -> int:
        swaps = 0
        n = len(items)
        while True:
            lc = left_child(pos)
            rc = right_child(pos)
            # No children
            if lc >= n:
                return swaps
            # Select child to use for sifting
            child = lc if rc >= n or not less(items[rc], items[lc]) else rc
            if not less(items[child], items[pos]):
                return swaps
            self._swap(items, child, pos)
            swaps += 1
            pos = child

    def _sift_up(self, items: list[T], pos: int, less: LessThan[T]) -> int:
        swaps = 0
        while pos > ROOT:
            par = parent(pos)
            if not less(items[pos], items[par]):
                break
            self._swap(items, pos, par)
            swaps += 1
            pos = par
        return swaps


def build_repairer(settings: Settings | None = None) -> HeapRepairer:
    """Create the repairer described by ``settings`` (defaults to ``get_settings()``)."""
    settings = settings or get_settings()

    if settings.repair_strategy == RepairStrategy.BUBBLE:
        return BubbleRepairer(
            settings.repair_passes,
            converge=settings.repair_converge,
            trace_swaps=settings.trace_swaps,
        )
    if settings.repair_strategy == RepairStrategy.SIFT:
        return SiftRepairer(trace_swaps=settings.trace_swaps)

    raise InvalidConfigurationError(
        f"Unknown repair strategy: {settings.repair_strategy!r}",
        operation="build_repairer",
    )
