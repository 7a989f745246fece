"""
PRIOHEAP — Priority Dispatcher
===============================
Hands out queued tasks most-urgent first.

A thin policy layer over ``MinHeap``: tasks are stored in a heap ordered by
``highest_priority_first``, so extracting the heap minimum yields the task
with the numerically highest priority.  Equal priorities come out in
whatever order the repair leaves them; there is no tie-break rule.

Usage:
    dispatcher = PriorityDispatcher()
    dispatcher.add_task(Task(priority=2, name="deploy"))
    task = dispatcher.handle_highest_priority_task()
"""

from __future__ import annotations

from collections.abc import Iterable

from prioheap.core.exceptions import TaskValidationError
from prioheap.core.logging import get_logger
from prioheap.heap.container import MinHeap
from prioheap.heap.repair import HeapRepairer
from prioheap.orchestrator.task import Task, highest_priority_first

logger = get_logger(__name__)


class PriorityDispatcher:
    """
    Priority-based task dispatcher backed by a min-heap.

    Thread safety: NOT thread-safe.
    """

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        *,
        repairer: HeapRepairer | None = None,
    ) -> None:
        initial = list(tasks) if tasks is not None else None
        if initial is not None:
            for task in initial:
                self._check_task(task)
        self._heap: MinHeap[Task] = MinHeap(
            initial,
            comparator=highest_priority_first,
            repairer=repairer,
        )

    def add_task(self, task: Task) -> None:
        """Queue ``task`` for dispatch."""
        self._check_task(task)
        self._heap.insert(task)
        logger.debug(
            "dispatcher.task_added",
            task=task.name,
            priority=task.priority,
            pending=len(self._heap),
        )

    def handle_highest_priority_task(self) -> Task:
        """
        Dequeue and return the most urgent task.

        Raises ``EmptyContainerError`` when nothing is queued.
        """
        task = self._heap.extract_minimum()
        logger.info(
            "dispatcher.task_handled",
            task=task.name,
            priority=task.priority,
            pending=len(self._heap),
        )
        return task

    def peek_highest_priority_task(self) -> Task:
        """Return the most urgent task without removing it."""
        return self._heap.peek_minimum()

    def pending_count(self) -> int:
        """Return the number of tasks currently queued."""
        return len(self._heap)

    @property
    def is_empty(self) -> bool:
        return self._heap.is_empty

    def clear(self) -> None:
        """Remove all tasks from the queue."""
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    @staticmethod
    def _check_task(task: object) -> None:
        if not isinstance(task, Task):
            raise TaskValidationError(
                f"Expected a Task, got {type(task).__name__}",
                operation="add_task",
            )
