"""
PRIOHEAP — Task Record
=======================
Immutable unit of work handled by the priority dispatcher.

``Task`` deliberately defines no ordering of its own.  Dispatch order comes
from the ``highest_priority_first`` comparator, which inverts the natural
order of ``priority`` so the most urgent task sits at the min-heap root.
"""

from __future__ import annotations

from dataclasses import dataclass

from prioheap.core.exceptions import TaskValidationError
from prioheap.heap.ordering import Comparator, by_key, reverse_order


@dataclass(frozen=True, slots=True)
class Task:
    """
    A named unit of work.

    Higher ``priority`` values are more urgent.
    """

    priority: int
    name: str

    def __post_init__(self) -> None:
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise TaskValidationError(
                f"Task priority must be an int, got {type(self.priority).__name__}",
                operation="Task",
            )
        if not isinstance(self.name, str) or not self.name.strip():
            raise TaskValidationError(
                "Task name must be a non-empty string",
                operation="Task",
            )

    def __str__(self) -> str:
        return f"{self.name} (priority {self.priority})"


def _task_priority(task: Task) -> int:
    return task.priority


highest_priority_first: Comparator[Task] = reverse_order(by_key(_task_priority))
