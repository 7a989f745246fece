"""
PRIOHEAP — Priority Dispatch
=============================
Task records and the dispatcher that hands them out most-urgent first.

Public API:
    Task - immutable task record
    highest_priority_first - inverted priority comparator
    PriorityDispatcher - add_task / handle_highest_priority_task
"""

from prioheap.orchestrator.task import Task, highest_priority_first
from prioheap.orchestrator.dispatcher import PriorityDispatcher

__all__ = [
    "Task",
    "highest_priority_first",
    "PriorityDispatcher",
]
