"""
PRIOHEAP — Heap Diagnostics
============================
Tree-shaped text dump of a heap, for inspection only.

Example for ``MinHeap.from_collection([1, 2, 3, 4])``::

    | :1
    | | :2
    | | \\ :4
    | | :3
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from prioheap.heap.container import MinHeap
from prioheap.heap.geometry import ROOT, left_child, right_child

_BRANCH = "| "
_LAST = "\\ "


def format_tree(heap: MinHeap[Any], start_index: int = ROOT) -> str:
    """Render the subtree rooted at ``start_index``; empty string if there is none."""
    lines: list[str] = []
    if 0 <= start_index < len(heap):
        _render(heap, start_index, "", lines)
    return "\n".join(lines)


def pretty_print(
    heap: MinHeap[Any],
    start_index: int = ROOT,
    file: TextIO | None = None,
) -> None:
    """Write a blank line followed by ``format_tree(heap, start_index)``."""
    out = file or sys.stdout
    print(file=out)
    tree = format_tree(heap, start_index)
    if tree:
        print(tree, file=out)


def _render(heap: MinHeap[Any], index: int, indent: str, lines: list[str]) -> None:
    size = len(heap)
    if index == size - 1:
        marker, child_indent = _LAST, indent + "  "
    else:
        marker, child_indent = _BRANCH, indent + _BRANCH

    lines.append(f"{indent}{marker}:{heap[index]}")

    for child in (left_child(index), right_child(index)):
        if child < size:
            _render(heap, child, child_indent, lines)
