"""
PRIOHEAP — Test Fixtures
=========================
Shared pytest fixtures: settings isolation, logging reset and repairers.
"""

from __future__ import annotations

import logging

import pytest
import structlog

from prioheap.heap.repair import (
    BubbleRepairer,
    HeapRepairer,
    RepairReport,
    SiftRepairer,
)


# ── Settings & logging isolation ─────────────────────────────────────────
@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Ensure a fresh Settings instance for each test."""
    from prioheap.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any configure_logging() call made by a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def settings(monkeypatch):
    """Return a settings instance with test defaults."""
    monkeypatch.setenv("PRIOHEAP_ENVIRONMENT", "development")
    monkeypatch.setenv("PRIOHEAP_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PRIOHEAP_LOG_FORMAT", "console")
    from prioheap.core.config import get_settings
    return get_settings()


# ── Repairers ────────────────────────────────────────────────────────────
@pytest.fixture(params=["bubble", "sift"])
def repairer(request) -> HeapRepairer:
    """Every repair strategy; tests using this run once per strategy."""
    if request.param == "bubble":
        return BubbleRepairer()
    return SiftRepairer()


@pytest.fixture
def strict_repairer() -> BubbleRepairer:
    """Exactly two bubble passes, no convergence passes."""
    return BubbleRepairer(2, converge=False)


class NoRepair(HeapRepairer):
    """Leaves storage untouched, for building deliberately broken layouts."""

    strategy = BubbleRepairer.strategy

    def heapify(self, items, less):
        return RepairReport(strategy=self.strategy, size=len(items))

    def push(self, items, item, less):
        items.append(item)
        return self.heapify(items, less)

    def pop_root(self, items, less):
        return items.pop(0), self.heapify(items, less)


@pytest.fixture
def no_repair() -> NoRepair:
    return NoRepair()


# ── Sample data ──────────────────────────────────────────────────────────
@pytest.fixture
def sample_values() -> list[int]:
    """One hundred unsorted integers with duplicates."""
    return [
        20, 98, 97, 7, 60, 73, 40, 12, 84, 13, 85, 67, 84, 68, 30, 74, 20, 42, 64, 5,
        7, 79, 12, 21, 24, 9, 23, 76, 63, 64, 54, 76, 31, 13, 43, 63, 88, 94, 10, 66,
        91, 16, 17, 96, 3, 31, 49, 12, 69, 64, 100, 7, 85, 89, 10, 89, 97, 62, 42, 30,
        58, 52, 62, 57, 59, 79, 83, 56, 63, 91, 22, 68, 45, 8, 58, 73, 92, 48, 11, 8,
        80, 33, 38, 41, 51, 45, 5, 13, 27, 39, 24, 82, 67, 2, 63, 15, 35, 84, 25, 74,
    ]


@pytest.fixture
def non_convergent_values() -> list[int]:
    """
    Input that two bubble passes leave broken.

    After two passes index 65 holds 40 under a parent holding 51 (index 32);
    a third pass repairs it.
    """
    return [
        91, 40, 10, 93, 87, 64, 12, 23, 53, 18, 97, 34, 62, 34, 75, 22, 69, 32, 71, 11,
        22, 56, 27, 79, 5, 72, 0, 9, 14, 70, 76, 58, 11, 86, 51, 98, 3, 15, 74, 8,
        33, 23, 43, 48, 9, 18, 70, 78, 3, 93, 90, 25, 50, 69, 4, 55, 41, 4, 17, 56,
        74, 93, 14, 37, 31, 17,
    ]
