"""
PRIOHEAP — Centralized Exception Taxonomy
==========================================
Category-based exception hierarchy with a severity property.

Design decisions:
- Category-based exceptions (HeapError, DispatcherError, ConfigurationError)
- Severity property on each exception for error classification
- Technical details only: error code plus the operation and container size

Usage:
    from prioheap.core.exceptions import EmptyContainerError

    raise EmptyContainerError(
        "Cannot extract from an empty heap",
        operation="extract_minimum",
        size=0,
    )
"""

from __future__ import annotations

from enum import StrEnum


class ErrorSeverity(StrEnum):
    """
    Error severity levels for exception classification.

    LOW < MEDIUM < HIGH < CRITICAL
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PrioheapError(Exception):
    """
    Base exception for all prioheap-specific errors.

    All prioheap exceptions inherit from this base class, providing:
    - severity: Classification for error handling/routing
    - error_code: Unique identifier for programmatic handling
    - operation / size: which call failed and how large the container was
    """

    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    error_code: str = "PRIOHEAP_ERROR"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        size: int | None = None,
    ) -> None:
        self.operation = operation
        self.size = size
        super().__init__(message)

    def __repr__(self) -> str:
        parts = [
            f"{self.__class__.__name__}(",
            f"error_code={self.error_code!r}, ",
            f"severity={self.severity.value!r}",
        ]
        if self.operation:
            parts.append(f", operation={self.operation!r}")
        if self.size is not None:
            parts.append(f", size={self.size!r}")
        parts.append(")")
        return "".join(parts)


# ── Heap Exceptions ─────────────────────────────────────────────────────


class HeapError(PrioheapError):
    """Errors raised by the heap container."""

    error_code = "HEAP_ERROR"


class EmptyContainerError(HeapError, IndexError):
    """Raised when peeking at or extracting from an empty container."""

    severity = ErrorSeverity.LOW
    error_code = "EMPTY_CONTAINER_ERROR"


class InvalidIndexError(HeapError, ValueError):
    """Raised when a heap index is outside the addressable range."""

    severity = ErrorSeverity.LOW
    error_code = "INVALID_INDEX_ERROR"


# ── Dispatcher Exceptions ───────────────────────────────────────────────


class DispatcherError(PrioheapError):
    """Errors in the priority dispatch layer."""

    error_code = "DISPATCHER_ERROR"


class TaskValidationError(DispatcherError, ValueError):
    """Raised when a task record is malformed."""

    error_code = "TASK_VALIDATION_ERROR"


# ── Configuration Exceptions ────────────────────────────────────────────


class ConfigurationError(PrioheapError):
    """Errors in configuration (invalid values)."""

    severity = ErrorSeverity.HIGH
    error_code = "CONFIGURATION_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    error_code = "INVALID_CONFIGURATION_ERROR"
