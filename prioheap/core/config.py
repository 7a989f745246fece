"""
PRIOHEAP — Configuration Management
====================================
Centralized, validated configuration with environment-based overrides.
All settings are loaded from environment variables with sensible defaults.

Usage:
    from prioheap.core.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class RepairStrategy(StrEnum):
    """Algorithm used to restore the min-heap invariant."""
    BUBBLE = "bubble"   # whole-array bubble-up passes (default)
    SIFT = "sift"       # classical sift-down heapify, O(log n) insert/extract


class Settings(BaseSettings):
    """
    Root configuration object.

    All values can be overridden via environment variables prefixed with ``PRIOHEAP_``.
    Example: ``PRIOHEAP_REPAIR_PASSES=3``
    """

    model_config = SettingsConfigDict(
        env_prefix="PRIOHEAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── General ──────────────────────────────────────────────────────────
    app_name: str = "prioheap"
    environment: Environment = Environment.DEVELOPMENT

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = Field(
        default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_format: str = Field(default="json", pattern=r"^(json|console)$")

    # ── Heap Repair ──────────────────────────────────────────────────────
    repair_strategy: RepairStrategy = RepairStrategy.BUBBLE
    repair_passes: int = Field(
        default=2,
        ge=1,
        le=16,
        description="Whole-array bubble passes per repair.",
    )
    repair_converge: bool = Field(
        default=True,
        description="Run extra passes until the heap invariant holds.",
    )
    trace_swaps: bool = Field(
        default=False,
        description="Emit a debug event for every swap made during repair.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the singleton Settings instance.

    Cached so environment is read exactly once per process lifetime.
    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
