"""Scanner orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ScanCache",
    "SearchFilters",
    "get_all_cached_summaries",
    "get_cached_summary",
    "save_cached_summary",
    "scan",
    "search_files",
]

_ORCHESTRATOR_EXPORTS: frozenset[str] = frozenset(
    {"scan", "get_cached_summary", "get_all_cached_summaries", "save_cached_summary"}
)


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in _ORCHESTRATOR_EXPORTS:
        from . import orchestrator

        return getattr(orchestrator, name)
    if name == "ScanCache":
        from .cache import ScanCache

        return ScanCache
    if name in {"SearchFilters", "search_files"}:
        from . import search

        return getattr(search, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
