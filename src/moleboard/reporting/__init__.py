"""Reporting package for MoleBoard outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["StdoutReporter", "format_bytes"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name == "format_bytes":
        from .formatting import format_bytes

        return format_bytes
    if name == "StdoutReporter":
        from .stdout import StdoutReporter

        return StdoutReporter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
