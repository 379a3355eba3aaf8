"""Shared exception hierarchy for MoleBoard."""

from __future__ import annotations

from .base import MoleboardError
from .config import ConfigError
from .scanning import PathNotFoundError, ScanCancelledError

__all__ = [
    "ConfigError",
    "MoleboardError",
    "PathNotFoundError",
    "ScanCancelledError",
]
