"""Scan-lifecycle exceptions."""

from __future__ import annotations

from moleboard.exceptions.base import MoleboardError


class PathNotFoundError(MoleboardError, FileNotFoundError):
    """Raised when the scan root does not exist or is not a directory."""


class ScanCancelledError(MoleboardError):
    """Raised when the caller abandons a scan in progress."""
