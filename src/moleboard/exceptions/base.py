"""Base exception for MoleBoard."""

from __future__ import annotations


class MoleboardError(Exception):
    """Base class for all errors raised by MoleBoard."""
