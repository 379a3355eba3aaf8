"""Configuration-related exceptions."""

from __future__ import annotations

from moleboard.exceptions.base import MoleboardError


class ConfigError(MoleboardError, ValueError):
    """Raised when scanner configuration is invalid."""
