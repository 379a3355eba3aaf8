"""Configuration loading, validation, and fingerprinting for MoleBoard scans."""

from __future__ import annotations

from moleboard.config.fingerprint import config_fingerprint
from moleboard.config.loader import load_config
from moleboard.config.model import MoleboardConfig
from moleboard.config.validator import validate_config_file

__all__ = [
    "MoleboardConfig",
    "config_fingerprint",
    "load_config",
    "validate_config_file",
]
