"""Configuration defaults and filenames."""

from __future__ import annotations

from moleboard.constants.discovery import DEFAULT_EXCLUDED_DIRS, DEFAULT_MAX_DEPTH

CONFIG_FILENAME: str = "moleboard.yaml"

DEFAULT_TOP_N: int = 25
DEFAULT_SKIP_HIDDEN_DIRS: bool = True
DEFAULT_EXCLUDED_DIRS_CONFIG: tuple[str, ...] = tuple(sorted(DEFAULT_EXCLUDED_DIRS))
DEFAULT_MAX_DEPTH_CONFIG: int = DEFAULT_MAX_DEPTH
