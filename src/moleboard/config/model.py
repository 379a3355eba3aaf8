"""Config data model for MoleBoard scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from moleboard.constants.cache import CACHE_DIRNAME, CACHE_FILENAME
from moleboard.constants.config import (
    DEFAULT_EXCLUDED_DIRS_CONFIG,
    DEFAULT_MAX_DEPTH_CONFIG,
    DEFAULT_SKIP_HIDDEN_DIRS,
    DEFAULT_TOP_N,
)


@dataclass(frozen=True)
class MoleboardConfig:
    """Resolved scanner config."""

    max_depth: int = DEFAULT_MAX_DEPTH_CONFIG
    top_n: int = DEFAULT_TOP_N
    excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS_CONFIG
    skip_hidden_dirs: bool = DEFAULT_SKIP_HIDDEN_DIRS
    cache_path: Path | None = None

    @property
    def effective_cache_path(self) -> Path:
        """Cache file location, defaulting to ``.moleboard/cache.json`` in the working directory."""
        if self.cache_path is not None:
            return self.cache_path
        return Path.cwd() / CACHE_DIRNAME / CACHE_FILENAME
