"""Config loading and normalization for MoleBoard scans."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from moleboard.config.model import MoleboardConfig
from moleboard.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_EXCLUDED_DIRS_CONFIG,
    DEFAULT_MAX_DEPTH_CONFIG,
    DEFAULT_SKIP_HIDDEN_DIRS,
    DEFAULT_TOP_N,
)
from moleboard.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> MoleboardConfig:
    """Load and validate scanner config from ``moleboard.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.expanduser().resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MoleboardConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    logger.debug("Loaded config from %s", path)

    max_depth = raw.get("max_depth", DEFAULT_MAX_DEPTH_CONFIG)
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ConfigError("max_depth must be a non-negative integer")

    top_n = raw.get("top_n", DEFAULT_TOP_N)
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
        raise ConfigError("top_n must be a positive integer")

    skip_hidden_dirs = raw.get("skip_hidden_dirs", DEFAULT_SKIP_HIDDEN_DIRS)
    if not isinstance(skip_hidden_dirs, bool):
        raise ConfigError("skip_hidden_dirs must be a boolean")

    cache_path_raw = raw.get("cache_path")
    if cache_path_raw is not None and (not isinstance(cache_path_raw, str) or not cache_path_raw.strip()):
        raise ConfigError("cache_path must be a non-empty string")

    return MoleboardConfig(
        max_depth=max_depth,
        top_n=top_n,
        excluded_dirs=_normalize_dir_names(
            _ensure_string_list(raw.get("excluded_dirs", list(DEFAULT_EXCLUDED_DIRS_CONFIG)), "excluded_dirs")
        ),
        skip_hidden_dirs=skip_hidden_dirs,
        cache_path=(Path(cache_path_raw.strip()).expanduser() if cache_path_raw is not None else None),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _normalize_dir_names(names: list[str]) -> tuple[str, ...]:
    """Strip, deduplicate and sort directory names."""
    return tuple(sorted({name.strip() for name in names if name.strip()}))
