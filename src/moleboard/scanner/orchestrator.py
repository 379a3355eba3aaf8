"""End-to-end scan orchestration for MoleBoard.

``scan`` is the primary entry point; the ``*_cached_summary`` helpers give
callers direct access to the cache without scanning.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import replace
from pathlib import Path

from moleboard.config import config_fingerprint, load_config
from moleboard.exceptions import ConfigError, PathNotFoundError, ScanCancelledError
from moleboard.model import ScanSummary
from moleboard.scanner.aggregate import aggregate
from moleboard.scanner.cache import ScanCache
from moleboard.scanner.walker import walk
from moleboard.types import CancelCheck, ProgressCallback

logger = logging.getLogger(__name__)


def expand_root(root_key: str) -> Path:
    """Expand a leading ``~`` and resolve *root_key* to an absolute path."""
    return Path(os.path.expanduser(root_key)).resolve()


def scan(
    root: str | Path,
    *,
    cache: ScanCache | None = None,
    force: bool = False,
    max_depth: int | None = None,
    top_n: int | None = None,
    config_path: Path | None = None,
    on_progress: ProgressCallback | None = None,
    cancel: CancelCheck | None = None,
) -> ScanSummary:
    """Scan *root* and return its summary, serving from *cache* when possible.

    *root* is used verbatim (including any ``~``) as the cache key. With
    ``force=False`` a cached summary whose config fingerprint matches the
    effective settings is returned without touching the filesystem tree.
    Entries written without a fingerprint are served as-is.

    Without a *cache* nothing is read or written. A cancelled scan raises
    ``ScanCancelledError`` and never writes to the cache.
    """
    root_key = str(root)
    resolved_root = expand_root(root_key)
    if not resolved_root.is_dir():
        raise PathNotFoundError(f"Scan root does not exist or is not a directory: {resolved_root}")

    config = load_config(resolved_root, config_path)
    if max_depth is not None:
        if max_depth < 0:
            raise ConfigError(f"max_depth must be a non-negative integer, got {max_depth}")
        config = replace(config, max_depth=max_depth)
    if top_n is not None:
        if top_n <= 0:
            raise ConfigError(f"top_n must be a positive integer, got {top_n}")
        config = replace(config, top_n=top_n)
    fingerprint = config_fingerprint(config)

    if cache is not None and not force:
        cached = cache.load(root_key)
        if cached is not None and cached.config_fingerprint in (None, fingerprint):
            logger.info("Using cached summary for %s from %s", root_key, cached.scan_time)
            return cached
        if cached is not None:
            logger.info("Cached summary for %s is stale; rescanning", root_key)

    started_at = time.perf_counter()
    logger.info("Scanning %s (max depth %d)", resolved_root, config.max_depth)

    walk_result = walk(
        resolved_root,
        config.max_depth,
        excluded_dirs=config.excluded_dirs,
        skip_hidden_dirs=config.skip_hidden_dirs,
        cancel=cancel,
    )
    if walk_result.skipped:
        logger.warning("Skipped %d unreadable entries under %s", len(walk_result.skipped), resolved_root)

    if cancel is not None and cancel():
        raise ScanCancelledError(f"Scan of {resolved_root} was cancelled")

    summary = aggregate(
        walk_result.files,
        walk_result.directories,
        walk_result.root,
        repo_roots=walk_result.repo_roots,
        top_n=config.top_n,
        on_progress=on_progress,
        config_fingerprint=fingerprint,
    )

    if cache is not None:
        cache.save(root_key, summary)

    logger.info(
        "Scanned %d files in %d folders in %.3fs",
        summary.file_count,
        summary.folder_count,
        time.perf_counter() - started_at,
    )
    return summary


def get_cached_summary(root_key: str, *, cache: ScanCache) -> ScanSummary | None:
    """Return the cached summary for *root_key* without scanning."""
    return cache.load(root_key)


def get_all_cached_summaries(*, cache: ScanCache) -> dict[str, ScanSummary]:
    """Return every cached summary keyed by scan-root string."""
    return cache.load_all()


def save_cached_summary(root_key: str, summary: ScanSummary, *, cache: ScanCache) -> None:
    """Store *summary* under *root_key*."""
    cache.save(root_key, summary)
