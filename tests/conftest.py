"""Shared pytest fixtures for synthetic directory trees."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from pathlib import Path

import pytest

from moleboard.model import FileRecord, FolderInfo, MediaStat, RepoInfo, ScanSummary, empty_heatmap
from moleboard.scanner.cache import ScanCache

type TreeBuilder = Callable[[Mapping[str, int]], Path]


def write_sized_file(path: Path, size: int) -> None:
    """Create *path* with exactly *size* bytes; large sizes stay sparse on disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as handle:
        handle.truncate(size)


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a builder that materializes ``{relative_path: size}`` under a fresh root.

    Keys ending in ``/`` create empty directories.
    """

    def _build(entries: Mapping[str, int]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for relative, size in entries.items():
            if relative.endswith("/"):
                (root / relative).mkdir(parents=True, exist_ok=True)
            else:
                write_sized_file(root / relative, size)
        return root.resolve()

    return _build


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    """Return a cache file location outside any scanned tree."""
    return tmp_path / "state" / "cache.json"


@pytest.fixture
def scan_cache(cache_file: Path) -> ScanCache:
    """Return a cache backed by an empty temp location."""
    return ScanCache(cache_file)


def make_summary(*, total_size: int = 1536, fingerprint: str | None = None) -> ScanSummary:
    """Build a small, fully populated summary for serialization tests."""
    heatmap = empty_heatmap()
    heatmap["video"] = MediaStat(count=1, size=1024)
    heatmap["image"] = MediaStat(count=1, size=total_size - 1024)
    return ScanSummary(
        total_size=total_size,
        file_count=2,
        folder_count=3,
        largest_files=(
            FileRecord(
                path="/data/a/clip.mp4",
                name="clip.mp4",
                size=1024,
                extension=".mp4",
                modified_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
                media_type="video",
                is_in_repo=True,
                repo_name="a",
            ),
            FileRecord(
                path="/data/b/pic.png",
                name="pic.png",
                size=total_size - 1024,
                extension=".png",
                modified_at=datetime(2024, 5, 2, 8, 30, tzinfo=UTC),
                media_type="image",
            ),
        ),
        largest_folders=(
            FolderInfo(
                path="/data",
                name="data",
                size=total_size,
                file_count=2,
                folder_count=2,
                contains_repo=True,
                main_type="mixed",
            ),
            FolderInfo(
                path="/data/a",
                name="a",
                size=1024,
                file_count=1,
                folder_count=1,
                contains_repo=True,
                repo_name="a",
                main_type="video",
            ),
        ),
        media_heatmap=heatmap,
        repo_roots=(RepoInfo(path="/data/a", name="a", kind="git", root_size=1024),),
        scan_time="2024-05-03T09:00:00+00:00",
        config_fingerprint=fingerprint,
    )


@pytest.fixture
def sample_summary() -> ScanSummary:
    """Return a representative summary."""
    return make_summary()


@pytest.fixture
def summary_factory() -> Callable[..., ScanSummary]:
    """Return the summary builder for tests that need variants."""
    return make_summary
