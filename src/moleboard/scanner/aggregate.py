"""Bottom-up rollup, ranking, and heatmap construction for a finished walk."""

from __future__ import annotations

import heapq
import logging
import os
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from datetime import UTC, datetime
from typing import cast

from moleboard.constants.classification import DOMINANT_TYPE_THRESHOLD, MEDIA_TYPE_MIXED, MEDIA_TYPES
from moleboard.constants.config import DEFAULT_TOP_N
from moleboard.model import DirectoryNode, FileRecord, FolderInfo, MediaStat, RepoInfo, ScanSummary
from moleboard.types import FolderType, MediaType, ProgressCallback

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL: int = 100


def aggregate(
    files: Sequence[FileRecord],
    directories: Mapping[str, DirectoryNode],
    root: str,
    *,
    repo_roots: Iterable[RepoInfo] = (),
    top_n: int = DEFAULT_TOP_N,
    on_progress: ProgressCallback | None = None,
    config_fingerprint: str | None = None,
) -> ScanSummary:
    """Roll file statistics up into *directories* and build the scan summary.

    Each file contributes its size, one file count, and one media-category
    count to every registered ancestor from its parent directory up to and
    including *root*. Directory nodes are mutated in place.
    """
    total_files = len(files)
    for index, record in enumerate(files, start=1):
        roll_up(record, directories, root)
        if on_progress is not None and (index % PROGRESS_INTERVAL == 0 or index == total_files):
            on_progress(index, total_files)

    for node in directories.values():
        node.dominant_media_type = dominant_media_type(node.media_counts, node.total_file_count)

    sized_repos = _mark_repo_containment(repo_roots, directories, root)

    largest_files = heapq.nsmallest(top_n, files, key=_rank_key)
    largest_nodes = heapq.nsmallest(top_n, directories.values(), key=lambda node: (-node.total_size, node.path))

    return ScanSummary(
        total_size=sum(record.size for record in files),
        file_count=total_files,
        folder_count=len(directories),
        largest_files=tuple(largest_files),
        largest_folders=tuple(folder_info(node) for node in largest_nodes),
        media_heatmap=build_heatmap(files),
        repo_roots=sized_repos,
        scan_time=datetime.now(UTC).isoformat(),
        config_fingerprint=config_fingerprint,
    )


def roll_up(record: FileRecord, directories: Mapping[str, DirectoryNode], root: str) -> None:
    """Add one file's statistics to each ancestor directory, exactly once each."""
    current = os.path.dirname(record.path)
    while True:
        node = directories.get(current)
        if node is not None:
            node.total_size += record.size
            node.total_file_count += 1
            node.media_counts[record.media_type] += 1
        if current == root:
            return
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent


def dominant_media_type(media_counts: Counter[str], total_file_count: int) -> FolderType | None:
    """Return the strict-majority category, ``"mixed"`` without one, ``None`` when empty."""
    if total_file_count <= 0 or not media_counts:
        return None
    media_type, count = media_counts.most_common(1)[0]
    if count > total_file_count * DOMINANT_TYPE_THRESHOLD:
        return cast(FolderType, media_type)
    return cast(FolderType, MEDIA_TYPE_MIXED)


def build_heatmap(files: Iterable[FileRecord]) -> dict[MediaType, MediaStat]:
    """Count files and bytes per category; every category is always present."""
    counts: Counter[str] = Counter()
    sizes: Counter[str] = Counter()
    for record in files:
        counts[record.media_type] += 1
        sizes[record.media_type] += record.size
    return {
        cast(MediaType, media_type): MediaStat(count=counts[media_type], size=sizes[media_type])
        for media_type in MEDIA_TYPES
    }


def folder_info(node: DirectoryNode) -> FolderInfo:
    """Freeze a directory node into its ranked view."""
    return FolderInfo(
        path=node.path,
        name=os.path.basename(node.path) or node.path,
        size=node.total_size,
        file_count=node.total_file_count,
        folder_count=node.subdirectory_count,
        contains_repo=node.contains_repo,
        repo_name=node.repo_name,
        main_type=node.dominant_media_type,
    )


def _rank_key(record: FileRecord) -> tuple[int, str]:
    return (-record.size, record.path)


def _mark_repo_containment(
    repo_roots: Iterable[RepoInfo],
    directories: Mapping[str, DirectoryNode],
    root: str,
) -> tuple[RepoInfo, ...]:
    """Flag every directory at or above a repo root and attach repo sizes."""
    unique = {repo.path: repo for repo in repo_roots}
    sized: list[RepoInfo] = []
    for path in sorted(unique):
        repo = unique[path]
        repo_node = directories.get(path)
        if repo_node is not None:
            repo_node.repo_name = repo.name
            repo = replace(repo, root_size=repo_node.total_size)
        else:
            logger.debug("Repo root %s has no directory node", path)
        sized.append(repo)

        current = path
        while True:
            node = directories.get(current)
            if node is not None:
                node.contains_repo = True
            if current == root:
                break
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
    return tuple(sized)
