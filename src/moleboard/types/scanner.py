"""Frozen dataclasses for the scanner subsystem."""

from __future__ import annotations

from dataclasses import dataclass

from moleboard.model import DirectoryNode, FileRecord, RepoInfo


@dataclass(frozen=True)
class WalkResult:
    """Raw output of one filesystem walk, before aggregation."""

    root: str
    files: tuple[FileRecord, ...]
    directories: dict[str, DirectoryNode]
    repo_roots: tuple[RepoInfo, ...]
    skipped: tuple[str, ...] = ()
