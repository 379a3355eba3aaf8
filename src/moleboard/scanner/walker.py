"""Depth-bounded filesystem walker.

The walk pops ``(path, depth)`` pairs from an explicit stack; the
cancellation check runs once per popped directory.
"""

from __future__ import annotations

import logging
import os
import stat as statmod
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from moleboard.constants.discovery import DEFAULT_EXCLUDED_DIRS, DEFAULT_MAX_DEPTH
from moleboard.exceptions import PathNotFoundError, ScanCancelledError
from moleboard.model import DirectoryNode, FileRecord, RepoInfo
from moleboard.scanner.classify import classify
from moleboard.scanner.repos import detect_repo
from moleboard.types import CancelCheck
from moleboard.types.scanner import WalkResult

logger = logging.getLogger(__name__)


class RepoResolver:
    """Memoized nearest-repo lookup bounded by the scan root.

    Each directory is probed with ``detect_repo`` at most once per walk.
    """

    def __init__(self, root: str) -> None:
        self._root = root
        self._nearest: dict[str, RepoInfo | None] = {}
        self._found: dict[str, RepoInfo] = {}

    @property
    def repo_roots(self) -> tuple[RepoInfo, ...]:
        """Unique repo roots seen so far, ordered by path."""
        return tuple(self._found[path] for path in sorted(self._found))

    def resolve(self, directory: str) -> RepoInfo | None:
        """Return the nearest repo root at or above *directory*, stopping at the scan root."""
        visited: list[str] = []
        current = directory
        result: RepoInfo | None = None

        while True:
            if current in self._nearest:
                result = self._nearest[current]
                break
            visited.append(current)
            repo = detect_repo(Path(current))
            if repo is not None:
                self._found.setdefault(repo.path, repo)
                result = repo
                break
            if current == self._root:
                break
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        for path in visited:
            self._nearest[path] = result
        return result


def walk(
    root: Path,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
    skip_hidden_dirs: bool = True,
    cancel: CancelCheck | None = None,
) -> WalkResult:
    """Enumerate files and directories under *root*.

    Every directory encountered is registered as a ``DirectoryNode``,
    including the root itself and directories that are not descended into
    (hidden, excluded, or beyond *max_depth*). Symbolic links are never
    followed; a link is recorded as a file entry using its own ``lstat``.
    Pipes, sockets, and device nodes are ignored.

    Unreadable directories and entries that cannot be stat'ed are logged and
    listed in ``WalkResult.skipped``. Raises ``PathNotFoundError`` when the
    root itself is missing or unreadable and ``ScanCancelledError`` when
    *cancel* returns true at a directory boundary.
    """
    root_str = os.path.abspath(root)
    if not os.path.isdir(root_str):
        raise PathNotFoundError(f"Scan root does not exist or is not a directory: {root_str}")

    excluded = frozenset(excluded_dirs)
    resolver = RepoResolver(root_str)
    directories: dict[str, DirectoryNode] = {root_str: DirectoryNode(path=root_str)}
    files: list[FileRecord] = []
    skipped: list[str] = []
    stack: list[tuple[str, int]] = [(root_str, 0)]

    while stack:
        if cancel is not None and cancel():
            raise ScanCancelledError(f"Scan of {root_str} was cancelled")

        dir_path, depth = stack.pop()
        try:
            with os.scandir(dir_path) as iterator:
                entries = list(iterator)
        except OSError as exc:
            if dir_path == root_str:
                raise PathNotFoundError(f"Scan root is not readable: {root_str} ({exc})") from exc
            logger.warning("Skipping unreadable directory %s: %s", dir_path, exc)
            skipped.append(dir_path)
            continue

        node = directories[dir_path]
        for entry in entries:
            try:
                entry_stat = entry.stat(follow_symlinks=False)
            except OSError as exc:
                logger.debug("Skipping entry %s: %s", entry.path, exc)
                skipped.append(entry.path)
                continue

            if statmod.S_ISDIR(entry_stat.st_mode):
                directories[entry.path] = DirectoryNode(path=entry.path)
                node.subdirectory_count += 1
                if depth + 1 <= max_depth and _should_descend(entry.name, excluded, skip_hidden_dirs):
                    stack.append((entry.path, depth + 1))
                continue

            if not (statmod.S_ISREG(entry_stat.st_mode) or statmod.S_ISLNK(entry_stat.st_mode)):
                logger.debug("Ignoring special file %s", entry.path)
                continue

            node.direct_file_count += 1
            files.append(_build_record(entry.path, entry.name, entry_stat, resolver.resolve(dir_path)))

    logger.debug(
        "Walked %s: %d files, %d directories, %d skipped",
        root_str,
        len(files),
        len(directories),
        len(skipped),
    )
    return WalkResult(
        root=root_str,
        files=tuple(files),
        directories=directories,
        repo_roots=resolver.repo_roots,
        skipped=tuple(skipped),
    )


def _should_descend(name: str, excluded: frozenset[str], skip_hidden_dirs: bool) -> bool:
    if name in excluded:
        return False
    return not (skip_hidden_dirs and name.startswith("."))


def _build_record(path: str, name: str, entry_stat: os.stat_result, repo: RepoInfo | None) -> FileRecord:
    extension = os.path.splitext(name)[1]
    return FileRecord(
        path=path,
        name=name,
        size=int(entry_stat.st_size),
        extension=extension,
        modified_at=datetime.fromtimestamp(entry_stat.st_mtime, tz=UTC),
        media_type=classify(extension),
        is_in_repo=repo is not None,
        repo_name=repo.name if repo is not None else None,
    )
