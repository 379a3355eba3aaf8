"""Repository root detection."""

from __future__ import annotations

import logging
from pathlib import Path

from moleboard.constants.discovery import (
    GIT_METADATA_DIRNAME,
    PACKAGE_MANIFEST_FILENAME,
    REPO_KIND_GIT,
    REPO_KIND_NPM,
)
from moleboard.model import RepoInfo

logger = logging.getLogger(__name__)


def detect_repo(directory: Path) -> RepoInfo | None:
    """Return repo info when *directory* itself is a git or package root.

    Only the given directory is inspected, never its ancestors. A ``.git``
    directory takes precedence over a ``package.json`` manifest.
    """
    name = directory.name or str(directory)

    if _is_dir(directory / GIT_METADATA_DIRNAME):
        return RepoInfo(path=str(directory), name=name, kind=REPO_KIND_GIT)

    if _is_file(directory / PACKAGE_MANIFEST_FILENAME):
        return RepoInfo(path=str(directory), name=name, kind=REPO_KIND_NPM)

    return None


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as exc:
        logger.debug("Treating %s as absent: %s", path, exc)
        return False


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as exc:
        logger.debug("Treating %s as absent: %s", path, exc)
        return False
