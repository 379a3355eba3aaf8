"""Constants for filesystem traversal and repo detection."""

from __future__ import annotations

DEFAULT_MAX_DEPTH: int = 10

# Directory names that are registered but never descended into.
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
    ".tox",
    ".cache",
    ".next",
)

GIT_METADATA_DIRNAME: str = ".git"
PACKAGE_MANIFEST_FILENAME: str = "package.json"

REPO_KIND_GIT: str = "git"
REPO_KIND_NPM: str = "npm"
REPO_KIND_OTHER: str = "other"
