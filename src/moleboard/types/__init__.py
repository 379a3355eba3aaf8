"""Shared type aliases for MoleBoard."""

from .cache import (
    CachePayload,
    FileInfoPayload,
    FolderInfoPayload,
    MediaStatPayload,
    RepoInfoPayload,
    SummaryPayload,
)
from .common import (
    CancelCheck,
    FolderType,
    MediaType,
    ProgressCallback,
    RepoKind,
)

__all__ = [
    "CachePayload",
    "CancelCheck",
    "FileInfoPayload",
    "FolderInfoPayload",
    "FolderType",
    "MediaStatPayload",
    "MediaType",
    "ProgressCallback",
    "RepoInfoPayload",
    "RepoKind",
    "SummaryPayload",
]
