"""Typed cache payload structures.

Keys are camelCase so the persisted file stays readable by the dashboard.
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

from moleboard.types.common import FolderType, MediaType, RepoKind


class FileInfoPayload(TypedDict):
    """Serialized ``FileRecord``."""

    path: str
    name: str
    size: int
    ext: str
    modifiedAt: str
    mediaType: MediaType
    isRepo: bool
    repoName: NotRequired[str]


class FolderInfoPayload(TypedDict):
    """Serialized ``FolderInfo``."""

    path: str
    name: str
    size: int
    fileCount: int
    folderCount: int
    containsRepo: bool
    repoName: NotRequired[str]
    mainType: NotRequired[FolderType]


class RepoInfoPayload(TypedDict):
    """Serialized ``RepoInfo``."""

    path: str
    name: str
    type: RepoKind
    rootSize: int


class MediaStatPayload(TypedDict):
    """Serialized heatmap cell."""

    count: int
    size: int


class SummaryPayload(TypedDict):
    """Serialized ``ScanSummary``, one per cached scan root."""

    totalSize: int
    fileCount: int
    folderCount: int
    largestFiles: list[FileInfoPayload]
    largestFolders: list[FolderInfoPayload]
    mediaHeatmap: dict[str, MediaStatPayload]
    repoRoots: list[RepoInfoPayload]
    scanTime: str
    configFingerprint: NotRequired[str]


type CachePayload = dict[str, SummaryPayload]
