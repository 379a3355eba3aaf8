"""Core data models for scan records and summaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, cast

from moleboard.constants.classification import MEDIA_TYPE_MIXED, MEDIA_TYPES
from moleboard.constants.discovery import REPO_KIND_GIT, REPO_KIND_NPM, REPO_KIND_OTHER
from moleboard.types import (
    FileInfoPayload,
    FolderInfoPayload,
    FolderType,
    MediaStatPayload,
    MediaType,
    RepoInfoPayload,
    RepoKind,
    SummaryPayload,
)

_REPO_KINDS: frozenset[str] = frozenset({REPO_KIND_GIT, REPO_KIND_NPM, REPO_KIND_OTHER})
_FOLDER_TYPES: frozenset[str] = frozenset({*MEDIA_TYPES, MEDIA_TYPE_MIXED})


@dataclass(frozen=True)
class FileRecord:
    """One discovered file."""

    path: str
    name: str
    size: int
    extension: str
    modified_at: datetime
    media_type: MediaType
    is_in_repo: bool = False
    repo_name: str | None = None

    def to_dict(self) -> FileInfoPayload:
        """Serialize using the dashboard's field names."""
        payload: FileInfoPayload = {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "ext": self.extension,
            "modifiedAt": self.modified_at.isoformat(),
            "mediaType": self.media_type,
            "isRepo": self.is_in_repo,
        }
        if self.repo_name is not None:
            payload["repoName"] = self.repo_name
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> FileRecord:
        """Rebuild a record from ``to_dict`` output. Raises ``ValueError`` on bad input."""
        media_type = _require_str(payload, "mediaType")
        if media_type not in MEDIA_TYPES:
            raise ValueError(f"unknown mediaType {media_type!r}")
        return cls(
            path=_require_str(payload, "path"),
            name=_require_str(payload, "name"),
            size=_require_int(payload, "size"),
            extension=_require_str(payload, "ext"),
            modified_at=_parse_timestamp(_require_str(payload, "modifiedAt")),
            media_type=cast(MediaType, media_type),
            is_in_repo=_require_bool(payload, "isRepo"),
            repo_name=_optional_str(payload, "repoName"),
        )


@dataclass(frozen=True)
class RepoInfo:
    """One detected repository root."""

    path: str
    name: str
    kind: RepoKind
    root_size: int = 0

    def to_dict(self) -> RepoInfoPayload:
        """Serialize using the dashboard's field names."""
        return {
            "path": self.path,
            "name": self.name,
            "type": self.kind,
            "rootSize": self.root_size,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> RepoInfo:
        """Rebuild a repo record from ``to_dict`` output."""
        kind = _require_str(payload, "type")
        if kind not in _REPO_KINDS:
            raise ValueError(f"unknown repo type {kind!r}")
        return cls(
            path=_require_str(payload, "path"),
            name=_require_str(payload, "name"),
            kind=cast(RepoKind, kind),
            root_size=_require_int(payload, "rootSize"),
        )


@dataclass
class DirectoryNode:
    """Mutable per-directory accumulator filled by the walker and aggregator."""

    path: str
    total_size: int = 0
    direct_file_count: int = 0
    subdirectory_count: int = 0
    total_file_count: int = 0
    media_counts: Counter[str] = field(default_factory=Counter)
    dominant_media_type: FolderType | None = None
    contains_repo: bool = False
    repo_name: str | None = None


@dataclass(frozen=True)
class FolderInfo:
    """Ranked, immutable view of a directory node."""

    path: str
    name: str
    size: int
    file_count: int
    folder_count: int
    contains_repo: bool
    repo_name: str | None = None
    main_type: FolderType | None = None

    def to_dict(self) -> FolderInfoPayload:
        """Serialize using the dashboard's field names."""
        payload: FolderInfoPayload = {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "fileCount": self.file_count,
            "folderCount": self.folder_count,
            "containsRepo": self.contains_repo,
        }
        if self.repo_name is not None:
            payload["repoName"] = self.repo_name
        if self.main_type is not None:
            payload["mainType"] = self.main_type
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> FolderInfo:
        """Rebuild a folder record from ``to_dict`` output."""
        main_type = _optional_str(payload, "mainType")
        if main_type is not None and main_type not in _FOLDER_TYPES:
            raise ValueError(f"unknown mainType {main_type!r}")
        return cls(
            path=_require_str(payload, "path"),
            name=_require_str(payload, "name"),
            size=_require_int(payload, "size"),
            file_count=_require_int(payload, "fileCount"),
            folder_count=_require_int(payload, "folderCount"),
            contains_repo=_require_bool(payload, "containsRepo"),
            repo_name=_optional_str(payload, "repoName"),
            main_type=cast("FolderType | None", main_type),
        )


@dataclass(frozen=True)
class MediaStat:
    """Count and byte total for one media category."""

    count: int = 0
    size: int = 0

    def to_dict(self) -> MediaStatPayload:
        """Serialize a heatmap cell."""
        return {"count": self.count, "size": self.size}


@dataclass(frozen=True)
class ScanSummary:
    """Complete output of one scan; the unit of caching."""

    total_size: int
    file_count: int
    folder_count: int
    largest_files: tuple[FileRecord, ...]
    largest_folders: tuple[FolderInfo, ...]
    media_heatmap: dict[MediaType, MediaStat]
    repo_roots: tuple[RepoInfo, ...]
    scan_time: str
    config_fingerprint: str | None = None

    def to_dict(self) -> SummaryPayload:
        """Serialize to the persisted cache record shape."""
        payload: SummaryPayload = {
            "totalSize": self.total_size,
            "fileCount": self.file_count,
            "folderCount": self.folder_count,
            "largestFiles": [record.to_dict() for record in self.largest_files],
            "largestFolders": [folder.to_dict() for folder in self.largest_folders],
            "mediaHeatmap": {media_type: stat.to_dict() for media_type, stat in self.media_heatmap.items()},
            "repoRoots": [repo.to_dict() for repo in self.repo_roots],
            "scanTime": self.scan_time,
        }
        if self.config_fingerprint is not None:
            payload["configFingerprint"] = self.config_fingerprint
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ScanSummary:
        """Rebuild a summary from a cache record. Raises ``ValueError`` on bad input."""
        raw_heatmap = payload.get("mediaHeatmap")
        if not isinstance(raw_heatmap, dict):
            raise ValueError("mediaHeatmap must be a mapping")
        heatmap: dict[MediaType, MediaStat] = {}
        for media_type in MEDIA_TYPES:
            cell = raw_heatmap.get(media_type, {})
            if not isinstance(cell, dict):
                raise ValueError(f"mediaHeatmap.{media_type} must be a mapping")
            heatmap[cast(MediaType, media_type)] = MediaStat(
                count=_require_int(cell, "count", default=0),
                size=_require_int(cell, "size", default=0),
            )

        return cls(
            total_size=_require_int(payload, "totalSize"),
            file_count=_require_int(payload, "fileCount"),
            folder_count=_require_int(payload, "folderCount"),
            largest_files=tuple(FileRecord.from_dict(item) for item in _require_list(payload, "largestFiles")),
            largest_folders=tuple(FolderInfo.from_dict(item) for item in _require_list(payload, "largestFolders")),
            media_heatmap=heatmap,
            repo_roots=tuple(RepoInfo.from_dict(item) for item in _require_list(payload, "repoRoots")),
            scan_time=_require_str(payload, "scanTime"),
            config_fingerprint=_optional_str(payload, "configFingerprint"),
        )


def empty_heatmap() -> dict[MediaType, MediaStat]:
    """Return a heatmap with a zeroed cell for every category."""
    return {cast(MediaType, media_type): MediaStat() for media_type in MEDIA_TYPES}


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string when present")
    return value


def _require_int(payload: Mapping[str, Any], key: str, *, default: int | None = None) -> int:
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key} must be a non-negative integer")
    return value


def _require_bool(payload: Mapping[str, Any], key: str) -> bool:
    value = payload.get(key)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean")
    return value


def _require_list(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = payload.get(key)
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ValueError(f"{key} must be a list of mappings")
    return value


def _parse_timestamp(raw: str) -> datetime:
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
