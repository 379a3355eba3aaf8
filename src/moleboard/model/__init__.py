"""Core data models for MoleBoard."""

from .entities import (
    DirectoryNode,
    FileRecord,
    FolderInfo,
    MediaStat,
    RepoInfo,
    ScanSummary,
    empty_heatmap,
)

__all__ = [
    "DirectoryNode",
    "FileRecord",
    "FolderInfo",
    "MediaStat",
    "RepoInfo",
    "ScanSummary",
    "empty_heatmap",
]
