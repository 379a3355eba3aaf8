"""Tests for record serialization in the cache layout."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from moleboard.constants.classification import MEDIA_TYPES
from moleboard.model import FileRecord, FolderInfo, MediaStat, RepoInfo, ScanSummary, empty_heatmap


def test_file_record_uses_dashboard_field_names() -> None:
    record = FileRecord(
        path="/data/clip.mp4",
        name="clip.mp4",
        size=10,
        extension=".mp4",
        modified_at=datetime(2024, 1, 1, tzinfo=UTC),
        media_type="video",
    )

    payload = record.to_dict()

    assert payload == {
        "path": "/data/clip.mp4",
        "name": "clip.mp4",
        "size": 10,
        "ext": ".mp4",
        "modifiedAt": "2024-01-01T00:00:00+00:00",
        "mediaType": "video",
        "isRepo": False,
    }


def test_file_record_naive_timestamp_is_read_as_utc() -> None:
    record = FileRecord.from_dict(
        {
            "path": "/x/a.png",
            "name": "a.png",
            "size": 1,
            "ext": ".png",
            "modifiedAt": "2024-01-01T10:00:00",
            "mediaType": "image",
            "isRepo": False,
            "repoName": None,
        }
    )

    assert record.modified_at == datetime(2024, 1, 1, 10, tzinfo=UTC)
    assert record.repo_name is None


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("size", -1),
        ("size", True),
        ("size", "10"),
        ("mediaType", "mixed"),
        ("isRepo", "yes"),
        ("modifiedAt", "not a date"),
    ],
)
def test_file_record_rejects_bad_fields(field: str, value: Any) -> None:
    payload: dict[str, Any] = {
        "path": "/x/a.png",
        "name": "a.png",
        "size": 1,
        "ext": ".png",
        "modifiedAt": "2024-01-01T10:00:00+00:00",
        "mediaType": "image",
        "isRepo": False,
    }
    payload[field] = value

    with pytest.raises(ValueError):
        FileRecord.from_dict(payload)


def test_folder_info_omits_unset_optionals() -> None:
    folder = FolderInfo(path="/x", name="x", size=0, file_count=0, folder_count=0, contains_repo=False)

    payload = folder.to_dict()

    assert "repoName" not in payload
    assert "mainType" not in payload
    assert FolderInfo.from_dict(payload) == folder


def test_folder_info_accepts_mixed_main_type() -> None:
    folder = FolderInfo.from_dict(
        {
            "path": "/x",
            "name": "x",
            "size": 5,
            "fileCount": 2,
            "folderCount": 0,
            "containsRepo": False,
            "mainType": "mixed",
        }
    )

    assert folder.main_type == "mixed"


def test_repo_info_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError, match="unknown repo type"):
        RepoInfo.from_dict({"path": "/x", "name": "x", "type": "svn", "rootSize": 0})


def test_summary_roundtrip(sample_summary: ScanSummary) -> None:
    assert ScanSummary.from_dict(sample_summary.to_dict()) == sample_summary


def test_summary_fingerprint_only_serialized_when_set(summary_factory: Callable[..., ScanSummary]) -> None:
    assert "configFingerprint" not in summary_factory().to_dict()
    assert summary_factory(fingerprint="ab" * 32).to_dict()["configFingerprint"] == "ab" * 32


def test_summary_missing_heatmap_cells_default_to_zero(sample_summary: ScanSummary) -> None:
    payload = dict(sample_summary.to_dict())
    payload["mediaHeatmap"] = {"video": {"count": 1, "size": 1024}}

    summary = ScanSummary.from_dict(payload)

    assert set(summary.media_heatmap) == set(MEDIA_TYPES)
    assert summary.media_heatmap["video"] == MediaStat(count=1, size=1024)
    assert summary.media_heatmap["audio"] == MediaStat()


def test_summary_rejects_non_mapping_heatmap(sample_summary: ScanSummary) -> None:
    payload = dict(sample_summary.to_dict())
    payload["mediaHeatmap"] = []

    with pytest.raises(ValueError, match="mediaHeatmap"):
        ScanSummary.from_dict(payload)


def test_empty_heatmap_has_every_category() -> None:
    heatmap = empty_heatmap()

    assert list(heatmap) == list(MEDIA_TYPES)
    assert all(stat == MediaStat(count=0, size=0) for stat in heatmap.values())
