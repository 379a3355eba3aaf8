"""Tests for file search and filtering."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from moleboard.model import FileRecord
from moleboard.scanner.search import SearchFilters, search_files


def _record(path: str, size: int, media_type: str, *, in_repo: bool = False) -> FileRecord:
    name = path.rsplit("/", 1)[-1]
    extension = "." + name.rsplit(".", 1)[-1] if "." in name else ""
    return FileRecord(
        path=path,
        name=name,
        size=size,
        extension=extension,
        modified_at=datetime(2024, 1, 1, tzinfo=UTC),
        media_type=media_type,
        is_in_repo=in_repo,
        repo_name="proj" if in_repo else None,
    )


@pytest.fixture
def files() -> list[FileRecord]:
    return [
        _record("/r/Movies/Trip.MP4", 900, "video"),
        _record("/r/Movies/poster.png", 40, "image"),
        _record("/r/proj/src/main.py", 12, "code", in_repo=True),
        _record("/r/proj/assets/logo.png", 40, "image", in_repo=True),
        _record("/r/notes", 3, "other"),
    ]


def test_empty_query_matches_everything_sorted(files: list[FileRecord]) -> None:
    results = search_files(files)

    assert [record.path for record in results] == [
        "/r/Movies/Trip.MP4",
        "/r/Movies/poster.png",
        "/r/proj/assets/logo.png",
        "/r/proj/src/main.py",
        "/r/notes",
    ]


def test_query_is_case_insensitive_over_name_and_path(files: list[FileRecord]) -> None:
    assert [record.name for record in search_files(files, "trip")] == ["Trip.MP4"]
    assert [record.name for record in search_files(files, "MOVIES")] == ["Trip.MP4", "poster.png"]


def test_media_type_and_size_filters(files: list[FileRecord]) -> None:
    filters = SearchFilters(media_types=("image", "code"), min_size=10, max_size=40)

    results = search_files(files, filters=filters)

    assert [record.name for record in results] == ["poster.png", "logo.png", "main.py"]


def test_repo_filter(files: list[FileRecord]) -> None:
    inside = search_files(files, filters=SearchFilters(in_repo=True))
    outside = search_files(files, filters=SearchFilters(in_repo=False))

    assert {record.name for record in inside} == {"main.py", "logo.png"}
    assert {record.name for record in outside} == {"Trip.MP4", "poster.png", "notes"}


def test_extension_filter_accepts_dot_and_case_variants(files: list[FileRecord]) -> None:
    results = search_files(files, filters=SearchFilters(extensions=("mp4", ".PY")))

    assert [record.name for record in results] == ["Trip.MP4", "main.py"]


def test_query_and_filters_combine(files: list[FileRecord]) -> None:
    results = search_files(files, "png", SearchFilters(in_repo=True))

    assert [record.path for record in results] == ["/r/proj/assets/logo.png"]


def test_filters_active() -> None:
    assert SearchFilters().active() is False
    assert SearchFilters(min_size=0).active() is True
    assert SearchFilters(in_repo=False).active() is True
    assert SearchFilters(extensions=("zip",)).active() is True
