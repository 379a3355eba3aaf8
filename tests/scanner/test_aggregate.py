"""Tests for rollup, ranking, and heatmap aggregation."""

from __future__ import annotations

import os
from collections.abc import Callable
from collections import Counter
from datetime import UTC, datetime
from pathlib import Path

import pytest

from moleboard.constants.classification import MEDIA_TYPES
from moleboard.model import DirectoryNode, FileRecord, MediaStat, RepoInfo
from moleboard.scanner.aggregate import aggregate, build_heatmap, dominant_media_type, roll_up
from moleboard.scanner.classify import classify
from moleboard.scanner.walker import walk


def _record(path: str, size: int) -> FileRecord:
    extension = os.path.splitext(path)[1]
    return FileRecord(
        path=path,
        name=os.path.basename(path),
        size=size,
        extension=extension,
        modified_at=datetime(2024, 1, 1, tzinfo=UTC),
        media_type=classify(extension),
    )


def _nodes(*paths: str) -> dict[str, DirectoryNode]:
    return {path: DirectoryNode(path=path) for path in paths}


def test_roll_up_reaches_every_ancestor_once() -> None:
    directories = _nodes("/r", "/r/a", "/r/a/b")

    roll_up(_record("/r/a/b/clip.mp4", 10), directories, "/r")

    for path in ("/r", "/r/a", "/r/a/b"):
        assert directories[path].total_size == 10
        assert directories[path].total_file_count == 1
        assert directories[path].media_counts == Counter({"video": 1})


def test_roll_up_stops_at_root() -> None:
    directories = _nodes("/", "/r", "/r/a")

    roll_up(_record("/r/a/x.png", 3), directories, "/r")

    assert directories["/"].total_size == 0
    assert directories["/r"].total_size == 3


def test_directory_sizes_equal_sum_of_nested_files(make_tree: Callable[..., Path]) -> None:
    root = make_tree(
        {
            "top.bin": 5,
            "a/one.mp4": 100,
            "a/b/two.png": 30,
            "a/b/c/three.zip": 7,
            "d/four.py": 11,
            "d/e/": 0,
        }
    )
    result = walk(root)

    aggregate(result.files, result.directories, result.root)

    for path, node in result.directories.items():
        nested = [record for record in result.files if record.path.startswith(path + os.sep)]
        assert node.total_size == sum(record.size for record in nested)
        assert node.total_file_count == len(nested)
    assert result.directories[str(root / "d" / "e")].dominant_media_type is None


@pytest.mark.parametrize(
    ("counts", "expected"),
    [
        ({"video": 3, "image": 1}, "video"),
        ({"video": 2, "image": 2}, "mixed"),
        ({"code": 1}, "code"),
        ({"audio": 2, "image": 1, "code": 1}, "mixed"),
        ({"other": 51, "video": 49}, "other"),
    ],
)
def test_dominant_media_type(counts: dict[str, int], expected: str) -> None:
    media_counts = Counter(counts)

    assert dominant_media_type(media_counts, sum(counts.values())) == expected


def test_dominant_media_type_empty_directory() -> None:
    assert dominant_media_type(Counter(), 0) is None


def test_dominant_type_uses_transitive_files(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"mix/a.mp4": 1, "mix/b.mov": 1, "mix/sub/c.mkv": 1, "mix/sub/d.png": 1})
    result = walk(root)

    summary = aggregate(result.files, result.directories, result.root)

    folders = {folder.path: folder for folder in summary.largest_folders}
    assert folders[str(root / "mix")].main_type == "video"
    assert folders[str(root / "mix" / "sub")].main_type == "mixed"


def test_largest_files_ranked_with_path_tie_break() -> None:
    files = [
        _record("/r/b.txt", 5),
        _record("/r/a.txt", 5),
        _record("/r/big.mov", 50),
        _record("/r/tiny.py", 1),
    ]

    summary = aggregate(files, _nodes("/r"), "/r", top_n=3)

    assert [record.path for record in summary.largest_files] == ["/r/big.mov", "/r/a.txt", "/r/b.txt"]


@pytest.mark.parametrize("top_n", [1, 4, 25])
def test_largest_files_length_and_order(top_n: int) -> None:
    files = [_record(f"/r/f{index}.bin", (index * 37) % 11) for index in range(8)]

    summary = aggregate(files, _nodes("/r"), "/r", top_n=top_n)

    sizes = [record.size for record in summary.largest_files]
    assert len(sizes) == min(top_n, len(files))
    assert sizes == sorted(sizes, reverse=True)


def test_largest_folders_include_root_and_use_folder_fields(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"a/x.mp4": 40, "a/y.mp4": 20, "b/z.png": 5, "b/inner/": 0})
    result = walk(root)

    summary = aggregate(result.files, result.directories, result.root)

    first, second = summary.largest_folders[:2]
    assert first.path == str(root)
    assert first.size == 65
    assert first.file_count == 3
    assert first.folder_count == 2
    assert second.name == "a"
    assert second.main_type == "video"
    assert summary.folder_count == 4


def test_heatmap_has_every_category() -> None:
    heatmap = build_heatmap([_record("/r/a.mp4", 10), _record("/r/b.mp4", 5), _record("/r/c.png", 1)])

    assert list(heatmap) == list(MEDIA_TYPES)
    assert heatmap["video"] == MediaStat(count=2, size=15)
    assert heatmap["image"] == MediaStat(count=1, size=1)
    assert heatmap["archive"] == MediaStat(count=0, size=0)


def test_empty_scan_summary() -> None:
    summary = aggregate([], _nodes("/r"), "/r")

    assert summary.total_size == 0
    assert summary.file_count == 0
    assert summary.folder_count == 1
    assert summary.largest_files == ()
    assert summary.largest_folders[0].main_type is None
    assert all(stat.count == 0 for stat in summary.media_heatmap.values())


def test_repo_containment_and_root_size() -> None:
    directories = _nodes("/r", "/r/work", "/r/work/proj", "/r/work/proj/src", "/r/other")
    files = [_record("/r/work/proj/src/main.py", 12), _record("/r/other/a.mp4", 100)]
    repo = RepoInfo(path="/r/work/proj", name="proj", kind="git")

    summary = aggregate(files, directories, "/r", repo_roots=[repo, repo])

    assert summary.repo_roots == (RepoInfo(path="/r/work/proj", name="proj", kind="git", root_size=12),)
    assert directories["/r"].contains_repo is True
    assert directories["/r/work"].contains_repo is True
    assert directories["/r/work/proj"].contains_repo is True
    assert directories["/r/work/proj"].repo_name == "proj"
    assert directories["/r/work/proj/src"].contains_repo is False
    assert directories["/r/other"].contains_repo is False


def test_progress_reported_every_hundred_files_and_at_end() -> None:
    files = [_record(f"/r/f{index}.txt", 1) for index in range(250)]
    calls: list[tuple[int, int]] = []

    aggregate(files, _nodes("/r"), "/r", on_progress=lambda done, total: calls.append((done, total)))

    assert calls == [(100, 250), (200, 250), (250, 250)]


def test_summary_carries_fingerprint_and_timestamp() -> None:
    summary = aggregate([_record("/r/a.txt", 1)], _nodes("/r"), "/r", config_fingerprint="f" * 64)

    assert summary.config_fingerprint == "f" * 64
    assert datetime.fromisoformat(summary.scan_time).tzinfo is not None
