"""Query and filter helpers over scanned file records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from moleboard.model import FileRecord
from moleboard.types import MediaType


@dataclass(frozen=True)
class SearchFilters:
    """Optional constraints applied after the text query."""

    media_types: tuple[MediaType, ...] = ()
    min_size: int | None = None
    max_size: int | None = None
    in_repo: bool | None = None
    extensions: tuple[str, ...] = ()

    def active(self) -> bool:
        """Whether any filter is enabled."""
        return bool(
            self.media_types
            or self.min_size is not None
            or self.max_size is not None
            or self.in_repo is not None
            or self.extensions
        )


def file_matches(record: FileRecord, query: str, filters: SearchFilters) -> bool:
    """Return whether *record* satisfies the query and every active filter."""
    needle = query.lower()
    if needle and needle not in record.name.lower() and needle not in record.path.lower():
        return False
    if filters.media_types and record.media_type not in filters.media_types:
        return False
    if filters.min_size is not None and record.size < filters.min_size:
        return False
    if filters.max_size is not None and record.size > filters.max_size:
        return False
    if filters.in_repo is not None and record.is_in_repo != filters.in_repo:
        return False
    if filters.extensions:
        wanted = {_normalize_extension(ext) for ext in filters.extensions}
        if _normalize_extension(record.extension) not in wanted:
            return False
    return True


def search_files(
    files: Iterable[FileRecord],
    query: str = "",
    filters: SearchFilters | None = None,
) -> list[FileRecord]:
    """Return matching files, largest first, ties broken by path."""
    filters = filters or SearchFilters()
    matches = [record for record in files if file_matches(record, query, filters)]
    return sorted(matches, key=lambda record: (-record.size, record.path))


def _normalize_extension(extension: str) -> str:
    return extension.lower().removeprefix(".")
