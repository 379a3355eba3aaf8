"""Whole-file cache of scan summaries keyed by scan-root string.

Every ``save`` reads the full mapping, replaces one key and rewrites the
file. Two processes saving different roots at the same moment can lose one
update (last writer wins on the whole file); the cache is meant for a
single user driving one scanner at a time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from moleboard.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX
from moleboard.io import load_json_file, write_json_atomic
from moleboard.model import ScanSummary
from moleboard.types import CachePayload, SummaryPayload

logger = logging.getLogger(__name__)


class ScanCache:
    """Flat JSON store mapping scan-root keys to ``ScanSummary`` records."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Location of the backing JSON file."""
        return self._path

    def load(self, root_key: str) -> ScanSummary | None:
        """Return the cached summary for *root_key*, or ``None`` when absent or unreadable."""
        entry = self._read_payload().get(root_key)
        if entry is None:
            return None
        return _parse_entry(root_key, entry)

    def load_all(self) -> dict[str, ScanSummary]:
        """Return every readable cached summary; malformed entries are dropped."""
        summaries: dict[str, ScanSummary] = {}
        for root_key, entry in self._read_payload().items():
            summary = _parse_entry(root_key, entry)
            if summary is not None:
                summaries[root_key] = summary
        return summaries

    def save(self, root_key: str, summary: ScanSummary) -> None:
        """Store *summary* under *root_key*, rewriting the whole cache file."""
        payload = self._read_payload()
        payload[root_key] = summary.to_dict()
        write_json_atomic(
            path=self._path,
            payload=payload,
            temp_prefix=CACHE_TEMP_PREFIX,
            temp_suffix=CACHE_TEMP_SUFFIX,
        )
        logger.debug("Cached summary for %s in %s", root_key, self._path)

    def _read_payload(self) -> CachePayload:
        """Load the raw mapping, treating missing or corrupt storage as empty."""
        try:
            if not self._path.is_file():
                return {}
            raw = load_json_file(self._path)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable cache file %s: %s", self._path, exc)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Ignoring cache file %s: top-level value is not a mapping", self._path)
            return {}

        payload: CachePayload = {}
        for key, value in raw.items():
            if isinstance(key, str) and isinstance(value, dict):
                payload[key] = value
        return payload


def _parse_entry(root_key: str, entry: SummaryPayload) -> ScanSummary | None:
    try:
        return ScanSummary.from_dict(entry)
    except (ValueError, TypeError) as exc:
        logger.warning("Dropping malformed cache entry for %s: %s", root_key, exc)
        return None
