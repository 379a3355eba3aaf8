"""Constants used by the scan summary cache."""

from __future__ import annotations

CACHE_DIRNAME: str = ".moleboard"
CACHE_FILENAME: str = "cache.json"
CACHE_TEMP_PREFIX: str = ".cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
