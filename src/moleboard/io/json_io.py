"""JSON persistence for the scan cache file.

The cache is rewritten whole on every save, so writes go to a sibling temp
file that is flushed to disk and renamed over the target. Readers never see
a half-written cache; a crash mid-save leaves the previous file intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Parse *path* as UTF-8 JSON.

    Raises ``OSError`` when the file cannot be read and ``ValueError`` when
    it is not valid JSON; callers decide whether either means "empty".
    """
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Replace *path* with *payload* serialized as indented JSON.

    Parent directories are created on demand. Non-ASCII characters are
    escaped, so filenames with undecodable bytes survive a round trip. On
    any failure the temp file is removed and *path* is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
            handle.write("\n")
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, path)
    except BaseException:
        with suppress(FileNotFoundError):
            os.unlink(temp_name)
        raise
