"""Config fingerprinting for cache invalidation."""

from __future__ import annotations

import hashlib
import json

from moleboard.config.model import MoleboardConfig


def config_fingerprint(config: MoleboardConfig) -> str:
    """Return a stable hash of the settings that change scan output."""
    payload = {
        "max_depth": config.max_depth,
        "top_n": config.top_n,
        "excluded_dirs": sorted(config.excluded_dirs),
        "skip_hidden_dirs": config.skip_hidden_dirs,
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()
