"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # value out of range
CFG007: str = "CFG007"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "max_depth",
        "top_n",
        "excluded_dirs",
        "skip_hidden_dirs",
        "cache_path",
    }
)

# Suggestion cutoff for "did you mean" hints on unknown keys.
KEY_SUGGESTION_CUTOFF: float = 0.6
