"""Config file validation for MoleBoard scans."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from moleboard.constants.config import CONFIG_FILENAME
from moleboard.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    KEY_SUGGESTION_CUTOFF,
)
from moleboard.exceptions.validation import ValidationError, sort_errors


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a moleboard.yaml file and return all validation errors.

    This is the collect-all counterpart of ``load_config`` used by
    ``moleboard validate-config``. It never raises; every problem is
    returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.expanduser().resolve()
    if not root.is_dir():
        errors.append(
            ValidationError(
                code=CFG007,
                path=str(root),
                field="",
                message=f"root directory does not exist: {root}",
            )
        )
        return errors

    path = config_path.expanduser().resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    errors.extend(_validate_int(raw, "max_depth", path_str, minimum=0))
    errors.extend(_validate_int(raw, "top_n", path_str, minimum=1))

    if "skip_hidden_dirs" in raw and not isinstance(raw["skip_hidden_dirs"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="skip_hidden_dirs",
                message="invalid type for `skip_hidden_dirs`",
                hint="expected true or false",
            )
        )

    if "excluded_dirs" in raw:
        val = raw["excluded_dirs"]
        if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="excluded_dirs",
                    message="invalid type for `excluded_dirs`",
                    hint="expected a list of strings",
                )
            )

    if "cache_path" in raw:
        val = raw["cache_path"]
        if val is not None and (not isinstance(val, str) or not val.strip()):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="cache_path",
                    message="invalid type for `cache_path`",
                    hint="expected a non-empty string path",
                )
            )

    return sort_errors(errors)


def _validate_int(raw: dict[str, Any], key: str, path_str: str, *, minimum: int) -> list[ValidationError]:
    if key not in raw:
        return []
    val = raw[key]
    if isinstance(val, bool) or not isinstance(val, int):
        return [
            ValidationError(
                code=CFG005,
                path=path_str,
                field=key,
                message=f"invalid type for `{key}`",
                hint="expected an integer",
            )
        ]
    if val < minimum:
        return [
            ValidationError(
                code=CFG006,
                path=path_str,
                field=key,
                message=f"`{key}` must be >= {minimum}, got {val}",
            )
        ]
    return []


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=KEY_SUGGESTION_CUTOFF)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
