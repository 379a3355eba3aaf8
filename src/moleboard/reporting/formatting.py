"""Human-readable formatting helpers for scan output."""

from __future__ import annotations

import os

from moleboard.constants.reporting import BYTE_UNIT_BASE, BYTE_UNITS


def display_path(path: str) -> str:
    """Return *path* safe for any terminal encoding.

    Undecodable filename bytes (held as surrogate escapes) become U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def format_bytes(num_bytes: int, decimals: int = 2) -> str:
    """Render *num_bytes* with a base-1024 unit, e.g. ``1.5 KB`` or ``0 Bytes``."""
    if num_bytes <= 0:
        return f"0 {BYTE_UNITS[0]}"

    unit_index = 0
    threshold = BYTE_UNIT_BASE
    while num_bytes >= threshold and unit_index < len(BYTE_UNITS) - 1:
        unit_index += 1
        threshold *= BYTE_UNIT_BASE

    value = num_bytes / BYTE_UNIT_BASE**unit_index
    rendered = f"{value:.{max(0, decimals)}f}"
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return f"{rendered} {BYTE_UNITS[unit_index]}"


def format_percent(part: int, whole: int) -> str:
    """Render ``part / whole`` as a whole-number percentage."""
    if whole <= 0:
        return "0%"
    return f"{round(part * 100 / whole)}%"
