"""Constants for stdout formatting and byte rendering."""

from __future__ import annotations

BYTE_UNIT_BASE: int = 1024
BYTE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB", "PB")

DEFAULT_REPORT_LIMIT: int = 5

HEATMAP_LABELS: dict[str, str] = {
    "video": "Video",
    "image": "Images",
    "design": "Design",
    "audio": "Audio",
    "archive": "Archives",
    "code": "Code",
    "other": "Other",
}

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_CYAN: str = "\033[36;1m"
ANSI_DIM: str = "\033[2m"

MEDIA_TYPE_COLORS: dict[str, str] = {
    "video": ANSI_RED,
    "image": ANSI_YELLOW,
    "design": ANSI_CYAN,
    "audio": ANSI_GREEN,
}
