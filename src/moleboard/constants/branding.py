"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "MOLEBOARD"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ MOLEBOARD",
    "     // disk usage at a glance",
)
SCAN_SUMMARY_TITLE: str = "Scan summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} directory scanner"))
