"""Rich stdout reporter for scan summaries."""

from __future__ import annotations

from moleboard.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from moleboard.constants.classification import MEDIA_TYPES
from moleboard.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_RESET,
    DEFAULT_REPORT_LIMIT,
    HEATMAP_LABELS,
    MEDIA_TYPE_COLORS,
)
from moleboard.model import ScanSummary
from moleboard.reporting.formatting import display_path, format_bytes, format_percent

HEATMAP_BAR_WIDTH: int = 20


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return "…" + text[-(width - 1) :]


class StdoutReporter:
    """Formats a scan summary as human-readable stdout output."""

    def __init__(
        self,
        summary: ScanSummary,
        *,
        color: bool = True,
        verbose: bool = False,
        limit: int = DEFAULT_REPORT_LIMIT,
    ) -> None:
        """Initialise the reporter."""
        self._summary = summary
        self._color = color
        self._verbose = verbose
        self._limit = max(0, limit)

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [
            self._render_header(),
            self._render_files_table(),
            self._render_folders_table(),
            self._render_heatmap(),
        ]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        s = self._summary
        sep = "  " + "─" * 38
        total = format_bytes(s.total_size)
        if self._color:
            total = _colorize(total, ANSI_BOLD)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SCAN_SUMMARY_TITLE}",
            sep,
            "",
            f"  Total size  {total}",
            f"  Files       {s.file_count}",
            f"  Folders     {s.folder_count}",
            f"  Repos       {len(s.repo_roots)}",
            f"  Scanned at  {s.scan_time}",
        ]
        if self._verbose:
            for repo in s.repo_roots:
                lines.append(
                    f"    {repo.kind:<5} {display_path(repo.name)}  "
                    f"{format_bytes(repo.root_size)}  {display_path(repo.path)}"
                )
            if s.config_fingerprint:
                lines.append(f"  Config      {s.config_fingerprint[:12]}")
        lines.append("")
        return "\n".join(lines)

    def _render_files_table(self) -> str:
        files = self._summary.largest_files[: self._limit]
        if not files:
            return ""

        w_path = 48
        w_size = 10
        w_type = 7

        def _hline(left: str, mid: str, right: str) -> str:
            return f"  {left}{'─' * (w_path + 2)}{mid}{'─' * (w_size + 2)}{mid}{'─' * (w_type + 2)}{right}"

        lines = [
            "  Largest files",
            _hline("┌", "┬", "┐"),
            f"  │ {'Path':<{w_path}} │ {'Size':>{w_size}} │ {'Type':<{w_type}} │",
            _hline("├", "┼", "┤"),
        ]
        for record in files:
            media = self._color_media(record.media_type, w_type)
            path = _truncate(display_path(record.path), w_path)
            lines.append(f"  │ {path:<{w_path}} │ {format_bytes(record.size):>{w_size}} │ {media} │")
        lines.append(_hline("└", "┴", "┘"))
        return "\n".join(lines)

    def _render_folders_table(self) -> str:
        folders = self._summary.largest_folders[: self._limit]
        if not folders:
            return ""

        w_path = 40
        w_size = 10
        w_files = 7
        w_type = 7

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_path + 2)}{mid}{'─' * (w_size + 2)}"
                f"{mid}{'─' * (w_files + 2)}{mid}{'─' * (w_type + 2)}{right}"
            )

        lines = [
            "",
            "  Largest folders",
            _hline("┌", "┬", "┐"),
            f"  │ {'Path':<{w_path}} │ {'Size':>{w_size}} │ {'Files':>{w_files}} │ {'Type':<{w_type}} │",
            _hline("├", "┼", "┤"),
        ]
        for folder in folders:
            label = display_path(folder.path)
            if folder.contains_repo:
                label = f"{label} [repo]"
            path = _truncate(label, w_path)
            media = self._color_media(folder.main_type or "-", w_type)
            lines.append(
                f"  │ {path:<{w_path}} │ {format_bytes(folder.size):>{w_size}}"
                f" │ {folder.file_count:>{w_files}} │ {media} │"
            )
        lines.append(_hline("└", "┴", "┘"))
        return "\n".join(lines)

    def _render_heatmap(self) -> str:
        s = self._summary
        if s.file_count == 0:
            return ""

        lines = ["", "  Media heatmap"]
        for media_type in MEDIA_TYPES:
            stat = s.media_heatmap.get(media_type)
            count = stat.count if stat is not None else 0
            size = stat.size if stat is not None else 0
            if count == 0 and not self._verbose:
                continue
            filled = round(HEATMAP_BAR_WIDTH * size / s.total_size) if s.total_size else 0
            bar = "█" * filled + "·" * (HEATMAP_BAR_WIDTH - filled)
            if self._color:
                bar = _colorize(bar, MEDIA_TYPE_COLORS.get(media_type, ANSI_DIM))
            label = HEATMAP_LABELS.get(media_type, media_type)
            lines.append(
                f"  {label:<9} {bar} {format_bytes(size):>10}  "
                f"{count} files ({format_percent(size, s.total_size)})"
            )
        lines.append("")
        return "\n".join(lines)

    def _color_media(self, media_type: str, width: int) -> str:
        padded = f"{media_type:<{width}}"
        color = MEDIA_TYPE_COLORS.get(media_type)
        if not self._color or color is None:
            return padded
        return _colorize(padded, color)
