"""Extension tables for media classification."""

from __future__ import annotations

MEDIA_TYPES: tuple[str, ...] = ("video", "image", "design", "audio", "archive", "code", "other")
MEDIA_TYPE_OTHER: str = "other"
MEDIA_TYPE_MIXED: str = "mixed"

# Strict majority threshold for a folder's dominant media type.
DOMINANT_TYPE_THRESHOLD: float = 0.5

VIDEO_EXTENSIONS: frozenset[str] = frozenset({"mov", "mp4", "mkv", "avi", "wmv", "flv", "webm", "m4v"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {"png", "jpg", "jpeg", "gif", "webp", "tiff", "tif", "bmp", "svg", "ico", "heic", "heif"}
)
DESIGN_EXTENSIONS: frozenset[str] = frozenset(
    {"psd", "ai", "aep", "prproj", "blend", "sketch", "fig", "xd", "indd", "eps"}
)
AUDIO_EXTENSIONS: frozenset[str] = frozenset({"wav", "aiff", "aif", "mp3", "aac", "ogg", "flac", "m4a", "wma"})
ARCHIVE_EXTENSIONS: frozenset[str] = frozenset({"zip", "rar", "7z"})
CODE_EXTENSIONS: frozenset[str] = frozenset(
    {
        "ts",
        "tsx",
        "js",
        "jsx",
        "py",
        "rb",
        "go",
        "rs",
        "java",
        "c",
        "cpp",
        "h",
        "cs",
        "php",
        "swift",
        "kt",
        "json",
        "yaml",
        "yml",
        "xml",
        "html",
        "css",
        "scss",
        "less",
    }
)

# Lookup order matters only if tables overlap; first match wins.
EXTENSION_TABLES: tuple[tuple[str, frozenset[str]], ...] = (
    ("video", VIDEO_EXTENSIONS),
    ("image", IMAGE_EXTENSIONS),
    ("design", DESIGN_EXTENSIONS),
    ("audio", AUDIO_EXTENSIONS),
    ("archive", ARCHIVE_EXTENSIONS),
    ("code", CODE_EXTENSIONS),
)
