"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal

type MediaType = Literal["video", "image", "design", "audio", "archive", "code", "other"]
type FolderType = Literal["video", "image", "design", "audio", "archive", "code", "other", "mixed"]
type RepoKind = Literal["git", "npm", "other"]

type ProgressCallback = Callable[[int, int], None]
type CancelCheck = Callable[[], bool]
