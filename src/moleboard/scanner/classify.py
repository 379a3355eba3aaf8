"""Extension-based media classification shared by every scanner component."""

from __future__ import annotations

import os
from typing import cast

from moleboard.constants.classification import EXTENSION_TABLES, MEDIA_TYPE_OTHER
from moleboard.types import MediaType


def classify(extension: str) -> MediaType:
    """Map a file extension to its media category.

    Lookup is case-insensitive and a leading dot is ignored, so ``".MP4"``,
    ``"mp4"`` and ``"Mp4"`` all resolve to ``"video"``. Unknown or empty
    extensions resolve to ``"other"``.
    """
    normalized = extension.lower().removeprefix(".")
    if not normalized:
        return cast(MediaType, MEDIA_TYPE_OTHER)
    for media_type, extensions in EXTENSION_TABLES:
        if normalized in extensions:
            return cast(MediaType, media_type)
    return cast(MediaType, MEDIA_TYPE_OTHER)


def classify_name(filename: str) -> MediaType:
    """Classify a bare filename by its final suffix."""
    return classify(os.path.splitext(filename)[1])
