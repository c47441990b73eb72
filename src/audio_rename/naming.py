from __future__ import annotations

from typing import Optional

from .models import TagData


INVALID_FILENAME_CHARS = frozenset('/:?*\\<>|"')
UNKNOWN_TITLE = "Unknown Title"


def sanitize_filename(value: str) -> str:
    return "".join("_" if ch in INVALID_FILENAME_CHARS else ch for ch in value)


def normalized_title(value: Optional[str]) -> str:
    if value is None:
        return UNKNOWN_TITLE
    value = value.strip()
    return value if value else UNKNOWN_TITLE


def build_filename(track_number: Optional[int], title: Optional[str], extension: str) -> str:
    title = normalized_title(title)
    if track_number is not None:
        return f"{track_number:02d} - {title}.{extension}"
    return f"{title}.{extension}"


def target_filename(tag_data: TagData, extension: str) -> str:
    """Canonical, filesystem-safe name for a file carrying ``tag_data``."""
    return sanitize_filename(build_filename(tag_data.track_number, tag_data.title, extension))
