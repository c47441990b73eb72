from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Optional

import mutagen
from mutagen.apev2 import APENoHeaderError, APEv2

from .errors import NoTagError, OpenError, ReadError
from .models import TagData


SUPPORTED_EXTENSIONS = {
    "m4a",
    "mp3",
    "flac",
    "wav",
    "ogg",
    "aac",
    "aiff",
    "wma",
    "ape",
    "opus",
    "mp4",
}

# Easy keys first, then raw ID3 frames, MP4 atoms, APEv2 and ASF names.
TITLE_KEYS = ("title", "TITLE", "TIT2", "©nam", "Title", "WM/Title")
TRACK_KEYS = ("tracknumber", "TRACKNUMBER", "TRCK", "trkn", "Track", "WM/TrackNumber")

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def audio_extension(path: Path) -> Optional[str]:
    ext = path.suffix.lower().lstrip(".")
    return ext if ext in SUPPORTED_EXTENSIONS else None


def is_audio_file(path: Path) -> bool:
    return path.is_file() and audio_extension(path) is not None


def _first(value: object) -> object:
    # ID3 frames keep their values in .text
    text = getattr(value, "text", None)
    if isinstance(text, list):
        value = text
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _tag_value(tags: object, *keys: str) -> object:
    for key in keys:
        try:
            value = tags.get(key)
        except (KeyError, TypeError, ValueError):
            value = None
        if value:
            return _first(value)
    return None


def parse_title(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def parse_track_number(value: object) -> Optional[int]:
    """Leading unsigned integer of a track field: ``"3/12"`` and ``(3, 12)`` both give 3."""
    if isinstance(value, tuple):
        value = value[0] if value else None
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    match = _LEADING_DIGITS.match(str(value))
    return int(match.group(1)) if match else None


def _secondary_tags(path: Path, fileobj: IO[bytes]) -> Optional[APEv2]:
    fileobj.seek(0)
    try:
        return APEv2(fileobj)
    except APENoHeaderError:
        return None
    except mutagen.MutagenError as exc:
        raise ReadError(path, f"cannot read metadata: {exc}") from exc


def read_tag_data(path: Path, extension: str) -> TagData:
    try:
        fileobj = path.open("rb")
    except OSError as exc:
        raise OpenError(path, f"cannot open file: {exc}") from exc

    with fileobj:
        try:
            audio = mutagen.File(fileobj, easy=True)
        except mutagen.MutagenError as exc:
            raise ReadError(path, f"cannot read metadata: {exc}") from exc
        if audio is None:
            raise OpenError(path, f"cannot open file: unrecognized .{extension} container")

        tags = audio.tags
        if tags is None:
            tags = _secondary_tags(path, fileobj)

    if tags is None:
        raise NoTagError(path, "file has no metadata tags")

    return TagData(
        title=parse_title(_tag_value(tags, *TITLE_KEYS)),
        track_number=parse_track_number(_tag_value(tags, *TRACK_KEYS)),
    )
