from __future__ import annotations

import wave
from pathlib import Path
from typing import Optional

import pytest
from mutagen.id3 import TIT2, TRCK
from mutagen.wave import WAVE


def _write_silence(path: Path) -> None:
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(8000)
        out.writeframes(b"\x00\x00" * 800)


@pytest.fixture
def make_wav():
    def _make(path: Path, title: Optional[str] = None, track: Optional[str] = None, tagged: bool = True) -> Path:
        _write_silence(path)
        if tagged:
            audio = WAVE(path)
            audio.add_tags()
            if title is not None:
                audio.tags.add(TIT2(encoding=3, text=[title]))
            if track is not None:
                audio.tags.add(TRCK(encoding=3, text=[track]))
            audio.save()
        return path

    return _make
