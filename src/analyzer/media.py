"""미디어 확장자 판별./Media extension classification."""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, Iterable

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".bmp"})
VIDEO_EXTENSIONS = frozenset({".mp4", ".avi", ".mov", ".mkv", ".webm", ".wmv", ".flv"})
MEDIA_EXTENSIONS = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS


def normalize_extension(value: str) -> str:
    """확장자를 소문자 `.ext` 형태로 맞춥니다./Normalise to lower-case `.ext`."""

    text = value.strip().lower()
    if not text:
        raise ValueError("extension must not be empty")
    return text if text.startswith(".") else f".{text}"


def normalize_extensions(values: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_extension(value) for value in values)


def is_media_file(path: Path, extensions: AbstractSet[str] = MEDIA_EXTENSIONS) -> bool:
    """미디어 파일인지 판정합니다./Return True if path has a media extension."""

    return path.suffix.lower() in extensions
