"""분석기 데이터 모델 정의./Define analyzer data models."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Callable, Union

from .media import MEDIA_EXTENSIONS

ProgressCallback = Callable[["ProgressEvent"], None]

DEFAULT_MAX_DEPTH = 5


def display_path(path: str) -> str:
    """출력용 경로 문자열을 만듭니다./Return a path that is safe to write as UTF-8.

    디코딩할 수 없는 파일 이름 바이트는 U+FFFD로 바뀝니다.
    """

    return os.fsencode(path).decode("utf-8", "replace")


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """단일 분석 요청./A single analysis request."""

    root_path: Path
    max_depth: int = DEFAULT_MAX_DEPTH
    media_extensions: AbstractSet[str] = MEDIA_EXTENSIONS

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0: {self.max_depth}")


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """진행률 스냅샷./Progress snapshot copied out of the live state."""

    percent: int
    files_processed: int

    @property
    def is_final(self) -> bool:
        return self.percent >= 100


@dataclass(frozen=True, slots=True)
class FolderEntered:
    """하위 폴더 진입 알림./Notice that a subfolder is being walked."""

    path: str
    depth: int


@dataclass(frozen=True, slots=True)
class EntrySkipped:
    """접근 불가 항목 알림./Notice that an entry was skipped."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """최종 분석 결과./Final, immutable analysis result."""

    total_files: int
    total_size_bytes: int
    media_files: tuple[str, ...]
    elapsed_time_ms: int

    def to_payload(self) -> dict[str, object]:
        """JSON 직렬화용 딕트를 생성./Return dict for JSON serialisation."""

        return {
            "totalFiles": self.total_files,
            "totalSize": self.total_size_bytes,
            "mediaFiles": [display_path(path) for path in self.media_files],
            "elapsedTime": self.elapsed_time_ms,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "ScanResult":
        """직렬화된 결과를 복원./Rebuild a result from its JSON payload."""

        media = payload.get("mediaFiles", [])
        if not isinstance(media, list):
            raise ValueError("mediaFiles must be a list")
        return cls(
            total_files=int(payload["totalFiles"]),  # type: ignore[call-overload]
            total_size_bytes=int(payload["totalSize"]),  # type: ignore[call-overload]
            media_files=tuple(str(item) for item in media),
            elapsed_time_ms=int(payload.get("elapsedTime", 0)),  # type: ignore[call-overload]
        )


ScanEvent = Union[ProgressEvent, FolderEntered, EntrySkipped, ScanResult]
