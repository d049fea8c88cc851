"""분석기 전용 예외를 정의합니다./Define analyzer specific exceptions."""

from __future__ import annotations

from pathlib import Path


class AnalyzerError(RuntimeError):
    """분석 중 발생한 오류 기본 클래스./Base class for analyzer errors."""


class FatalInputError(AnalyzerError):
    """입력 경로가 유효하지 않음./Raised when the scan root is unusable."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(FatalInputError):
    """루트 경로가 존재하지 않음./Root path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Folder does not exist: {path}")


class NotADirectoryInputError(FatalInputError):
    """루트 경로가 폴더가 아님./Root path is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Not a folder: {path}")


class EntryAccessError(AnalyzerError):
    """개별 항목에 접근할 수 없음./A single entry could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not access: {path} ({reason})")
        self.path = path
        self.reason = reason
