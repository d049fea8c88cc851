"""폴더 분석 워커 API./Folder analysis worker API."""

from __future__ import annotations

from .exceptions import (
    AnalyzerError,
    EntryAccessError,
    FatalInputError,
    NotADirectoryInputError,
    PathNotFoundError,
)
from .media import IMAGE_EXTENSIONS, MEDIA_EXTENSIONS, VIDEO_EXTENSIONS, is_media_file
from .messages import format_progress_line, format_result_line, parse_worker_line
from .models import (
    EntrySkipped,
    FolderEntered,
    ProgressCallback,
    ProgressEvent,
    ScanEvent,
    ScanRequest,
    ScanResult,
)
from .runner import analyze, iter_scan_events

__all__ = [
    "AnalyzerError",
    "EntryAccessError",
    "EntrySkipped",
    "FatalInputError",
    "FolderEntered",
    "IMAGE_EXTENSIONS",
    "MEDIA_EXTENSIONS",
    "NotADirectoryInputError",
    "PathNotFoundError",
    "ProgressCallback",
    "ProgressEvent",
    "ScanEvent",
    "ScanRequest",
    "ScanResult",
    "VIDEO_EXTENSIONS",
    "analyze",
    "format_progress_line",
    "format_result_line",
    "is_media_file",
    "iter_scan_events",
    "parse_worker_line",
]
