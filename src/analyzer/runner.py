"""폴더 분석 실행기./Folder analysis runner."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import AbstractSet, Callable, Iterator

from .exceptions import EntryAccessError, NotADirectoryInputError, PathNotFoundError
from .media import MEDIA_EXTENSIONS, is_media_file
from .models import (
    DEFAULT_MAX_DEPTH,
    EntrySkipped,
    FolderEntered,
    ProgressCallback,
    ProgressEvent,
    ScanEvent,
    ScanRequest,
    ScanResult,
)
from .state import PROGRESS_CAP, PROGRESS_INTERVAL, ScanState
from .walker import DirectoryVisit, DirectoryWalker

__all__ = ["analyze", "iter_scan_events", "validate_root"]

LOGGER = logging.getLogger(__name__)


def validate_root(root_path: Path) -> None:
    """루트 경로를 한 번 검사합니다./Check the scan root once, before traversal."""

    if not root_path.exists():
        raise PathNotFoundError(root_path)
    if not root_path.is_dir():
        raise NotADirectoryInputError(root_path)


def iter_scan_events(
    request: ScanRequest,
    *,
    progress_interval: int = PROGRESS_INTERVAL,
    progress_cap: int = PROGRESS_CAP,
) -> Iterator[ScanEvent]:
    """분석 이벤트를 순서대로 생성합니다./Yield analysis events in order.

    진행률, 폴더 진입, 건너뛴 항목 이벤트 뒤에 100% 진행률 이벤트가 한 번,
    마지막으로 `ScanResult`가 한 번 나옵니다. 루트가 없으면 어떤 이벤트도
    내보내기 전에 `FatalInputError`가 발생합니다.

    Progress, folder and skip events are followed by exactly one 100%
    progress event and then exactly one `ScanResult`. A missing root raises
    `FatalInputError` before anything is yielded.
    """

    validate_root(request.root_path)
    LOGGER.info("Scanning folder: %s", request.root_path)
    state = ScanState(
        request=request,
        progress_interval=progress_interval,
        progress_cap=progress_cap,
    )
    walker = DirectoryWalker(request, _make_error_handler(state))
    media_extensions = request.media_extensions
    for item in walker.iter_entries():
        yield from _drain_warnings(state)
        if isinstance(item, DirectoryVisit):
            LOGGER.info("Analyzing subfolder: %s", item.path)
            yield FolderEntered(path=item.path, depth=item.depth)
            continue
        is_media = is_media_file(Path(item.path), media_extensions)
        state.record_file(item.path, item.size, is_media)
        if state.should_emit_progress():
            event = state.progress_event(item.listing_size)
            LOGGER.debug("Progress: %d%% - Processed %d files", event.percent, event.files_processed)
            yield event
    yield from _drain_warnings(state)
    yield state.final_progress()
    yield state.final_result(time.perf_counter())


def _drain_warnings(state: ScanState) -> Iterator[EntrySkipped]:
    while state.pending_warnings:
        yield state.pending_warnings.pop(0)


def _make_error_handler(state: ScanState) -> Callable[[Path, OSError], None]:
    """오류 리스너를 생성합니다./Create error reporter closure."""

    def _handle(path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        failure = EntryAccessError(path, reason)
        LOGGER.warning("%s", failure)
        state.pending_warnings.append(EntrySkipped(path=str(path), message=str(failure)))

    return _handle


def analyze(
    root_path: Path | str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    media_extensions: AbstractSet[str] = MEDIA_EXTENSIONS,
    progress_callback: ProgressCallback | None = None,
) -> ScanResult:
    """폴더를 분석하고 결과를 반환합니다./Analyse a folder and return its result.

    `progress_callback`은 중간 진행률과 최종 100% 이벤트를 받습니다.
    """

    request = ScanRequest(
        root_path=Path(root_path),
        max_depth=max_depth,
        media_extensions=media_extensions,
    )
    result: ScanResult | None = None
    for event in iter_scan_events(request):
        if isinstance(event, ScanResult):
            result = event
        elif isinstance(event, ProgressEvent) and progress_callback is not None:
            progress_callback(event)
    if result is None:  # pragma: no cover - the stream always ends with a result
        raise RuntimeError("analysis finished without a result")
    return result
