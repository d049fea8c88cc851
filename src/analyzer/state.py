"""분석 상태 추적기./Track folder analysis state."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .models import EntrySkipped, ProgressEvent, ScanRequest, ScanResult

PROGRESS_INTERVAL = 10
PROGRESS_CAP = 95
_MIN_PROGRESS_DENOMINATOR = 100
_LISTING_WEIGHT = 3


@dataclass(slots=True)
class ScanState:
    """분석 진행 상황을 저장합니다./Store ongoing analysis aggregates.

    한 번의 순회 동안만 사용되며 외부에는 복사본만 노출됩니다.
    Owned by a single traversal; only copies leave through events.
    """

    request: ScanRequest
    progress_interval: int = PROGRESS_INTERVAL
    progress_cap: int = PROGRESS_CAP
    start_time: float = field(default_factory=time.perf_counter)
    file_count: int = 0
    total_size_bytes: int = 0
    media_files: list[str] = field(default_factory=list)
    last_percent: int = 0
    completed: bool = False
    pending_warnings: list[EntrySkipped] = field(default_factory=list)

    def record_file(self, path: str, size: int, is_media: bool) -> None:
        """파일 하나를 집계합니다./Count one regular file."""

        self.file_count += 1
        self.total_size_bytes += max(size, 0)
        if is_media:
            self.media_files.append(path)

    def should_emit_progress(self) -> bool:
        """진행률 방출 여부를 결정합니다./Decide if a progress event is due."""

        return self.file_count > 0 and self.file_count % self.progress_interval == 0

    def estimate_percent(self, listing_size: int) -> int:
        """현재 목록 크기로 진행률을 추정./Estimate progress from the current listing.

        전체 작업량을 미리 알 수 없으므로 상한 아래에서만 증가합니다.
        """

        denominator = max(listing_size * _LISTING_WEIGHT, _MIN_PROGRESS_DENOMINATOR)
        estimate = min(self.progress_cap, (self.file_count * 100) // denominator)
        return max(self.last_percent, estimate)

    def progress_event(self, listing_size: int) -> ProgressEvent:
        """중간 진행률 이벤트를 생성./Build an interim progress event."""

        self.last_percent = self.estimate_percent(listing_size)
        return ProgressEvent(percent=self.last_percent, files_processed=self.file_count)

    def final_progress(self) -> ProgressEvent:
        """완료 진행률 이벤트를 생성./Build the single terminal 100% event."""

        if self.completed:
            raise RuntimeError("scan already finalised")
        self.completed = True
        self.last_percent = 100
        return ProgressEvent(percent=100, files_processed=self.file_count)

    def elapsed_ms(self, now: float) -> int:
        return max(int((now - self.start_time) * 1000), 0)

    def final_result(self, now: float) -> ScanResult:
        """최종 결과를 생성합니다./Produce the immutable result."""

        return ScanResult(
            total_files=self.file_count,
            total_size_bytes=self.total_size_bytes,
            media_files=tuple(self.media_files),
            elapsed_time_ms=self.elapsed_ms(now),
        )
