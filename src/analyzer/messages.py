"""워커 출력 라인 프로토콜./Worker output line protocol.

워커는 진행률 라인 여러 개와 JSON 결과 라인 하나를 stdout으로 보냅니다.
The worker writes progress lines followed by a single JSON result line.
"""

from __future__ import annotations

import json
import re

from .models import ProgressEvent, ScanResult

_PROGRESS_PATTERN = re.compile(r"Progress: (?P<percent>\d{1,3})% - Processed (?P<count>\d+) files")


def format_progress_line(event: ProgressEvent) -> str:
    """진행률 라인을 만듭니다./Render a progress line."""

    return f"Progress: {event.percent}% - Processed {event.files_processed} files"


def format_result_line(result: ScanResult) -> str:
    """결과를 한 줄 JSON으로 직렬화./Serialise the result as one JSON line."""

    return json.dumps(result.to_payload(), ensure_ascii=False, separators=(",", ":"))


def parse_worker_line(line: str) -> ProgressEvent | ScanResult | None:
    """호스트 쪽에서 워커 라인을 해석합니다./Parse a worker line on the host side.

    프로토콜 라인이 아니면 None을 반환합니다.
    """

    text = line.strip()
    if not text:
        return None
    if text.startswith("{"):
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            return None
        if not isinstance(payload, dict) or "totalFiles" not in payload:
            return None
        try:
            return ScanResult.from_payload(payload)
        except (KeyError, TypeError, ValueError):
            return None
    match = _PROGRESS_PATTERN.search(text)
    if match is None:
        return None
    return ProgressEvent(percent=int(match["percent"]), files_processed=int(match["count"]))


__all__ = ["format_progress_line", "format_result_line", "parse_worker_line"]
