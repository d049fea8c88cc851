"""워커 예외 정의(KR). Worker exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(slots=True)
class WorkerError(Exception):
    """워커가 결과 없이 끝나는 오류 · Failure that ends the worker without a result.

    `stage`는 실패한 단계(config, analyze)이고 `exit_code`는 프로세스 종료 코드입니다.
    """

    message: str
    stage: str | None = None
    exit_code: int = 1

    def __str__(self) -> str:
        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message

    def to_payload(self) -> Dict[str, Any]:
        """stderr용 JSON 페이로드 · JSON payload written to stderr."""

        payload: Dict[str, Any] = {"error": str(self)}
        if self.stage:
            payload["stage"] = self.stage
        return payload


__all__ = ["WorkerError"]
