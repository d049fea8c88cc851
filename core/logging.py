"""로깅 설정 유틸리티(KR). Logging configuration utilities (EN)."""

from __future__ import annotations

import json
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from .timezone import local_now

CONSOLE_FORMAT = "[Worker] %(message)s"
WORKER_LOGGERS = ("src.analyzer", "cli")


class JsonFormatter(logging.Formatter):
    """JSON 포맷터 구현 · Implement JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """레코드를 JSON 문자열로 직렬화 · Serialize record into JSON string."""

        payload: Dict[str, Any] = {
            "timestamp": local_now(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(log_file: Path | None = None, level: str = "INFO") -> None:
    """stderr 콘솔 로거와 선택적 JSON 파일 로거를 설정한다 · Configure console and JSON file loggers.

    진단 라인은 stderr로만 나가므로 stdout은 진행률/결과 프로토콜 전용입니다.
    """

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "worker",
            "stream": "ext://sys.stderr",
        }
    }
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "json",
            "filename": str(log_file),
            "encoding": "utf-8",
        }
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "worker": {"format": CONSOLE_FORMAT},
                "json": {
                    "()": "core.logging.JsonFormatter",
                },
            },
            "handlers": handlers,
            "loggers": {
                name: {
                    "level": level.upper(),
                    "handlers": list(handlers),
                    "propagate": False,
                }
                for name in WORKER_LOGGERS
            },
        }
    )


__all__ = ["configure_logging", "JsonFormatter", "CONSOLE_FORMAT", "WORKER_LOGGERS"]
