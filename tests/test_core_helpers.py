"""핵심 헬퍼 모듈 테스트(KR). Core helper module tests (EN)."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AnalyzerConfig
from core.decimal_format import format_2d, format_megabytes
from core.errors import WorkerError
from core.logging import configure_logging
from core.timezone import local_now
from src.analyzer import MEDIA_EXTENSIONS


def test_format_2d_should_round_and_pad() -> None:
    """소수를 두 자리로 반올림/패딩한다 · Rounds and pads decimals to 2 places."""

    assert format_2d(Decimal("12.345")) == "12.35"
    assert format_2d(5) == "5.00"
    assert format_2d("7.4") == "7.40"


def test_format_megabytes_should_scale_bytes() -> None:
    assert format_megabytes(0) == "0.00"
    assert format_megabytes(1024 * 1024) == "1.00"
    assert format_megabytes(1536 * 1024) == "1.50"


def test_local_now_should_return_tz_aware_iso() -> None:
    """시간대가 포함된 ISO 문자열을 돌려준다 · Returns timezone-aware ISO string."""

    timestamp = local_now()
    assert "T" in timestamp
    assert timestamp[-6] in "+-"


def test_configure_logging_should_install_json_handler(tmp_path: Path) -> None:
    """로깅 설정이 JSON 핸들러를 추가한다 · Logging config installs JSON handler."""

    log_path = tmp_path / "worker.log"
    configure_logging(log_path, level="INFO")
    logger = logging.getLogger("src.analyzer.runner")
    logger.info("hello")
    logger.debug("hidden")
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [record["message"] for record in records] == ["hello"]
    assert records[0]["level"] == "INFO"
    assert "timestamp" in records[0]


def test_worker_error_str() -> None:
    """워커 오류는 단계를 노출한다 · Worker error exposes stage."""

    error = WorkerError("failed", stage="config")
    assert str(error) == "[config] failed"
    assert str(WorkerError("plain")) == "plain"
    assert error.to_payload() == {"error": "[config] failed", "stage": "config"}
    assert WorkerError("plain").to_payload() == {"error": "plain"}
    assert WorkerError("stop", exit_code=3).exit_code == 3


def test_config_defaults() -> None:
    config = AnalyzerConfig()
    assert config.max_depth == 5
    assert config.progress_interval == 10
    assert config.progress_cap == 95
    assert config.media_extensions == MEDIA_EXTENSIONS
    assert config.log_file is None


def test_config_from_file_normalises_extensions(tmp_path: Path) -> None:
    """설정 파일 확장자를 정규화한다 · Config file extensions are normalised."""

    config_file = tmp_path / "worker.yml"
    config_file.write_text(
        "max_depth: 2\nmedia_extensions: [JPG, .Heic]\nlog_level: debug\nunknown: 1\n",
        encoding="utf-8",
    )
    config = AnalyzerConfig.from_file(config_file)
    assert config.max_depth == 2
    assert config.media_extensions == frozenset({".jpg", ".heic"})
    assert config.log_level == "DEBUG"
    request = config.to_request(tmp_path)
    assert request.root_path == tmp_path
    assert request.max_depth == 2
    assert request.media_extensions == frozenset({".jpg", ".heic"})


def test_config_missing_or_empty_file_uses_defaults(tmp_path: Path) -> None:
    assert AnalyzerConfig.from_file(tmp_path / "absent.yml").max_depth == 5
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert AnalyzerConfig.from_file(empty).progress_interval == 10


def test_config_rejects_invalid_values(tmp_path: Path) -> None:
    """잘못된 설정을 거부한다 · Invalid settings are rejected."""

    listing = tmp_path / "list.yml"
    listing.write_text("- a\n", encoding="utf-8")
    with pytest.raises(ValueError):
        AnalyzerConfig.from_file(listing)
    with pytest.raises(ValidationError):
        AnalyzerConfig(progress_cap=100)
    config = AnalyzerConfig()
    with pytest.raises(ValidationError):
        config.max_depth = -1
