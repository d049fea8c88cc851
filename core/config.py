"""분석기 설정 모델(KR). Analyzer configuration model (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, FrozenSet

import yaml
from pydantic import field_validator

from src.analyzer.media import MEDIA_EXTENSIONS, normalize_extensions
from src.analyzer.models import DEFAULT_MAX_DEPTH, ScanRequest
from src.analyzer.state import PROGRESS_CAP, PROGRESS_INTERVAL

from .base import AnalyzerBaseModel, Field


class AnalyzerConfig(AnalyzerBaseModel):
    """워커 설정 전체를 표현 · Represent complete worker settings."""

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)
    progress_interval: int = Field(default=PROGRESS_INTERVAL, ge=1)
    progress_cap: int = Field(default=PROGRESS_CAP, ge=0, le=99)
    media_extensions: FrozenSet[str] = Field(default=MEDIA_EXTENSIONS)
    log_file: Path | None = None
    log_level: str = "INFO"

    @field_validator("media_extensions", mode="before")
    @classmethod
    def _normalise_extensions(cls, value: Any) -> FrozenSet[str]:
        if isinstance(value, str):
            value = [value]
        return normalize_extensions(value)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_file(cls, config_file: Path) -> "AnalyzerConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())

    def to_request(self, root_path: Path | str) -> ScanRequest:
        """분석 요청을 생성 · Build a scan request for a root folder."""

        return ScanRequest(
            root_path=Path(root_path),
            max_depth=self.max_depth,
            media_extensions=self.media_extensions,
        )


__all__ = ["AnalyzerConfig"]
