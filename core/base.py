"""KR: 설정 모델 기반 클래스. EN: Base model for settings objects."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field


class AnalyzerBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


__all__: Sequence[str] = ("AnalyzerBaseModel", "Field")
