"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .base import AnalyzerBaseModel
from .config import AnalyzerConfig
from .decimal_format import NumberLike, format_2d, format_megabytes
from .errors import WorkerError
from .logging import configure_logging
from .timezone import local_now

__all__ = [
    "AnalyzerBaseModel",
    "AnalyzerConfig",
    "NumberLike",
    "format_2d",
    "format_megabytes",
    "WorkerError",
    "configure_logging",
    "local_now",
]
