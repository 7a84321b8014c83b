"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .base import WarmBaseModel
from .config import WarmConfig
from .errors import WarmFsError
from .logging import JsonFormatter, configure_logging, utc_now

__all__ = [
    "WarmBaseModel",
    "WarmConfig",
    "WarmFsError",
    "JsonFormatter",
    "configure_logging",
    "utc_now",
]
