"""共有レイヤの公開インターフェース。"""

from .config import AppSettings, BattleNetSettings, get_settings
from .exceptions import BaseAppError, ConfigurationError, DecodeError
from .logging import configure_logging, get_logger
from .types import Clock, utc_now

__all__ = [
    "AppSettings",
    "BattleNetSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "BaseAppError",
    "ConfigurationError",
    "DecodeError",
    "Clock",
    "utc_now",
]
