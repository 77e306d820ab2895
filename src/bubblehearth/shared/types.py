"""共有型・ユーティリティ。"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """UTC の現在時刻を返す。"""

    return datetime.now(UTC)


__all__ = ["Clock", "utc_now"]
