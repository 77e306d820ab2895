"""共通例外。"""

from __future__ import annotations


class BaseAppError(Exception):
    """全レイヤで共有するベース例外。"""

    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(BaseAppError):
    """設定読み込みや不足を示すエラー。"""

    default_message = "Configuration is invalid or missing"


class DecodeError(BaseAppError):
    """JSON 値が期待する形に一致しなかったことを示すエラー。

    `field` と `kind` に、どのフィールドがどの JSON 種別だったかを保持する。
    """

    default_message = "Payload did not match the expected shape"

    def __init__(
        self,
        message: str | None = None,
        *,
        field: str | None = None,
        kind: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.kind = kind


__all__ = [
    "BaseAppError",
    "ConfigurationError",
    "DecodeError",
]
