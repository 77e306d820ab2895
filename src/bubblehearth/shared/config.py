"""Battle.net クライアントが利用する設定ローダー。"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bubblehearth.core.localization import Locale
from bubblehearth.core.regionality import DEFAULT_NAMESPACE_PREFIX, AccountRegion

from .exceptions import ConfigurationError

EnvName = Literal["local", "test", "staging", "production"]

DEFAULT_TIMEOUT_SECONDS = 5.0


class BattleNetSettings(BaseModel):
    """Battle.net 開発者ポータルで発行される資格情報と接続設定。"""

    client_id: str = Field(..., description="Battle.net API client id")
    client_secret: SecretStr = Field(..., description="Battle.net API client secret")
    region: AccountRegion = Field(AccountRegion.US, description="接続先リージョン")
    locale: Locale | None = Field(
        Locale.EN_US,
        description="locale クエリパラメータ。未指定なら全ロケールのマップを受け取る",
    )
    timeout_seconds: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP リクエストのタイムアウト秒数",
    )
    namespace_prefix: str = Field(
        DEFAULT_NAMESPACE_PREFIX,
        min_length=1,
        description="Battlenet-Namespace ヘッダーの接頭辞",
    )


class AppSettings(BaseSettings):
    """共有設定。`.env` 読み込みと環境変数バリデーションを担う。"""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: EnvName = Field("local", description="実行環境識別子")
    log_level: str = Field("INFO", description="ルートロガーのログレベル")
    battlenet: BattleNetSettings

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in logging.getLevelNamesMapping():
            msg = f"Unsupported log level: {value}"
            raise ValueError(msg)
        return normalized

    @property
    def json_logs(self) -> bool:
        """本番系の環境ではログを JSON で出力する。"""

        return self.environment in ("staging", "production")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """設定をロードし、再利用する。

    `pytest` などから `get_settings.cache_clear()` を呼び出すことで再読込できる。
    """

    try:
        return AppSettings()
    except ValidationError as exc:  # pragma: no cover - ValidationError carries context
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "AppSettings",
    "BattleNetSettings",
    "DEFAULT_TIMEOUT_SECONDS",
    "EnvName",
    "get_settings",
]
