"""shared.config の読み込みと失敗ケースを確認するテスト。"""

from __future__ import annotations

import pytest

from bubblehearth.core.localization import Locale
from bubblehearth.core.regionality import AccountRegion
from bubblehearth.shared.config import get_settings
from bubblehearth.shared.exceptions import ConfigurationError

BATTLENET_KEYS = (
    "BATTLENET__CLIENT_ID",
    "BATTLENET__CLIENT_SECRET",
    "BATTLENET__REGION",
    "BATTLENET__LOCALE",
    "BATTLENET__TIMEOUT_SECONDS",
    "BATTLENET__NAMESPACE_PREFIX",
    "ENVIRONMENT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _cleanup_cache(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in BATTLENET_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_fail_when_env_missing() -> None:
    """必須環境変数が欠けている場合 ConfigurationError が発生する。"""

    with pytest.raises(ConfigurationError):
        get_settings()


def test_settings_load_defaults_from_nested_env(monkeypatch) -> None:
    monkeypatch.setenv("BATTLENET__CLIENT_ID", "cid")
    monkeypatch.setenv("BATTLENET__CLIENT_SECRET", "secret")

    settings = get_settings()

    assert settings.battlenet.client_id == "cid"
    assert settings.battlenet.client_secret.get_secret_value() == "secret"
    assert settings.battlenet.region is AccountRegion.US
    assert settings.battlenet.locale is Locale.EN_US
    assert settings.battlenet.timeout_seconds == 5.0
    assert settings.battlenet.namespace_prefix == "dynamic-classic"


def test_settings_override_region_and_locale(monkeypatch) -> None:
    """リージョン・ロケール・タイムアウトを環境変数で上書きできる。"""

    monkeypatch.setenv("BATTLENET__CLIENT_ID", "cid")
    monkeypatch.setenv("BATTLENET__CLIENT_SECRET", "secret")
    monkeypatch.setenv("BATTLENET__REGION", "kr")
    monkeypatch.setenv("BATTLENET__LOCALE", "ko_KR")
    monkeypatch.setenv("BATTLENET__TIMEOUT_SECONDS", "12.5")

    settings = get_settings()

    assert settings.battlenet.region is AccountRegion.KR
    assert settings.battlenet.locale is Locale.KO_KR
    assert settings.battlenet.timeout_seconds == 12.5


def test_settings_reject_unknown_region(monkeypatch) -> None:
    monkeypatch.setenv("BATTLENET__CLIENT_ID", "cid")
    monkeypatch.setenv("BATTLENET__CLIENT_SECRET", "secret")
    monkeypatch.setenv("BATTLENET__REGION", "mars")

    with pytest.raises(ConfigurationError):
        get_settings()


def test_settings_normalize_log_level_and_environment(monkeypatch) -> None:
    monkeypatch.setenv("BATTLENET__CLIENT_ID", "cid")
    monkeypatch.setenv("BATTLENET__CLIENT_SECRET", "secret")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENVIRONMENT", "staging")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True


def test_settings_default_to_console_logs(monkeypatch) -> None:
    monkeypatch.setenv("BATTLENET__CLIENT_ID", "cid")
    monkeypatch.setenv("BATTLENET__CLIENT_SECRET", "secret")

    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.json_logs is False


def test_settings_reject_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("BATTLENET__CLIENT_ID", "cid")
    monkeypatch.setenv("BATTLENET__CLIENT_SECRET", "secret")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        get_settings()
