"""Blizzard API がサポートするロケール。"""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """`locale` クエリパラメータおよびローカライズ済みマップのキーとなるロケールコード。"""

    EN_US = "en_US"
    EN_GB = "en_GB"
    ES_MX = "es_MX"
    ES_ES = "es_ES"
    PT_BR = "pt_BR"
    DE_DE = "de_DE"
    FR_FR = "fr_FR"
    IT_IT = "it_IT"
    RU_RU = "ru_RU"
    KO_KR = "ko_KR"
    ZH_TW = "zh_TW"
    ZH_CN = "zh_CN"

    @property
    def code(self) -> str:
        return self.value


SUPPORTED_LOCALE_CODES: frozenset[str] = frozenset(locale.value for locale in Locale)


__all__ = ["Locale", "SUPPORTED_LOCALE_CODES"]
