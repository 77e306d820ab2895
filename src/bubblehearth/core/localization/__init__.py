"""ロケールとローカライズ済みフィールドのドメインパッケージ。"""

from .locales import SUPPORTED_LOCALE_CODES, Locale
from .values import (
    LocaleValue,
    LocalizedText,
    PerLocale,
    PlainLocale,
    UnexpectedLocaleShapeError,
    decode_locale_value,
)

__all__ = [
    "Locale",
    "LocaleValue",
    "LocalizedText",
    "PerLocale",
    "PlainLocale",
    "SUPPORTED_LOCALE_CODES",
    "UnexpectedLocaleShapeError",
    "decode_locale_value",
]
