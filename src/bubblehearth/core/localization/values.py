"""文字列またはロケール別マップとして返るフィールドのデコード。

Blizzard API は `locale` を指定したリクエストではローカライズ済みの文字列を、
指定しないリクエストでは全ロケールをキーに持つオブジェクトを返す。
どちらのレスポンスも同じモデルで受け取れるよう、JSON の種別だけを見て
`PlainLocale` か `PerLocale` のいずれかに振り分ける。
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Annotated, Any, TypeAlias

from pydantic import PlainSerializer, PlainValidator

from bubblehearth.shared.exceptions import DecodeError

from .locales import SUPPORTED_LOCALE_CODES, Locale


class UnexpectedLocaleShapeError(DecodeError):
    """ローカライズ対象フィールドが文字列でもロケールマップでもなかった。"""

    default_message = "Localized field must be a string or a locale-keyed object"


@dataclass(slots=True, frozen=True)
class PlainLocale:
    """単一ロケールで返された文字列。"""

    value: str

    def resolve(self, locale: Locale | None = None) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class PerLocale:
    """ロケールコードをキーとした文字列マップ。"""

    values: Mapping[Locale, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    def resolve(self, locale: Locale) -> str | None:
        return self.values.get(Locale(locale))

    def to_codes(self) -> dict[str, str]:
        return {locale.value: text for locale, text in self.values.items()}


LocaleValue: TypeAlias = PlainLocale | PerLocale


def _json_kind(raw: Any) -> str:
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return "boolean"
    if isinstance(raw, (int, float)):
        return "number"
    if isinstance(raw, (list, tuple)):
        return "array"
    if isinstance(raw, str):
        return "string"
    if isinstance(raw, Mapping):
        return "object"
    return type(raw).__name__


def _describe(field_name: str | None) -> str:
    return f"`{field_name}`" if field_name else "localized field"


def _decode_per_locale(raw: Mapping[Any, Any], *, field_name: str | None) -> PerLocale:
    unknown = sorted(str(key) for key in raw if key not in SUPPORTED_LOCALE_CODES)
    if unknown:
        msg = f"{_describe(field_name)} contains unsupported locale keys: {', '.join(unknown)}"
        raise UnexpectedLocaleShapeError(msg, field=field_name, kind="object")

    values: dict[Locale, str] = {}
    for code, text in raw.items():
        if not isinstance(text, str):
            msg = (
                f"{_describe(field_name)} value for {code} must be a string "
                f"(got {_json_kind(text)})"
            )
            raise UnexpectedLocaleShapeError(msg, field=field_name, kind=_json_kind(text))
        values[Locale(code)] = text

    return PerLocale(values=values)


def decode_locale_value(raw: Any, *, field: str | None = None) -> LocaleValue:
    """JSON 値を `PlainLocale` / `PerLocale` にデコードする。

    Args:
        raw: `json.loads` 済みの値。
        field: エラーメッセージに含めるフィールド名。

    Raises:
        UnexpectedLocaleShapeError: 文字列でもオブジェクトでもない場合、
            またはオブジェクトに未知のロケールや文字列以外の値が含まれる場合。
    """

    if isinstance(raw, str):
        return PlainLocale(raw)
    if isinstance(raw, Mapping):
        return _decode_per_locale(raw, field_name=field)

    kind = _json_kind(raw)
    msg = f"{_describe(field)} must be a string or an object (got {kind})"
    raise UnexpectedLocaleShapeError(msg, field=field, kind=kind)


def _validate_locale_value(raw: Any) -> LocaleValue:
    if isinstance(raw, (PlainLocale, PerLocale)):
        return raw
    try:
        return decode_locale_value(raw)
    except UnexpectedLocaleShapeError as exc:
        raise ValueError(str(exc)) from exc


def _serialize_locale_value(value: LocaleValue) -> str | dict[str, str]:
    if isinstance(value, PlainLocale):
        return value.value
    return value.to_codes()


LocalizedText = Annotated[
    LocaleValue,
    PlainValidator(_validate_locale_value),
    PlainSerializer(_serialize_locale_value),
]


__all__ = [
    "LocaleValue",
    "LocalizedText",
    "PerLocale",
    "PlainLocale",
    "UnexpectedLocaleShapeError",
    "decode_locale_value",
]
