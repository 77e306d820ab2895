"""ローカライズ対象フィールドのデコードを検証する。"""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, ValidationError

from bubblehearth.core.localization import (
    Locale,
    LocalizedText,
    PerLocale,
    PlainLocale,
    UnexpectedLocaleShapeError,
    decode_locale_value,
)
from bubblehearth.shared.exceptions import DecodeError

ATIESH_BY_LOCALE = {
    "en_US": "Atiesh",
    "en_GB": "Atiesh",
    "es_MX": "Atiesh",
    "es_ES": "Atiesh",
    "pt_BR": "Atiesh",
    "de_DE": "Atiesh",
    "fr_FR": "Atiesh",
    "it_IT": "Atiesh",
    "ru_RU": "Атиеш",
    "ko_KR": "아티쉬",
    "zh_TW": "埃提耶什",
    "zh_CN": "埃提耶什",
}


def test_string_decodes_to_plain() -> None:
    assert decode_locale_value(json.loads('"Atiesh"')) == PlainLocale("Atiesh")


def test_object_decodes_to_per_locale_with_all_keys() -> None:
    value = decode_locale_value(json.loads(json.dumps(ATIESH_BY_LOCALE)))

    assert isinstance(value, PerLocale)
    assert value.to_codes() == ATIESH_BY_LOCALE
    assert set(value.values) == set(Locale)
    assert value.resolve(Locale.ZH_CN) == "埃提耶什"


def test_partial_object_is_accepted() -> None:
    value = decode_locale_value({"en_US": "Atiesh"})

    assert value == PerLocale({Locale.EN_US: "Atiesh"})
    assert value.resolve(Locale.DE_DE) is None


@pytest.mark.parametrize(
    "raw, kind",
    [(42, "number"), ([], "array"), (True, "boolean"), (None, "null"), (1.5, "number")],
)
def test_other_json_kinds_are_rejected(raw: object, kind: str) -> None:
    with pytest.raises(UnexpectedLocaleShapeError) as exc_info:
        decode_locale_value(raw, field="name")

    assert exc_info.value.kind == kind
    assert exc_info.value.field == "name"
    assert isinstance(exc_info.value, DecodeError)


def test_unknown_locale_key_is_rejected() -> None:
    with pytest.raises(UnexpectedLocaleShapeError, match="xx_XX"):
        decode_locale_value({"en_US": "Atiesh", "xx_XX": "???"})


def test_non_string_locale_value_is_rejected() -> None:
    with pytest.raises(UnexpectedLocaleShapeError) as exc_info:
        decode_locale_value({"en_US": 1})

    assert exc_info.value.kind == "number"


def test_plain_resolve_ignores_locale() -> None:
    assert PlainLocale("소금 평원").resolve(Locale.EN_US) == "소금 평원"


def test_per_locale_is_an_immutable_hashable_value() -> None:
    source = {Locale.EN_US: "Atiesh"}
    value = PerLocale(source)

    source[Locale.KO_KR] = "아티쉬"

    assert value.resolve(Locale.KO_KR) is None
    assert hash(value) == hash(PerLocale({Locale.EN_US: "Atiesh"}))
    assert {value, PerLocale({Locale.EN_US: "Atiesh"})} == {value}
    with pytest.raises(TypeError):
        value.values[Locale.DE_DE] = "Atiesh"  # type: ignore[index]


class _Named(BaseModel):
    name: LocalizedText


def test_localized_text_in_model_accepts_both_shapes() -> None:
    plain = _Named.model_validate({"name": "Atiesh"})
    per_locale = _Named.model_validate({"name": {"en_US": "Atiesh", "ko_KR": "아티쉬"}})

    assert plain.name == PlainLocale("Atiesh")
    assert isinstance(per_locale.name, PerLocale)
    assert per_locale.model_dump(mode="json") == {
        "name": {"en_US": "Atiesh", "ko_KR": "아티쉬"}
    }
    assert plain.model_dump(mode="json") == {"name": "Atiesh"}


def test_localized_text_in_model_rejects_other_kinds() -> None:
    with pytest.raises(ValidationError):
        _Named.model_validate({"name": 42})
