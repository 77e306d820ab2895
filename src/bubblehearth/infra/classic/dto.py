"""World of Warcraft Classic の realm / region レスポンス DTO。"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from bubblehearth.core.localization import LocalizedText
from bubblehearth.infra.battlenet.dto import DocumentKey, Links


class Timezone(str, Enum):
    """realm 検索で指定できるタイムゾーン。"""

    AMERICA_LOS_ANGELES = "America/Los_Angeles"
    AMERICA_NEW_YORK = "America/New_York"


class _ClassicModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RealmRegion(_ClassicModel):
    key: DocumentKey | None = None
    name: LocalizedText
    id: int


class RealmType(_ClassicModel):
    """Normal / PvP / RP などの realm 種別。"""

    realm_type: str = Field(..., alias="type")
    name: LocalizedText


class Realm(_ClassicModel):
    """realm のメタデータ。"""

    links: Links | None = Field(None, alias="_links")
    key: DocumentKey | None = None
    id: int
    slug: str
    name: LocalizedText
    category: LocalizedText | None = None
    locale: str | None = None
    timezone: Timezone | None = None
    is_tournament: bool | None = None
    region: RealmRegion | None = None
    realm_type: RealmType | None = Field(None, alias="type")


class RealmsIndex(_ClassicModel):
    links: Links = Field(..., alias="_links")
    realms: list[Realm] = Field(default_factory=list)


class Region(_ClassicModel):
    href: str | None = None
    id: int | None = None
    name: LocalizedText | None = None
    tag: str | None = None


class RegionsIndex(_ClassicModel):
    """region index のレスポンス。各 region は詳細取得用のリンクのみを持つ。"""

    links: Links = Field(..., alias="_links")
    regions: list[DocumentKey] = Field(default_factory=list)


__all__ = [
    "Realm",
    "RealmRegion",
    "RealmType",
    "RealmsIndex",
    "Region",
    "RegionsIndex",
    "Timezone",
]
