"""Battle.net API 共通のレスポンス DTO。"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class AccessTokenResponse(BaseModel):
    """トークンエンドポイントのレスポンス。"""

    access_token: str
    token_type: str
    expires_in: int = Field(..., ge=0, description="有効期限までの秒数 (通常 1 日)")
    sub: str
    scope: str | None = None


class DocumentKey(BaseModel):
    """ドキュメントへのリンク。"""

    href: str


class Links(BaseModel):
    """`_links` に含まれる自己参照リンク。"""

    model_config = ConfigDict(populate_by_name=True)

    self_ref: DocumentKey = Field(..., alias="self")


class SearchResultItem(BaseModel, Generic[T]):
    key: DocumentKey
    data: T


class SearchResult(BaseModel, Generic[T]):
    """検索 API のページ単位の結果。ページ送りは呼び出し側が行う。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    page_size: int
    max_page_size: int
    page_count: int
    results: list[SearchResultItem[T]] = Field(default_factory=list)


__all__ = [
    "AccessTokenResponse",
    "DocumentKey",
    "Links",
    "SearchResult",
    "SearchResultItem",
]
