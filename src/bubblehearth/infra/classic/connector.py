"""World of Warcraft Classic Game Data API のコネクタ。"""

from __future__ import annotations

from typing import Any

from bubblehearth.infra.battlenet import BattleNetClient, SearchResult

from .dto import Realm, RealmsIndex, Region, RegionsIndex, Timezone


class WorldOfWarcraftClassicConnector:
    """共通クライアントの認証とリクエスト送信を利用する Classic 向けコネクタ。"""

    def __init__(self, client: BattleNetClient) -> None:
        self._client = client

    async def get_realms(self, *, all_locales: bool = False) -> RealmsIndex:
        return await self._client.get(
            "/data/wow/realm/index", RealmsIndex, all_locales=all_locales
        )

    async def get_realm(self, slug: str, *, all_locales: bool = False) -> Realm | None:
        """slug で realm を取得する。存在しない場合は None。"""

        return await self._client.get_optional(
            f"/data/wow/realm/{slug}", Realm, all_locales=all_locales
        )

    async def search_realms(
        self,
        *,
        timezone: Timezone | None = None,
        order_by: str | None = None,
        page: int | None = None,
    ) -> SearchResult[Realm]:
        """realm を検索する。1 回の呼び出しで 1 ページのみ取得する。"""

        params: dict[str, Any] = {"_page": page or 1}
        if timezone is not None:
            params["timezone"] = Timezone(timezone).value
        if order_by:
            params["orderby"] = order_by
        return await self._client.get(
            "/data/wow/search/realm",
            SearchResult[Realm],
            params=params,
            all_locales=True,
        )

    async def get_regions(self) -> RegionsIndex:
        return await self._client.get("/data/wow/region/index", RegionsIndex)

    async def get_region(self, region_id: int) -> Region | None:
        return await self._client.get_optional(f"/data/wow/region/{region_id}", Region)


__all__ = ["WorldOfWarcraftClassicConnector"]
