"""Battle.net Game Data API への認証付きリクエストを組み立てて送信するクライアント。"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from bubblehearth.core.localization import Locale
from bubblehearth.core.regionality import (
    DEFAULT_NAMESPACE_PREFIX,
    REGION_ENDPOINTS,
    AccountRegion,
    api_base_url,
    namespace,
    token_endpoint,
)
from bubblehearth.shared.config import DEFAULT_TIMEOUT_SECONDS, AppSettings, get_settings
from bubblehearth.shared.exceptions import DecodeError
from bubblehearth.shared.logging import get_logger
from bubblehearth.shared.types import Clock, utc_now

from .oauth import (
    AccessTokenCache,
    BattleNetClientError,
    BattleNetOAuthClient,
    ClientCredentials,
)

T = TypeVar("T")

NAMESPACE_HEADER = "Battlenet-Namespace"


class BattleNetRequestError(BattleNetClientError):
    """リソース取得の HTTP エラー、または通信エラー。"""

    default_message = "Battle.net API request failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class BattleNetDecodeError(BattleNetClientError, DecodeError):
    """レスポンスボディが期待する型にデコードできなかった。"""

    default_message = "Battle.net API response could not be decoded"

    def __init__(
        self,
        message: str | None = None,
        *,
        url: str | None = None,
        field: str | None = None,
        kind: str | None = None,
    ) -> None:
        super().__init__(message, field=field, kind=kind)
        self.url = url


@lru_cache(maxsize=128)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _normalize_path(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


class BattleNetClient:
    """トークンの取得・再利用とリクエスト送信、結果の分類を担うクライアント。

    リージョンとロケールは構築時の値を既定とし、呼び出し毎に上書きできる。
    トークンはトークンエンドポイント単位でキャッシュされるため、
    CN とグローバルのトークンが混ざることはない。

    キャッシュが空または期限切れの状態で複数のリクエストが同時に走った場合、
    それぞれがトークン交換を行うことがある。どの結果を保存しても正しく動作し、
    最後に保存したものが残る。
    """

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        region: AccountRegion = AccountRegion.US,
        locale: Locale | None = Locale.EN_US,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX,
        http_client: httpx.AsyncClient | None = None,
        clock: Clock | None = None,
        logger=None,
    ) -> None:
        self._credentials = ClientCredentials(client_id=client_id, client_secret=client_secret)
        self.region = AccountRegion(region)
        self.locale = Locale(locale) if locale is not None else None
        self._namespace_prefix = namespace_prefix
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)
        self._clock = clock or utc_now
        self._logger = logger or get_logger(__name__)
        self._oauth = BattleNetOAuthClient(
            http_client=self._http,
            clock=self._clock,
            logger=self._logger,
        )
        self._token_caches = {
            endpoints.token_endpoint: AccessTokenCache(clock=self._clock)
            for endpoints in REGION_ENDPOINTS.values()
        }

    async def __aenter__(self) -> BattleNetClient:
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def token_cache(self, region: AccountRegion | None = None) -> AccessTokenCache:
        """リージョンが利用するトークンキャッシュを返す。"""

        return self._token_caches[token_endpoint(self._resolve_region(region))]

    async def get_access_token(self, region: AccountRegion | None = None) -> str:
        """有効なアクセストークンを返す。キャッシュが無効な場合のみトークン交換を行う。"""

        target_region = self._resolve_region(region)
        endpoint = token_endpoint(target_region)
        cache = self._token_caches[endpoint]

        cached = cache.try_current()
        if cached is not None:
            self._logger.debug("battlenet_token_cache_hit", region=target_region.value)
            return cached.access_token

        token = await self._oauth.acquire(self._credentials, endpoint)
        cache.store(token)
        return token.access_token

    async def get(
        self,
        path: str,
        response_type: type[T],
        *,
        region: AccountRegion | None = None,
        locale: Locale | None = None,
        all_locales: bool = False,
        params: Mapping[str, Any] | None = None,
    ) -> T:
        """リソースを取得し `response_type` にデコードして返す。

        Raises:
            BattleNetAuthError: トークン交換に失敗した場合。
            BattleNetRequestError: 2xx 以外 (404 を含む) または通信エラーの場合。
            BattleNetDecodeError: ボディが `response_type` に一致しない場合。
        """

        response = await self._send(
            path, region=region, locale=locale, all_locales=all_locales, params=params
        )
        if not response.is_success:
            raise self._request_error(response)
        return self._decode(response, response_type)

    async def get_optional(
        self,
        path: str,
        response_type: type[T],
        *,
        region: AccountRegion | None = None,
        locale: Locale | None = None,
        all_locales: bool = False,
        params: Mapping[str, Any] | None = None,
    ) -> T | None:
        """`get` と同様だが、404 の場合は例外ではなく None を返す。"""

        response = await self._send(
            path, region=region, locale=locale, all_locales=all_locales, params=params
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            self._logger.info("battlenet_resource_not_found", url=str(response.request.url))
            return None
        if not response.is_success:
            raise self._request_error(response)
        return self._decode(response, response_type)

    def _resolve_region(self, region: AccountRegion | None) -> AccountRegion:
        return AccountRegion(region) if region is not None else self.region

    async def _send(
        self,
        path: str,
        *,
        region: AccountRegion | None,
        locale: Locale | None,
        all_locales: bool,
        params: Mapping[str, Any] | None,
    ) -> httpx.Response:
        target_region = self._resolve_region(region)
        access_token = await self.get_access_token(target_region)

        url = f"{api_base_url(target_region)}{_normalize_path(path)}"
        query: dict[str, Any] = dict(params or {})
        target_locale = None if all_locales else (locale or self.locale)
        if target_locale is not None:
            query["locale"] = Locale(target_locale).value
        headers = {
            NAMESPACE_HEADER: namespace(target_region, self._namespace_prefix),
            "Authorization": f"Bearer {access_token}",
        }

        self._logger.debug(
            "battlenet_request",
            url=url,
            region=target_region.value,
            locale=query.get("locale"),
        )
        try:
            return await self._http.get(url, params=query, headers=headers)
        except httpx.HTTPError as exc:
            self._logger.error("battlenet_request_failed", url=url, message=str(exc))
            msg = f"Battle.net API request to {url} failed"
            raise BattleNetRequestError(msg, url=url) from exc

    def _request_error(self, response: httpx.Response) -> BattleNetRequestError:
        url = str(response.request.url)
        body = response.text
        self._logger.error(
            "battlenet_request_failed",
            url=url,
            status_code=response.status_code,
            body=body.strip()[:200] if body else None,
        )
        msg = f"Battle.net API request failed (status={response.status_code})"
        return BattleNetRequestError(msg, status_code=response.status_code, url=url)

    def _decode(self, response: httpx.Response, response_type: type[T]) -> T:
        url = str(response.request.url)
        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"Response body from {url} is not valid JSON"
            raise BattleNetDecodeError(msg, url=url, kind="body") from exc

        try:
            return _type_adapter(response_type).validate_python(payload)
        except ValidationError as exc:
            errors = exc.errors()
            field = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
            kind = errors[0]["type"] if errors else None
            type_name = getattr(response_type, "__name__", repr(response_type))
            msg = f"Response from {url} did not match {type_name}"
            raise BattleNetDecodeError(msg, url=url, field=field or None, kind=kind) from exc


def build_battlenet_client(
    *,
    settings: AppSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
    logger=None,
) -> BattleNetClient:
    """共有設定から Battle.net クライアントを構築するファクトリ。"""

    app_settings = settings or get_settings()
    battlenet_settings = app_settings.battlenet
    return BattleNetClient(
        client_id=battlenet_settings.client_id,
        client_secret=battlenet_settings.client_secret.get_secret_value(),
        region=battlenet_settings.region,
        locale=battlenet_settings.locale,
        timeout=battlenet_settings.timeout_seconds,
        namespace_prefix=battlenet_settings.namespace_prefix,
        http_client=http_client,
        logger=logger,
    )


__all__ = [
    "BattleNetClient",
    "BattleNetDecodeError",
    "BattleNetRequestError",
    "NAMESPACE_HEADER",
    "build_battlenet_client",
]
