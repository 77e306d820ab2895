"""Battle.net OAuth2 (client credentials) によるアクセストークン取得とキャッシュ。"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta

import httpx
from pydantic import ValidationError

from bubblehearth.shared.exceptions import BaseAppError
from bubblehearth.shared.logging import get_logger
from bubblehearth.shared.types import Clock, utc_now

from .dto import AccessTokenResponse


class BattleNetClientError(BaseAppError):
    """Battle.net クライアント共通の例外。"""


class BattleNetAuthError(BattleNetClientError):
    """トークン交換に失敗した。"""

    default_message = "Battle.net token exchange failed"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True, frozen=True)
class ClientCredentials:
    """開発者ポータルで発行されたクライアント ID とシークレット。"""

    client_id: str
    client_secret: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class AccessToken:
    """Battle.net API へアクセスするためのアクセストークン。"""

    access_token: str = field(repr=False)
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        return self.expires_at > now


class AccessTokenCache:
    """現在のアクセストークンを保持するスレッドセーフなセル。

    ロック中に行うのは参照の読み書きのみで、ネットワーク I/O は行わない。
    期限切れのトークンは返さない。
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._token: AccessToken | None = None

    def try_current(self) -> AccessToken | None:
        with self._lock:
            token = self._token
        if token is None or not token.is_valid(self._clock()):
            return None
        return token

    def store(self, token: AccessToken) -> None:
        with self._lock:
            self._token = token

    def clear(self) -> None:
        with self._lock:
            self._token = None


class BattleNetOAuthClient:
    """client credentials フローでトークンエンドポイントと通信するクライアント。

    取得したトークンをキャッシュへ書き込むのは呼び出し側の責務。
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        clock: Clock | None = None,
        logger=None,
    ) -> None:
        self._http = http_client
        self._clock = clock or utc_now
        self._logger = logger or get_logger(__name__)

    async def acquire(self, credentials: ClientCredentials, token_endpoint: str) -> AccessToken:
        try:
            response = await self._http.post(
                token_endpoint,
                files={"grant_type": (None, b"client_credentials")},
                auth=httpx.BasicAuth(credentials.client_id, credentials.client_secret),
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            self._logger.error(
                "battlenet_token_request_failed",
                token_endpoint=token_endpoint,
                message=str(exc),
            )
            msg = f"Token request to {token_endpoint} failed"
            raise BattleNetAuthError(msg) from exc

        if not response.is_success:
            self._logger.error(
                "battlenet_token_request_failed",
                token_endpoint=token_endpoint,
                status_code=response.status_code,
            )
            msg = f"Token request was rejected (status={response.status_code})"
            raise BattleNetAuthError(msg, status_code=response.status_code)

        acquired_at = self._clock()
        try:
            payload = AccessTokenResponse.model_validate_json(response.content)
        except ValidationError as exc:
            msg = "Token response did not match the expected shape"
            raise BattleNetAuthError(msg, status_code=response.status_code) from exc

        try:
            expires_at = acquired_at + timedelta(seconds=payload.expires_in)
        except OverflowError as exc:
            self._logger.error(
                "battlenet_token_request_failed",
                token_endpoint=token_endpoint,
                expires_in=payload.expires_in,
            )
            msg = f"Token lifetime is out of range (expires_in={payload.expires_in})"
            raise BattleNetAuthError(msg, status_code=response.status_code) from exc

        self._logger.info(
            "battlenet_token_acquired",
            token_endpoint=token_endpoint,
            token_type=payload.token_type,
            expires_at=expires_at.isoformat(),
        )
        return AccessToken(access_token=payload.access_token, expires_at=expires_at)


__all__ = [
    "AccessToken",
    "AccessTokenCache",
    "BattleNetAuthError",
    "BattleNetClientError",
    "BattleNetOAuthClient",
    "ClientCredentials",
]
