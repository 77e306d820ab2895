"""Battle.net API 向け infra 層パッケージ。"""

from .client import (
    NAMESPACE_HEADER,
    BattleNetClient,
    BattleNetDecodeError,
    BattleNetRequestError,
    build_battlenet_client,
)
from .dto import AccessTokenResponse, DocumentKey, Links, SearchResult, SearchResultItem
from .oauth import (
    AccessToken,
    AccessTokenCache,
    BattleNetAuthError,
    BattleNetClientError,
    BattleNetOAuthClient,
    ClientCredentials,
)

__all__ = [
    "AccessToken",
    "AccessTokenCache",
    "AccessTokenResponse",
    "BattleNetAuthError",
    "BattleNetClient",
    "BattleNetClientError",
    "BattleNetDecodeError",
    "BattleNetOAuthClient",
    "BattleNetRequestError",
    "ClientCredentials",
    "DocumentKey",
    "Links",
    "NAMESPACE_HEADER",
    "SearchResult",
    "SearchResultItem",
    "build_battlenet_client",
]
