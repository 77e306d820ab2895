"""リージョンごとの OAuth エンドポイント・API ホスト・名前空間の解決。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

GLOBAL_AUTHORIZE_ENDPOINT = "https://oauth.battle.net/authorize"
GLOBAL_TOKEN_ENDPOINT = "https://oauth.battle.net/token"
CN_AUTHORIZE_ENDPOINT = "https://oauth.battlenet.com.cn/authorize"
CN_TOKEN_ENDPOINT = "https://oauth.battlenet.com.cn/token"

API_BASE_URL_TEMPLATE = "https://{prefix}.api.blizzard.com"
DEFAULT_NAMESPACE_PREFIX = "dynamic-classic"


class AccountRegion(str, Enum):
    """Battle.net の API ゲートウェイに対応するリージョン。"""

    CN = "cn"
    US = "us"
    EU = "eu"
    KR = "kr"
    TW = "tw"


@dataclass(slots=True, frozen=True)
class RegionEndpoints:
    """リージョン 1 件分の接続先。"""

    token_endpoint: str
    authorize_endpoint: str
    host_prefix: str


_GLOBAL = (GLOBAL_TOKEN_ENDPOINT, GLOBAL_AUTHORIZE_ENDPOINT)
_CHINA = (CN_TOKEN_ENDPOINT, CN_AUTHORIZE_ENDPOINT)

REGION_ENDPOINTS: MappingProxyType[AccountRegion, RegionEndpoints] = MappingProxyType(
    {
        AccountRegion.CN: RegionEndpoints(*_CHINA, host_prefix="cn"),
        AccountRegion.US: RegionEndpoints(*_GLOBAL, host_prefix="us"),
        AccountRegion.EU: RegionEndpoints(*_GLOBAL, host_prefix="eu"),
        AccountRegion.KR: RegionEndpoints(*_GLOBAL, host_prefix="kr"),
        AccountRegion.TW: RegionEndpoints(*_GLOBAL, host_prefix="tw"),
    }
)


def resolve_region(region: AccountRegion) -> RegionEndpoints:
    """リージョンの接続先一式を返す。"""

    return REGION_ENDPOINTS[AccountRegion(region)]


def token_endpoint(region: AccountRegion) -> str:
    return resolve_region(region).token_endpoint


def authorize_endpoint(region: AccountRegion) -> str:
    return resolve_region(region).authorize_endpoint


def host_prefix(region: AccountRegion) -> str:
    return resolve_region(region).host_prefix


def api_base_url(region: AccountRegion) -> str:
    """`https://{prefix}.api.blizzard.com` 形式のベース URL を返す。"""

    return API_BASE_URL_TEMPLATE.format(prefix=host_prefix(region))


def namespace(region: AccountRegion, prefix: str = DEFAULT_NAMESPACE_PREFIX) -> str:
    """`Battlenet-Namespace` ヘッダー値を組み立てる (例: `dynamic-classic-us`)。

    リクエスト毎に計算し直し、キャッシュはしない。
    """

    return f"{prefix}-{host_prefix(region)}"


__all__ = [
    "API_BASE_URL_TEMPLATE",
    "AccountRegion",
    "CN_AUTHORIZE_ENDPOINT",
    "CN_TOKEN_ENDPOINT",
    "DEFAULT_NAMESPACE_PREFIX",
    "GLOBAL_AUTHORIZE_ENDPOINT",
    "GLOBAL_TOKEN_ENDPOINT",
    "REGION_ENDPOINTS",
    "RegionEndpoints",
    "api_base_url",
    "authorize_endpoint",
    "host_prefix",
    "namespace",
    "resolve_region",
    "token_endpoint",
]
