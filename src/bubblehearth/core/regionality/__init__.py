"""リージョン解決のためのドメインパッケージ。"""

from .resolver import (
    API_BASE_URL_TEMPLATE,
    CN_AUTHORIZE_ENDPOINT,
    CN_TOKEN_ENDPOINT,
    DEFAULT_NAMESPACE_PREFIX,
    GLOBAL_AUTHORIZE_ENDPOINT,
    GLOBAL_TOKEN_ENDPOINT,
    REGION_ENDPOINTS,
    AccountRegion,
    RegionEndpoints,
    api_base_url,
    authorize_endpoint,
    host_prefix,
    namespace,
    resolve_region,
    token_endpoint,
)

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
