"""World of Warcraft Classic 向け infra 層パッケージ。"""

from .connector import WorldOfWarcraftClassicConnector
from .dto import Realm, RealmRegion, RealmsIndex, RealmType, Region, RegionsIndex, Timezone

__all__ = [
    "Realm",
    "RealmRegion",
    "RealmType",
    "RealmsIndex",
    "Region",
    "RegionsIndex",
    "Timezone",
    "WorldOfWarcraftClassicConnector",
]
