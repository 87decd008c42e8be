from .canonical_tickers import DEFAULT_CANONICAL_MAP
from .sector_map import DEFAULT_SECTOR_MAP, SECTOR_GROUPS, build_sector_map
from .tables import load_canonical_map, load_sector_map

__all__ = [
    "DEFAULT_CANONICAL_MAP",
    "DEFAULT_SECTOR_MAP",
    "SECTOR_GROUPS",
    "build_sector_map",
    "load_canonical_map",
    "load_sector_map",
]
