"""Sector resolution and portfolio-wide sector exposure."""

import math
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from exposure_src.data.sector_map import DEFAULT_SECTOR_MAP
from exposure_src.models import Holding, SectorExposure
from exposure_src.utils.logging_config import get_logger
from exposure_src.utils.tickers import normalize_ticker

from .canonical import TickerCanonicalizer

logger = get_logger(__name__)

OTHER_SECTOR = "Other"


class SectorResolver:
    """
    O(1) ticker -> sector lookup over an injected, read-only table.

    Unknown tickers resolve to "Other"; that is the defined default, not
    an error.
    """

    def __init__(
        self,
        sector_map: Optional[Mapping[str, str]] = None,
        canonicalizer: Optional[TickerCanonicalizer] = None,
    ):
        if sector_map is None:
            sector_map = DEFAULT_SECTOR_MAP
        self._sectors = MappingProxyType(
            {normalize_ticker(t): s for t, s in sector_map.items()}
        )
        self._canonicalizer = canonicalizer

    def resolve(self, ticker: str) -> str:
        """
        Resolve a ticker to its sector name.

        The lookup is case-insensitive. When the ticker itself is unknown
        and a canonicalizer was injected, the canonical ticker is tried
        before falling back to "Other".
        """
        key = normalize_ticker(ticker)
        if not key:
            return OTHER_SECTOR

        sector = self._sectors.get(key)
        if sector is None and self._canonicalizer is not None:
            sector = self._sectors.get(
                normalize_ticker(self._canonicalizer.canonicalize(key))
            )
        return sector if sector is not None else OTHER_SECTOR

    def __call__(self, ticker: str) -> str:
        return self.resolve(ticker)


_DEFAULT_RESOLVER = SectorResolver()


def resolve_sector(ticker: str, sector_map: Optional[Mapping[str, str]] = None) -> str:
    """Resolve a ticker against the given table, or the built-in one."""
    if sector_map is not None:
        return SectorResolver(sector_map).resolve(ticker)
    return _DEFAULT_RESOLVER.resolve(ticker)


def _percent_one_decimal(ratio: float) -> float:
    """Ratio as a percentage rounded half up to one decimal (0.0125 -> 1.3)."""
    return math.floor(ratio * 1000 + 0.5) / 10


def compute_sector_exposure(
    holdings: List[Holding], resolver: Optional[SectorResolver] = None
) -> List[SectorExposure]:
    """
    Sum market value per sector and normalize to percentages.

    Sectors are resolved on the raw holding ticker. Percentages carry one
    decimal place and are sorted descending; equal percentages keep the
    order in which their sector first appeared.

    Args:
        holdings: Portfolio snapshot
        resolver: Sector lookup (built-in table when None)

    Returns:
        Sector rows, or [] when the portfolio is empty or worth nothing
    """
    if resolver is None:
        resolver = _DEFAULT_RESOLVER

    total = sum(h.current_value for h in holdings)
    if total <= 0:
        logger.info("Portfolio total is zero; no sector exposure to report.")
        return []

    sector_values: Dict[str, float] = {}
    for h in holdings:
        sector = resolver.resolve(h.ticker)
        sector_values[sector] = sector_values.get(sector, 0.0) + h.current_value

    rows = [
        SectorExposure(
            sector=sector,
            exposure_percent=_percent_one_decimal(value / total),
        )
        for sector, value in sector_values.items()
    ]
    rows.sort(key=lambda r: r.exposure_percent, reverse=True)

    logger.info(f"Sector exposure computed across {len(rows)} sectors.")
    return rows
