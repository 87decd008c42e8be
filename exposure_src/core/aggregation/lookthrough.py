"""Look-through exposure: direct holdings plus ETF-implied holdings."""

from typing import Dict, List, Optional

from exposure_src.models import ExposureEntry, ExposureSource, Holding
from exposure_src.utils.logging_config import get_logger

from .canonical import TickerCanonicalizer
from .constituents import ConstituentTable, has_look_through, normalize_constituent_table

logger = get_logger(__name__)


class _ExposureAccumulator:
    """Collects exposure sources per canonical ticker in first-seen order."""

    def __init__(self) -> None:
        self._sources: Dict[str, List[ExposureSource]] = {}

    def add(self, ticker: str, source: ExposureSource) -> None:
        self._sources.setdefault(ticker, []).append(source)

    def to_entries(self) -> List[ExposureEntry]:
        totals = {t: sum(s.value for s in srcs) for t, srcs in self._sources.items()}
        grand_total = sum(totals.values())
        if grand_total <= 0:
            return []

        entries = [
            ExposureEntry(
                ticker=ticker,
                total_exposure_value=totals[ticker],
                exposure_percent=totals[ticker] / grand_total * 100,
                sources=sources,
            )
            for ticker, sources in self._sources.items()
        ]
        entries.sort(key=lambda e: e.exposure_percent, reverse=True)
        return entries


def compute_exposure(
    holdings: List[Holding],
    etf_constituents: Optional[ConstituentTable],
    canonicalizer: Optional[TickerCanonicalizer] = None,
) -> List[ExposureEntry]:
    """
    Combine direct and ETF-implied value per underlying company.

    ETF holdings are not counted as exposure to themselves; their value is
    spread over their constituents by weight. The undisclosed remainder of
    a fund is dropped, never invented. An ETF without constituent data is
    opaque and is recorded as direct exposure under its own ticker.

    Args:
        holdings: Portfolio snapshot
        etf_constituents: Fund ticker -> constituent rows
        canonicalizer: Alias merging (built-in table when None)

    Returns:
        Full exposure list sorted by exposure_percent, largest first.
        Use top_exposures() to truncate for display.
    """
    if canonicalizer is None:
        canonicalizer = TickerCanonicalizer()
    table = normalize_constituent_table(etf_constituents)

    if not holdings:
        logger.warning("No holdings found. Nothing to aggregate.")
        return []

    exposures = _ExposureAccumulator()
    direct_count = 0
    etf_count = 0
    opaque: List[str] = []

    for holding in holdings:
        if has_look_through(table, holding.ticker):
            etf_count += 1
            for c in table[holding.ticker]:
                exposures.add(
                    canonicalizer.canonicalize(c.symbol),
                    ExposureSource(
                        source="etf",
                        etf=holding.ticker,
                        value=holding.current_value * c.weight_percent / 100,
                    ),
                )
            continue

        if holding.ticker in table:
            opaque.append(holding.ticker)
        direct_count += 1
        exposures.add(
            canonicalizer.canonicalize(holding.ticker),
            ExposureSource(source="direct", value=holding.current_value),
        )

    if opaque:
        logger.warning(
            f"No constituents for {len(opaque)} ETF(s) ({', '.join(opaque)}); "
            "treating them as direct holdings."
        )

    entries = exposures.to_entries()
    logger.info(
        f"Look-through complete: {direct_count} direct, {etf_count} ETF holdings "
        f"-> {len(entries)} unique exposures"
    )
    return entries


def top_exposures(entries: List[ExposureEntry], limit: int = 20) -> List[ExposureEntry]:
    """First `limit` entries of an already sorted exposure list."""
    if limit <= 0:
        return []
    return list(entries[:limit])
