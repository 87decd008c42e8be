"""Per-ETF holdings breakdown and securities reached through several funds."""

from typing import Dict, List, Optional

from exposure_src.models import (
    BreakdownHolding,
    EtfBreakdown,
    Holding,
    SharedSecurity,
)
from exposure_src.utils.logging_config import get_logger

from .canonical import TickerCanonicalizer
from .constituents import (
    ConstituentTable,
    canonical_weights,
    has_look_through,
    normalize_constituent_table,
)

logger = get_logger(__name__)


def compute_etf_breakdown(
    holdings: List[Holding],
    etf_constituents: Optional[ConstituentTable],
    canonicalizer: Optional[TickerCanonicalizer] = None,
) -> List[EtfBreakdown]:
    """
    Show what each held fund contributes, constituent by constituent.

    Share classes of one company are merged into a single line whose
    weight and value are the sums of the listed classes.

    The undisclosed part of a fund (100 minus its disclosed weight) is
    reported as unknown_exposure_value rather than spread over companies.

    Args:
        holdings: Portfolio snapshot
        etf_constituents: Fund ticker -> constituent rows
        canonicalizer: Alias merging (built-in table when None)

    Returns:
        One breakdown per held fund with constituent data, in holding order
    """
    if canonicalizer is None:
        canonicalizer = TickerCanonicalizer()
    table = normalize_constituent_table(etf_constituents)

    breakdowns: List[EtfBreakdown] = []
    for holding in holdings:
        if not has_look_through(table, holding.ticker):
            continue

        constituents = table[holding.ticker]
        disclosed = min(100.0, sum(c.weight_percent for c in constituents))
        dates = [c.as_of_date for c in constituents if c.as_of_date is not None]

        weights = canonical_weights(constituents, canonicalizer)
        names: Dict[str, Optional[str]] = {}
        for c in constituents:
            ticker = canonicalizer.canonicalize(c.symbol)
            if names.get(ticker) is None:
                names[ticker] = c.name

        lines = [
            BreakdownHolding(
                ticker=ticker,
                name=names.get(ticker),
                weight_pct=weight,
                exposure_value=holding.current_value * weight / 100,
            )
            for ticker, weight in weights.items()
        ]
        lines.sort(key=lambda line: line.weight_pct, reverse=True)

        breakdowns.append(
            EtfBreakdown(
                ticker=holding.ticker,
                value=holding.current_value,
                as_of_date=max(dates) if dates else None,
                total_holdings_percent=disclosed,
                unknown_exposure_value=holding.current_value * (100 - disclosed) / 100,
                holdings=lines,
            )
        )

    return breakdowns


def find_shared_securities(
    holdings: List[Holding],
    etf_constituents: Optional[ConstituentTable],
    canonicalizer: Optional[TickerCanonicalizer] = None,
    min_etf_count: int = 2,
) -> List[SharedSecurity]:
    """
    Find companies held through at least `min_etf_count` different funds.

    This is the hidden concentration a per-fund view misses: the same
    company bought several times over via overlapping funds.

    Returns:
        Shared securities, most funds first, then largest value
    """
    if canonicalizer is None:
        canonicalizer = TickerCanonicalizer()
    table = normalize_constituent_table(etf_constituents)

    etfs_by_ticker: Dict[str, List[str]] = {}
    value_by_ticker: Dict[str, float] = {}

    for holding in holdings:
        if not has_look_through(table, holding.ticker):
            continue
        for c in table[holding.ticker]:
            ticker = canonicalizer.canonicalize(c.symbol)
            funds = etfs_by_ticker.setdefault(ticker, [])
            if holding.ticker not in funds:
                funds.append(holding.ticker)
            value_by_ticker[ticker] = (
                value_by_ticker.get(ticker, 0.0)
                + holding.current_value * c.weight_percent / 100
            )

    shared = [
        SharedSecurity(
            ticker=ticker,
            etf_count=len(funds),
            etfs=funds,
            total_value=value_by_ticker[ticker],
        )
        for ticker, funds in etfs_by_ticker.items()
        if len(funds) >= min_etf_count
    ]
    shared.sort(key=lambda s: (s.etf_count, s.total_value), reverse=True)

    if shared:
        logger.info(f"{len(shared)} securities are held through multiple ETFs.")
    return shared
