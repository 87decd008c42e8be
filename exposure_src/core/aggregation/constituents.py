"""Shared helpers over ETF constituent tables."""

from typing import Dict, List, Mapping, Optional, Sequence

from exposure_src.models import ETFConstituent
from exposure_src.utils.tickers import normalize_ticker

from .canonical import TickerCanonicalizer

ConstituentTable = Mapping[str, Sequence[ETFConstituent]]


def normalize_constituent_table(
    etf_constituents: Optional[ConstituentTable],
) -> Dict[str, List[ETFConstituent]]:
    """
    Key the constituent table by normalized fund ticker.

    Lists under keys that normalize to the same ticker are concatenated.
    """
    table: Dict[str, List[ETFConstituent]] = {}
    if not etf_constituents:
        return table

    for etf_ticker, constituents in etf_constituents.items():
        key = normalize_ticker(etf_ticker)
        if not key:
            continue
        table.setdefault(key, []).extend(constituents or [])
    return table


def has_look_through(table: Mapping[str, Sequence[ETFConstituent]], ticker: str) -> bool:
    """True when the fund has at least one disclosed constituent."""
    return bool(table.get(ticker))


def canonical_weights(
    constituents: Sequence[ETFConstituent], canonicalizer: TickerCanonicalizer
) -> Dict[str, float]:
    """
    Fund weight per canonical ticker.

    Share classes that merge into one canonical ticker have their weights
    summed. Insertion order follows first appearance.
    """
    weights: Dict[str, float] = {}
    for c in constituents:
        ticker = canonicalizer.canonicalize(c.symbol)
        weights[ticker] = weights.get(ticker, 0.0) + c.weight_percent
    return weights
