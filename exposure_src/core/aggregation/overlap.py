"""
ETF overlap matrix.

For every pair of held funds, the overlap is the fund weight they hold in
common, taken constituent by constituent as the smaller of the two
weights. Using the minimum keeps a holding that is heavier in one fund
from being counted twice.
"""

from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from exposure_src.models import OverlapPair, SharedHolding
from exposure_src.utils.logging_config import get_logger
from exposure_src.utils.tickers import normalize_ticker

from .canonical import TickerCanonicalizer
from .constituents import ConstituentTable, canonical_weights, normalize_constituent_table

logger = get_logger(__name__)


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def _pair_overlap(
    etf_a: str,
    etf_b: str,
    weights_a: Dict[str, float],
    weights_b: Dict[str, float],
) -> OverlapPair:
    shared_tickers = sorted(set(weights_a) & set(weights_b))
    shared = [
        SharedHolding(
            ticker=t,
            overlap_pct=_clamp_percent(min(weights_a[t], weights_b[t])),
        )
        for t in shared_tickers
    ]
    # Sum in ticker order so the total is identical for either pair ordering
    overlap_percent = _clamp_percent(sum(h.overlap_pct for h in shared))
    shared.sort(key=lambda h: h.overlap_pct, reverse=True)

    return OverlapPair(
        etf_a=etf_a,
        etf_b=etf_b,
        overlap_percent=overlap_percent,
        shared_holdings=shared,
    )


def _unique_tickers(etf_tickers: Sequence[str]) -> List[str]:
    unique: List[str] = []
    for t in etf_tickers:
        key = normalize_ticker(t)
        if key and key not in unique:
            unique.append(key)
    return unique


def compute_overlap(
    etf_tickers: Sequence[str],
    etf_constituents: Optional[ConstituentTable],
    canonicalizer: Optional[TickerCanonicalizer] = None,
) -> List[OverlapPair]:
    """
    Build the complete upper-triangular overlap matrix for held funds.

    Every unordered pair is returned, including pairs with no shared
    holdings, so consumers can look up either ordering. Each pair is
    stored with etf_a < etf_b; pairs follow the order in which their
    funds first appear in etf_tickers.

    Args:
        etf_tickers: Held fund tickers (duplicates ignored)
        etf_constituents: Fund ticker -> constituent rows
        canonicalizer: Alias merging (built-in table when None)

    Returns:
        One OverlapPair per pair of distinct funds
    """
    if canonicalizer is None:
        canonicalizer = TickerCanonicalizer()
    table = normalize_constituent_table(etf_constituents)
    tickers = _unique_tickers(etf_tickers)

    weights = {t: canonical_weights(table.get(t, []), canonicalizer) for t in tickers}
    missing = [t for t in tickers if not weights[t]]
    if missing:
        logger.warning(
            f"No constituent data for {', '.join(missing)}; their overlaps will be 0%."
        )

    pairs: List[OverlapPair] = []
    for first, second in combinations(tickers, 2):
        etf_a, etf_b = sorted((first, second))
        pair = _pair_overlap(etf_a, etf_b, weights[etf_a], weights[etf_b])
        logger.debug(
            f"Overlap {etf_a}/{etf_b}: {pair.overlap_percent:.2f}% "
            f"across {len(pair.shared_holdings)} shared holdings"
        )
        pairs.append(pair)

    logger.info(f"Overlap matrix built for {len(tickers)} ETFs ({len(pairs)} pairs).")
    return pairs


def build_pair_lookup(
    pairs: Sequence[OverlapPair],
) -> Dict[Tuple[str, str], OverlapPair]:
    """Index pairs under both (A, B) and (B, A)."""
    lookup: Dict[Tuple[str, str], OverlapPair] = {}
    for p in pairs:
        lookup[(p.etf_a, p.etf_b)] = p
        lookup[(p.etf_b, p.etf_a)] = p
    return lookup


def overlap_matrix_frame(
    pairs: Sequence[OverlapPair], etf_tickers: Sequence[str]
) -> pd.DataFrame:
    """
    Square overlap matrix for heatmap rendering.

    Args:
        pairs: Output of compute_overlap
        etf_tickers: Row/column order

    Returns:
        DataFrame indexed and columned by ticker; diagonal is 100.0,
        pairs absent from `pairs` are NaN
    """
    tickers = _unique_tickers(etf_tickers)
    matrix = pd.DataFrame(index=tickers, columns=tickers, dtype=float)
    lookup = build_pair_lookup(pairs)

    for row in tickers:
        for col in tickers:
            if row == col:
                matrix.loc[row, col] = 100.0
                continue
            pair = lookup.get((row, col))
            if pair is not None:
                matrix.loc[row, col] = pair.overlap_percent

    return matrix
