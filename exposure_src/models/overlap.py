"""
ETF overlap models.
"""

from typing import List

import pandas as pd
from pydantic import Field

from .base import ApiModel


class SharedHolding(ApiModel):
    """
    A constituent held by both funds of a pair.

    Attributes:
        ticker: Canonical ticker
        overlap_pct: min(weight in A, weight in B)
    """

    ticker: str
    overlap_pct: float = Field(default=0.0, ge=0, le=100)


class OverlapPair(ApiModel):
    """
    Weight overlap between two held funds.

    Pairs are stored with etf_a < etf_b so both input orderings produce
    the same row.

    Attributes:
        etf_a: First fund ticker (lexicographically smaller)
        etf_b: Second fund ticker
        overlap_percent: Sum of shared overlap_pct values, in [0, 100]
        shared_holdings: Shared constituents, largest overlap first
    """

    etf_a: str
    etf_b: str
    overlap_percent: float = Field(default=0.0, ge=0, le=100)
    shared_holdings: List[SharedHolding] = Field(default_factory=list)

    @property
    def key(self) -> tuple:
        return (self.etf_a, self.etf_b)


def overlap_to_dataframe(pairs: List[OverlapPair]) -> pd.DataFrame:
    """Flatten overlap pairs into one row per pair."""
    columns = ["etf_a", "etf_b", "overlap_percent", "shared_count", "shared_tickers"]
    if not pairs:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        [
            {
                "etf_a": p.etf_a,
                "etf_b": p.etf_b,
                "overlap_percent": p.overlap_percent,
                "shared_count": len(p.shared_holdings),
                "shared_tickers": ", ".join(h.ticker for h in p.shared_holdings),
            }
            for p in pairs
        ],
        columns=columns,
    )
