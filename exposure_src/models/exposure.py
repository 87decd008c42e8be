"""
Exposure analysis models.

Derived, ephemeral structures rebuilt on every analysis pass and handed
to the presentation layer as plain data. Nothing here is persisted.
"""

from datetime import date
from typing import List, Literal, Optional

import pandas as pd
from pydantic import Field, computed_field

from .base import ApiModel


class ExposureSource(ApiModel):
    """
    One contribution to a company's blended exposure.

    Attributes:
        source: 'direct' for shares held outright, 'etf' for look-through
        etf: Ticker of the fund the value came through (etf sources only)
        value: Contribution in account currency
    """

    source: Literal["direct", "etf"]
    etf: Optional[str] = None
    value: float = Field(default=0.0, ge=0)


class ExposureEntry(ApiModel):
    """
    Blended direct + indirect exposure to one canonical ticker.

    Attributes:
        ticker: Canonical ticker
        total_exposure_value: Sum of all source values
        exposure_percent: Share of the pass-wide exposure total (0-100)
        sources: Every contribution, in the order they were recorded
    """

    ticker: str
    total_exposure_value: float = Field(default=0.0, ge=0)
    exposure_percent: float = Field(default=0.0, ge=0)
    sources: List[ExposureSource] = Field(default_factory=list)

    @computed_field
    @property
    def direct_value(self) -> float:
        """Value held directly."""
        return sum(s.value for s in self.sources if s.source == "direct")

    @computed_field
    @property
    def etf_value(self) -> float:
        """Value held through funds."""
        return sum(s.value for s in self.sources if s.source == "etf")

    @property
    def etfs(self) -> List[str]:
        """Distinct funds contributing to this entry, in first-seen order."""
        seen: List[str] = []
        for s in self.sources:
            if s.etf and s.etf not in seen:
                seen.append(s.etf)
        return seen


class SectorExposure(ApiModel):
    sector: str
    exposure_percent: float = Field(default=0.0, ge=0)


class ConcentrationWarning(ApiModel):
    ticker: str
    exposure_percent: float
    message: str


class BreakdownHolding(ApiModel):
    """One constituent line inside an ETF breakdown."""

    ticker: str
    name: Optional[str] = None
    weight_pct: float = Field(default=0.0, ge=0)
    exposure_value: float = Field(default=0.0, ge=0)


class EtfBreakdown(ApiModel):
    """
    What a held fund contributes, constituent by constituent.

    Attributes:
        ticker: Fund ticker
        value: Market value of the fund position
        as_of_date: Most recent disclosure date among the constituents
        total_holdings_percent: Disclosed weight (capped at 100)
        unknown_exposure_value: Value behind the undisclosed remainder
        holdings: Constituents sorted by weight, heaviest first
    """

    ticker: str
    value: float = Field(default=0.0, ge=0)
    as_of_date: Optional[date] = None
    total_holdings_percent: float = Field(default=0.0, ge=0, le=100)
    unknown_exposure_value: float = Field(default=0.0, ge=0)
    holdings: List[BreakdownHolding] = Field(default_factory=list)


class SharedSecurity(ApiModel):
    """A company reached through more than one held fund."""

    ticker: str
    etf_count: int = Field(..., ge=0)
    etfs: List[str] = Field(default_factory=list)
    total_value: float = Field(default=0.0, ge=0)


EXPOSURE_COLUMNS = [
    "ticker",
    "direct_value",
    "etf_value",
    "total_exposure_value",
    "exposure_percent",
    "etfs",
]


def exposure_to_dataframe(entries: List[ExposureEntry]) -> pd.DataFrame:
    """
    Convert exposure entries to a DataFrame for table consumers.

    Args:
        entries: Output of compute_exposure

    Returns:
        DataFrame with one row per entry, in input order
    """
    if not entries:
        return pd.DataFrame(columns=EXPOSURE_COLUMNS)

    return pd.DataFrame(
        [
            {
                "ticker": e.ticker,
                "direct_value": e.direct_value,
                "etf_value": e.etf_value,
                "total_exposure_value": e.total_exposure_value,
                "exposure_percent": e.exposure_percent,
                "etfs": ", ".join(e.etfs),
            }
            for e in entries
        ],
        columns=EXPOSURE_COLUMNS,
    )


def sector_exposure_to_dataframe(rows: List[SectorExposure]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=["sector", "exposure_percent"])
    return pd.DataFrame([r.model_dump() for r in rows])
