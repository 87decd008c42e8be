"""
ETF constituent models.

Defines the structure for fund constituent rows returned by the ETF
overlap endpoint, one row per underlying holding of one fund as of its
last disclosed date.
"""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from exposure_src.utils.tickers import normalize_ticker

from .base import ApiModel


class ETFConstituent(ApiModel):
    """
    Single underlying holding of an ETF.

    A fund's constituent weights sum to at most 100; the remainder is
    undisclosed and is never attributed to any company.

    Attributes:
        etf_ticker: Ticker of the parent fund
        symbol: Ticker of the underlying security
        name: Security name from the provider, if disclosed
        weight_percent: Weight in the fund (0-100 scale)
        as_of_date: Disclosure date of the fund's holdings file
    """

    etf_ticker: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1)
    name: Optional[str] = None
    weight_percent: float = Field(..., ge=0.0, le=100.0)
    as_of_date: Optional[date] = None

    @field_validator("etf_ticker", "symbol", mode="before")
    @classmethod
    def normalize(cls, v: object) -> str:
        if not isinstance(v, str):
            raise ValueError(f"ticker must be a string, got {type(v).__name__}")
        return normalize_ticker(v)
