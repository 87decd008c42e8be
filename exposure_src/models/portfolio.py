"""
Portfolio holding models.

Defines the snapshot rows delivered by the portfolio API. A snapshot is
immutable for the duration of one analysis pass.
"""

from pydantic import Field, field_validator

from exposure_src.utils.tickers import normalize_ticker

from .base import ApiModel


class Holding(ApiModel):
    """
    One position in a portfolio snapshot.

    Attributes:
        ticker: Unique key within the snapshot (normalized to uppercase)
        current_value: Market value in account currency (non-negative)
    """

    ticker: str = Field(..., min_length=1)
    current_value: float = Field(default=0.0, ge=0)

    @field_validator("ticker", mode="before")
    @classmethod
    def normalize(cls, v: object) -> str:
        """Strip and uppercase the ticker; rejects non-string input."""
        if not isinstance(v, str):
            raise ValueError(f"ticker must be a string, got {type(v).__name__}")
        return normalize_ticker(v)
