"""
DataFrame contracts for tabular API payloads.

Frames are coerced and filtered here before rows are turned into
pydantic models, so column typos and string-typed numbers are handled in
one place.
"""

from typing import Optional

import pandera.pandas as pa
from pandera.typing import Series


class HoldingsFrameSchema(pa.DataFrameModel):
    """Portfolio snapshot rows (GET /portfolio)."""

    ticker: Series[str] = pa.Field(nullable=True)
    current_value: Series[float] = pa.Field(nullable=True)

    class Config:
        strict = "filter"  # Drop columns not defined in the schema
        coerce = True


class ConstituentsFrameSchema(pa.DataFrameModel):
    """Fund constituent rows (GET /etf-overlap)."""

    etf_ticker: Series[str] = pa.Field(nullable=True)
    symbol: Series[str] = pa.Field(nullable=True)
    name: Optional[Series[str]] = pa.Field(nullable=True)
    weight_percent: Series[float] = pa.Field(nullable=True)
    as_of_date: Optional[Series[str]] = pa.Field(nullable=True)

    class Config:
        strict = "filter"
        coerce = True
