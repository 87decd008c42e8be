"""
Shared pytest fixtures for the exposure analysis tests.

Tables are injected explicitly so no test depends on process-wide state.
"""

import pytest

from exposure_src.core.aggregation import SectorResolver, TickerCanonicalizer
from exposure_src.core.engine import ExposureEngine
from tests.factories import make_constituent_table

SECTOR_MAP = {
    "AAPL": "Tech",
    "MSFT": "Tech",
    "GOOGL": "Tech",
    "NVDA": "Tech",
    "JPM": "Finance",
    "BRK.B": "Finance",
    "XOM": "Energy",
    "SPY": "ETF/Index",
    "QQQ": "ETF/Index",
}

CANONICAL_MAP = {"GOOG": "GOOGL", "BRK.A": "BRK.B"}


@pytest.fixture
def sector_map():
    return dict(SECTOR_MAP)


@pytest.fixture
def canonicalizer():
    return TickerCanonicalizer(CANONICAL_MAP)


@pytest.fixture
def resolver(canonicalizer):
    return SectorResolver(SECTOR_MAP, canonicalizer=canonicalizer)


@pytest.fixture
def engine():
    return ExposureEngine(
        sector_map=SECTOR_MAP,
        canonical_map=CANONICAL_MAP,
        concentration_threshold=10.0,
        top_n=20,
    )


@pytest.fixture
def fund_table():
    """Two overlapping index funds and a bond fund with no equity overlap."""
    return make_constituent_table(
        {
            "SPY": {"AAPL": 7.0, "MSFT": 6.5, "NVDA": 6.0, "GOOGL": 2.0, "GOOG": 1.7, "JPM": 1.2},
            "QQQ": {"AAPL": 9.0, "MSFT": 8.5, "NVDA": 8.0, "GOOGL": 2.6, "GOOG": 2.5},
            "BND": {"US10Y": 40.0, "US2Y": 30.0},
        }
    )
