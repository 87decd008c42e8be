"""Tests for input validation on the pydantic models."""

from __future__ import annotations

import math
from datetime import date

import pytest
from pydantic import ValidationError

from exposure_src.models import (
    AnalysisResult,
    ETFConstituent,
    ExposureEntry,
    ExposureSource,
    Holding,
    OverlapPair,
)


class TestHolding:
    def test_ticker_normalized(self) -> None:
        assert Holding(ticker=" aapl ", current_value=1).ticker == "AAPL"

    def test_camel_case_input(self) -> None:
        h = Holding.model_validate({"ticker": "MSFT", "currentValue": 400})
        assert h.current_value == 400.0

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Holding(ticker="AAPL", current_value=-1)

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite_value_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            Holding(ticker="AAPL", current_value=value)

    def test_blank_ticker_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Holding(ticker="   ", current_value=1)

    def test_non_string_ticker_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Holding(ticker=123, current_value=1)

    def test_frozen(self) -> None:
        h = Holding(ticker="AAPL", current_value=1)
        with pytest.raises(ValidationError):
            h.current_value = 2  # type: ignore[misc]


class TestETFConstituent:
    def test_camel_case_input(self) -> None:
        c = ETFConstituent.model_validate(
            {"etfTicker": "spy", "symbol": "aapl", "weightPercent": 7.1, "asOfDate": "2024-06-30"}
        )
        assert (c.etf_ticker, c.symbol) == ("SPY", "AAPL")
        assert c.as_of_date == date(2024, 6, 30)

    @pytest.mark.parametrize("weight", [-0.1, 100.1])
    def test_weight_out_of_range(self, weight: float) -> None:
        with pytest.raises(ValidationError):
            ETFConstituent(etf_ticker="SPY", symbol="AAPL", weight_percent=weight)

    def test_weight_required(self) -> None:
        with pytest.raises(ValidationError):
            ETFConstituent(etf_ticker="SPY", symbol="AAPL")


class TestOutputs:
    def test_exposure_entry_split(self) -> None:
        entry = ExposureEntry(
            ticker="AAPL",
            total_exposure_value=300,
            exposure_percent=30,
            sources=[
                ExposureSource(source="direct", value=100),
                ExposureSource(source="etf", etf="SPY", value=150),
                ExposureSource(source="etf", etf="SPY", value=50),
            ],
        )
        assert entry.direct_value == 100
        assert entry.etf_value == 200
        assert entry.etfs == ["SPY"]

    def test_unknown_source_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExposureSource(source="bond", value=1)

    def test_overlap_bounds(self) -> None:
        with pytest.raises(ValidationError):
            OverlapPair(etf_a="A", etf_b="B", overlap_percent=100.5)

    def test_analysis_result_success(self) -> None:
        assert AnalysisResult().success
        assert not AnalysisResult(errors=[{"phase": "OVERLAP"}]).success
