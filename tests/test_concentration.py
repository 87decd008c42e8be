"""Tests for concentration risk detection."""

from __future__ import annotations

from exposure_src.core.aggregation import compute_exposure, detect_concentration
from tests.factories import make_exposure_entry, make_holdings


class TestDetectConcentration:
    def test_threshold_is_inclusive(self) -> None:
        warnings = detect_concentration(
            [make_exposure_entry("A", 10.0), make_exposure_entry("B", 9.99)], 10.0
        )
        assert [w.ticker for w in warnings] == ["A"]

    def test_default_threshold(self) -> None:
        warnings = detect_concentration(
            [make_exposure_entry("A", 10.0), make_exposure_entry("B", 9.99)]
        )
        assert [w.ticker for w in warnings] == ["A"]

    def test_message_format(self) -> None:
        (warning,) = detect_concentration([make_exposure_entry("NVDA", 12.345)], 10.0)
        assert warning.message == "High concentration: NVDA is 12.3% of portfolio exposure"
        assert warning.exposure_percent == 12.345

    def test_input_order_kept(self) -> None:
        entries = [
            make_exposure_entry("A", 30.0),
            make_exposure_entry("B", 5.0),
            make_exposure_entry("C", 50.0),
        ]
        assert [w.ticker for w in detect_concentration(entries, 10.0)] == ["A", "C"]

    def test_empty(self) -> None:
        assert detect_concentration([], 10.0) == []

    def test_two_stock_portfolio(self, canonicalizer) -> None:
        entries = compute_exposure(
            make_holdings(("AAPL", 600), ("MSFT", 400)), None, canonicalizer
        )
        assert [w.ticker for w in detect_concentration(entries, 50.0)] == ["AAPL"]
        assert [w.ticker for w in detect_concentration(entries, 10.0)] == ["AAPL", "MSFT"]
