"""Tests for Validation Functions - Validates issue detection on analysis inputs and outputs."""

from __future__ import annotations

from exposure_src.core.contracts import (
    IssueSeverity,
    validate_constituent_table,
    validate_constituent_weights,
    validate_holdings,
    validate_missing_constituents,
    validate_percentage_sum,
)
from tests.factories import (
    make_constituent,
    make_constituent_table,
    make_exposure_entry,
    make_holding,
    make_holdings,
)


class TestValidateHoldings:
    def test_empty_list(self) -> None:
        issues = validate_holdings([])
        assert len(issues) == 1
        assert issues[0].code == "NO_HOLDINGS"
        assert issues[0].severity == IssueSeverity.HIGH

    def test_valid_holdings(self) -> None:
        assert validate_holdings(make_holdings(("AAPL", 600), ("MSFT", 400))) == []

    def test_some_zero_values(self) -> None:
        issues = validate_holdings(make_holdings(("AAPL", 600), ("X", 0)))
        assert issues[0].code == "ZERO_VALUE_HOLDINGS"
        assert issues[0].severity == IssueSeverity.LOW

    def test_all_zero_values(self) -> None:
        issues = validate_holdings([make_holding("X", 0)])
        assert issues[0].code == "ZERO_VALUE_HOLDINGS"
        assert issues[0].severity == IssueSeverity.HIGH

    def test_duplicate_tickers(self) -> None:
        issues = validate_holdings(make_holdings(("AAPL", 1), ("aapl", 2)))
        assert any(i.code == "DUPLICATE_TICKERS" for i in issues)


class TestValidateConstituentWeights:
    def test_valid_weights(self) -> None:
        constituents = make_constituent_table({"F": {"A": 60.0, "B": 40.0}})["F"]
        assert validate_constituent_weights("F", constituents) == []

    def test_no_constituents(self) -> None:
        assert validate_constituent_weights("F", []) == []

    def test_decimal_format_detected(self) -> None:
        constituents = make_constituent_table({"F": {"A": 0.25, "B": 0.25, "C": 0.5}})["F"]
        issues = validate_constituent_weights("F", constituents)
        assert issues[0].code == "WEIGHT_DECIMAL_FORMAT"
        assert issues[0].severity == IssueSeverity.CRITICAL

    def test_single_small_holding_is_not_decimal(self) -> None:
        issues = validate_constituent_weights("F", [make_constituent(etf_ticker="F", weight_percent=1.0)])
        assert issues[0].code == "WEIGHT_SUM_LOW"

    def test_weight_sum_high(self) -> None:
        constituents = make_constituent_table({"F": {"A": 70.0, "B": 40.0}})["F"]
        issues = validate_constituent_weights("F", constituents)
        assert issues[0].code == "WEIGHT_SUM_HIGH"
        assert issues[0].severity == IssueSeverity.HIGH

    def test_weight_sum_low(self, fund_table) -> None:
        issues = validate_constituent_weights("SPY", fund_table["SPY"])
        assert issues[0].code == "WEIGHT_SUM_LOW"
        assert issues[0].severity == IssueSeverity.MEDIUM

    def test_table(self, fund_table) -> None:
        issues = validate_constituent_table(fund_table)
        assert {i.item for i in issues} == {"SPY", "QQQ"}


class TestValidateMissingConstituents:
    def test_flags_funds_without_data(self, fund_table) -> None:
        issues = validate_missing_constituents(["SPY", "VT"], fund_table)
        assert [i.item for i in issues] == ["VT"]
        assert issues[0].code == "NO_CONSTITUENTS"
        assert issues[0].phase == "LOOK_THROUGH"

    def test_empty_list_counts_as_missing(self) -> None:
        issues = validate_missing_constituents(["VT"], {"VT": []})
        assert len(issues) == 1


class TestValidatePercentageSum:
    def test_valid_sum(self) -> None:
        entries = [make_exposure_entry("A", 60.0), make_exposure_entry("B", 40.0)]
        assert validate_percentage_sum(entries) == []

    def test_within_tolerance(self) -> None:
        entries = [make_exposure_entry("A", 60.0), make_exposure_entry("B", 40.4)]
        assert validate_percentage_sum(entries) == []

    def test_sum_high(self) -> None:
        entries = [make_exposure_entry("A", 60.0), make_exposure_entry("B", 60.0)]
        issues = validate_percentage_sum(entries)
        assert issues[0].code == "PERCENTAGE_SUM_HIGH"
        assert issues[0].severity == IssueSeverity.CRITICAL

    def test_sum_low(self) -> None:
        issues = validate_percentage_sum([make_exposure_entry("A", 50.0)])
        assert issues[0].code == "PERCENTAGE_SUM_LOW"

    def test_empty(self) -> None:
        assert validate_percentage_sum([]) == []
