"""Validation Functions - Check analysis inputs and outputs and return issues without raising exceptions."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from exposure_src.models import ETFConstituent, ExposureEntry, Holding

from .quality import IssueCategory, IssueSeverity, ValidationIssue


def validate_holdings(
    holdings: Sequence[Holding],
    phase: str = "INGESTION",
) -> List[ValidationIssue]:
    """Validate a portfolio snapshot."""
    issues: List[ValidationIssue] = []

    if not holdings:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.HIGH,
                category=IssueCategory.SCHEMA,
                code="NO_HOLDINGS",
                message="No holdings found in portfolio",
                fix_hint="Ensure the portfolio snapshot was delivered by the API",
                item="portfolio",
                phase=phase,
            )
        )
        return issues

    zero_value = [h.ticker for h in holdings if h.current_value <= 0]
    if zero_value:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.LOW if len(zero_value) < len(holdings) else IssueSeverity.HIGH,
                category=IssueCategory.VALUE,
                code="ZERO_VALUE_HOLDINGS",
                message=f"{len(zero_value)} holding(s) have zero market value",
                fix_hint="Zero-value holdings contribute 0% to every exposure view",
                item=", ".join(zero_value[:5]),
                phase=phase,
                expected="current_value > 0",
                actual=f"{len(zero_value)} holdings with value 0",
            )
        )

    seen: Dict[str, int] = {}
    for h in holdings:
        seen[h.ticker] = seen.get(h.ticker, 0) + 1
    duplicates = [t for t, n in seen.items() if n > 1]
    if duplicates:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.MEDIUM,
                category=IssueCategory.SCHEMA,
                code="DUPLICATE_TICKERS",
                message=f"Tickers appear more than once in the snapshot: {', '.join(duplicates)}",
                fix_hint="Duplicate rows are summed; check the portfolio export",
                item=", ".join(duplicates[:5]),
                phase=phase,
            )
        )

    return issues


def validate_constituent_weights(
    etf_ticker: str,
    constituents: Sequence[ETFConstituent],
    phase: str = "INGESTION",
) -> List[ValidationIssue]:
    """Validate the disclosed weights of one fund."""
    issues: List[ValidationIssue] = []

    if not constituents:
        return issues

    weight_sum = sum(c.weight_percent for c in constituents)

    if 0.5 <= weight_sum <= 1.5 and len(constituents) > 1:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.CRITICAL,
                category=IssueCategory.WEIGHT,
                code="WEIGHT_DECIMAL_FORMAT",
                message=f"ETF {etf_ticker} weights appear to be in decimal format (sum: {weight_sum:.2f})",
                fix_hint="Weights should be percentages (0-100), not decimals (0-1)",
                item=etf_ticker,
                phase=phase,
                expected="sum <= 100, in percent",
                actual=f"{weight_sum:.2f}",
            )
        )
    elif weight_sum > 100.5:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.HIGH,
                category=IssueCategory.WEIGHT,
                code="WEIGHT_SUM_HIGH",
                message=f"ETF {etf_ticker} weight sum exceeds 100%: {weight_sum:.1f}%",
                fix_hint="Constituents may be duplicated; overlap is capped at 100%",
                item=etf_ticker,
                phase=phase,
                expected="sum <= 100",
                actual=f"{weight_sum:.1f}%",
            )
        )
    elif weight_sum < 50:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.MEDIUM,
                category=IssueCategory.WEIGHT,
                code="WEIGHT_SUM_LOW",
                message=f"ETF {etf_ticker} discloses only {weight_sum:.1f}% of its weight",
                fix_hint="The undisclosed remainder is excluded from look-through exposure",
                item=etf_ticker,
                phase=phase,
                expected="sum ~100",
                actual=f"{weight_sum:.1f}%",
            )
        )

    return issues


def validate_constituent_table(
    etf_constituents: Mapping[str, Sequence[ETFConstituent]],
    phase: str = "INGESTION",
) -> List[ValidationIssue]:
    """Validate every fund in a constituent table."""
    issues: List[ValidationIssue] = []
    for etf_ticker, constituents in etf_constituents.items():
        issues.extend(validate_constituent_weights(etf_ticker, constituents, phase))
    return issues


def validate_missing_constituents(
    etf_tickers: Sequence[str],
    etf_constituents: Mapping[str, Sequence[ETFConstituent]],
    phase: str = "LOOK_THROUGH",
) -> List[ValidationIssue]:
    """Flag held funds whose constituents are unknown."""
    issues: List[ValidationIssue] = []
    for ticker in etf_tickers:
        if etf_constituents.get(ticker):
            continue
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.MEDIUM,
                category=IssueCategory.LOOK_THROUGH,
                code="NO_CONSTITUENTS",
                message=f"ETF {ticker} has no constituent data",
                fix_hint="Its value is reported as a direct holding of the fund itself",
                item=ticker,
                phase=phase,
            )
        )
    return issues


def validate_percentage_sum(
    exposures: Sequence[ExposureEntry],
    tolerance: float = 0.5,
    phase: str = "LOOK_THROUGH",
) -> List[ValidationIssue]:
    """Validate that exposure percentages sum to approximately 100%."""
    issues: List[ValidationIssue] = []

    if not exposures:
        return issues

    percentage_sum = sum(e.exposure_percent for e in exposures)

    if percentage_sum > 100 + tolerance:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.CRITICAL,
                category=IssueCategory.EXPOSURE,
                code="PERCENTAGE_SUM_HIGH",
                message=f"Exposure percentages sum to {percentage_sum:.1f}%",
                fix_hint="Exposure rows are double counted",
                item="portfolio",
                phase=phase,
                expected="<= 100",
                actual=f"{percentage_sum:.1f}%",
            )
        )
    elif percentage_sum < 100 - tolerance:
        issues.append(
            ValidationIssue(
                severity=IssueSeverity.HIGH,
                category=IssueCategory.EXPOSURE,
                code="PERCENTAGE_SUM_LOW",
                message=f"Exposure percentages sum to only {percentage_sum:.1f}%",
                fix_hint="Some exposures may be missing from the aggregation",
                item="portfolio",
                phase=phase,
                expected="~100",
                actual=f"{percentage_sum:.1f}%",
            )
        )

    return issues
