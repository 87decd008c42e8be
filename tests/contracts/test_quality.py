"""Tests for DataQuality scoring."""

from __future__ import annotations

import pytest

from exposure_src.core.contracts import DataQuality, IssueCategory, IssueSeverity, ValidationIssue


def make_issue(severity: IssueSeverity = IssueSeverity.LOW, phase: str = "INGESTION") -> ValidationIssue:
    return ValidationIssue(
        severity=severity,
        category=IssueCategory.WEIGHT,
        code="TEST_ISSUE",
        message="Test issue",
        fix_hint="None",
        item="SPY",
        phase=phase,
    )


class TestDataQuality:
    def test_starts_perfect(self) -> None:
        quality = DataQuality()
        assert quality.score == 1.0
        assert quality.is_trustworthy
        assert not quality.has_critical_issues

    @pytest.mark.parametrize(
        "severity,expected",
        [
            (IssueSeverity.CRITICAL, 0.75),
            (IssueSeverity.HIGH, 0.90),
            (IssueSeverity.MEDIUM, 0.97),
            (IssueSeverity.LOW, 0.99),
        ],
    )
    def test_penalties(self, severity: IssueSeverity, expected: float) -> None:
        quality = DataQuality()
        quality.add_issue(make_issue(severity))
        assert quality.score == pytest.approx(expected)

    def test_score_floor(self) -> None:
        quality = DataQuality()
        quality.extend([make_issue(IssueSeverity.CRITICAL) for _ in range(5)])
        assert quality.score == 0.0
        assert quality.has_critical_issues

    def test_trust_threshold(self) -> None:
        quality = DataQuality()
        quality.add_issue(make_issue(IssueSeverity.MEDIUM))
        assert quality.is_trustworthy
        quality.add_issue(make_issue(IssueSeverity.MEDIUM))
        assert not quality.is_trustworthy

    def test_issues_for_phase(self) -> None:
        quality = DataQuality()
        quality.add_issue(make_issue(phase="INGESTION"))
        quality.add_issue(make_issue(phase="LOOK_THROUGH"))
        assert len(quality.get_issues_for_phase("LOOK_THROUGH")) == 1

    def test_merge_recalculates(self) -> None:
        first = DataQuality()
        first.add_issue(make_issue(IssueSeverity.HIGH))
        second = DataQuality()
        second.add_issue(make_issue(IssueSeverity.HIGH))

        first.merge(second)
        assert len(first.issues) == 2
        assert first.score == pytest.approx(0.80)

    def test_summary(self) -> None:
        quality = DataQuality()
        quality.add_issue(make_issue(IssueSeverity.HIGH))
        summary = quality.to_summary()

        assert summary["quality_score"] == 0.9
        assert summary["total_issues"] == 1
        assert summary["by_severity"] == {"critical": 0, "high": 1, "medium": 0, "low": 0}
        assert summary["issues"][0]["code"] == "TEST_ISSUE"
        assert summary["issues"][0]["severity"] == "high"
        assert summary["affected_items"] == ["SPY"]

    def test_affected_items_deduplicated(self) -> None:
        quality = DataQuality()
        quality.extend([make_issue(), make_issue()])
        assert quality.affected_items() == ["SPY"]
