"""
Data Quality Tracking - Scores how far one analysis pass can be trusted.

Partial data is never refused. Every problem found in the holdings, the
constituent tables or the derived totals becomes a ValidationIssue, and
each issue takes a severity-weighted bite out of a score that starts at
1.0 and bottoms out at 0.0.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Optional


class IssueSeverity(str, Enum):
    CRITICAL = "critical"  # figures are wrong
    HIGH = "high"  # figures may be wrong
    MEDIUM = "medium"  # figures are incomplete
    LOW = "low"


class IssueCategory(str, Enum):
    SCHEMA = "schema"  # rejected rows or frames
    WEIGHT = "weight"  # fund weight sums
    VALUE = "value"  # holding market values
    LOOK_THROUGH = "look_through"  # funds without constituents
    EXPOSURE = "exposure"  # derived totals


@dataclass
class ValidationIssue:
    """
    One problem found while checking analysis inputs or outputs.

    `item` is a ticker, fund ticker or "portfolio"; it never carries a
    market value, so issues can be attached to bug reports as they are.
    """

    severity: IssueSeverity
    category: IssueCategory
    code: str
    message: str
    fix_hint: str
    item: str
    phase: str
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    expected: Optional[str] = None
    actual: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "severity": self.severity.value,
            "category": self.category.value,
            "item": self.item,
            "phase": self.phase,
            "message": self.message,
            "fix_hint": self.fix_hint,
            "expected": self.expected,
            "actual": self.actual,
            "timestamp": self.timestamp,
        }


@dataclass
class DataQuality:
    """Score and issue list for one analysis pass."""

    score: float = 1.0
    issues: List[ValidationIssue] = field(default_factory=list)

    TRUST_THRESHOLD: ClassVar[float] = 0.95
    PENALTIES: ClassVar[Dict[IssueSeverity, float]] = {
        IssueSeverity.CRITICAL: 0.25,
        IssueSeverity.HIGH: 0.10,
        IssueSeverity.MEDIUM: 0.03,
        IssueSeverity.LOW: 0.01,
    }

    def _apply_penalty(self, issue: ValidationIssue) -> None:
        self.score = max(0.0, self.score - self.PENALTIES.get(issue.severity, 0.0))

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)
        self._apply_penalty(issue)

    def extend(self, issues: Iterable[ValidationIssue]) -> None:
        for issue in issues:
            self.add_issue(issue)

    def merge(self, other: DataQuality) -> None:
        """Take over another tracker's issues and rescore from scratch."""
        self.issues.extend(other.issues)
        self.score = 1.0
        for issue in self.issues:
            self._apply_penalty(issue)

    @property
    def is_trustworthy(self) -> bool:
        return self.score >= self.TRUST_THRESHOLD

    @property
    def has_critical_issues(self) -> bool:
        return any(i.severity is IssueSeverity.CRITICAL for i in self.issues)

    @property
    def issue_count_by_severity(self) -> Dict[str, int]:
        counts = Counter(i.severity.value for i in self.issues)
        return {s.value: counts.get(s.value, 0) for s in IssueSeverity}

    def get_issues_for_phase(self, phase: str) -> List[ValidationIssue]:
        return [i for i in self.issues if i.phase == phase]

    def affected_items(self) -> List[str]:
        """Distinct tickers named by issues, in first-reported order."""
        items: List[str] = []
        for issue in self.issues:
            if issue.item not in items:
                items.append(issue.item)
        return items

    def to_summary(self) -> Dict[str, Any]:
        """JSON-serializable summary for the presentation layer."""
        return {
            "quality_score": round(self.score, 4),
            "is_trustworthy": self.is_trustworthy,
            "has_critical_issues": self.has_critical_issues,
            "total_issues": len(self.issues),
            "by_severity": self.issue_count_by_severity,
            "affected_items": self.affected_items(),
            "issues": [i.to_dict() for i in self.issues],
        }
