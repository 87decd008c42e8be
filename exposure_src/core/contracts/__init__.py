"""Analysis Contracts - Data validation at the ingestion boundary."""

from .quality import (
    DataQuality,
    IssueCategory,
    IssueSeverity,
    ValidationIssue,
)
from .validation import (
    validate_constituent_table,
    validate_constituent_weights,
    validate_holdings,
    validate_missing_constituents,
    validate_percentage_sum,
)
from .converters import (
    constituents_from_dataframe,
    constituents_from_payload,
    constituents_from_records,
    holdings_from_dataframe,
    holdings_from_records,
    holdings_to_dataframe,
    safe_convert_row,
)

__all__ = [
    "IssueSeverity",
    "IssueCategory",
    "ValidationIssue",
    "DataQuality",
    "validate_holdings",
    "validate_constituent_weights",
    "validate_constituent_table",
    "validate_missing_constituents",
    "validate_percentage_sum",
    "holdings_from_records",
    "holdings_from_dataframe",
    "constituents_from_records",
    "constituents_from_payload",
    "constituents_from_dataframe",
    "holdings_to_dataframe",
    "safe_convert_row",
]
