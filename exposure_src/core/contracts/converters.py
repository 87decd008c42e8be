"""Ingestion Converters - Turn API payloads and DataFrames into validated models at the analysis boundary."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

import pandas as pd
from pandera.errors import SchemaError, SchemaErrors
from pydantic import BaseModel, ValidationError

from exposure_src.models import ETFConstituent, Holding
from exposure_src.utils.logging_config import get_logger

from .frames import ConstituentsFrameSchema, HoldingsFrameSchema
from .quality import DataQuality, IssueCategory, IssueSeverity, ValidationIssue

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

ConstituentMap = Dict[str, List[ETFConstituent]]

HOLDING_COLUMN_ALIASES: Dict[str, List[str]] = {
    "ticker": ["ticker", "symbol"],
    "current_value": ["current_value", "currentvalue", "market_value", "value"],
}

CONSTITUENT_COLUMN_ALIASES: Dict[str, List[str]] = {
    "etf_ticker": ["etf_ticker", "etfticker", "etf", "parent_ticker"],
    "symbol": ["symbol", "ticker", "holding_ticker"],
    "name": ["name", "holding_name"],
    "weight_percent": ["weight_percent", "weightpercent", "weight_pct", "weightpct", "weight"],
    "as_of_date": ["as_of_date", "asofdate", "as_of"],
}


def _rename_columns(df: pd.DataFrame, alias_map: Dict[str, List[str]]) -> pd.DataFrame:
    """Lowercase columns and rename the first matching alias to the field name."""
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]

    renames: Dict[str, str] = {}
    for field_name, aliases in alias_map.items():
        for alias in aliases:
            if alias in df.columns:
                renames[alias] = field_name
                break
    return df.rename(columns=renames)


def _row_to_dict(row: pd.Series) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, val in row.items():
        if not isinstance(val, (list, dict)) and pd.isna(val):
            val = None
        out[str(key)] = val
    return out


def safe_convert_row(
    row: Mapping[str, Any],
    model_class: Type[T],
    phase: str,
) -> Tuple[Optional[T], Optional[ValidationIssue]]:
    """Safely convert a row dict to a Pydantic model, returning an issue on failure."""
    try:
        return model_class.model_validate(dict(row)), None
    except ValidationError as e:
        item = row.get("ticker") or row.get("symbol") or "unknown"
        first = e.errors()[0] if e.errors() else None
        where = ".".join(str(p) for p in first["loc"]) if first and first.get("loc") else ""
        detail = f"{where}: {first['msg']}" if first else str(e)
        return None, ValidationIssue(
            severity=IssueSeverity.MEDIUM,
            category=IssueCategory.SCHEMA,
            code="CONVERSION_ERROR",
            message=f"Rejected row: {detail}",
            fix_hint="Values must be non-negative and weights within 0-100",
            item=str(item),
            phase=phase,
        )


def _schema_issue(error: Exception, item: str, phase: str) -> ValidationIssue:
    return ValidationIssue(
        severity=IssueSeverity.CRITICAL,
        category=IssueCategory.SCHEMA,
        code="FRAME_SCHEMA_ERROR",
        message=f"Frame does not match the expected columns: {error}",
        fix_hint="Check the payload column names against the API contract",
        item=item,
        phase=phase,
    )


def holdings_from_records(
    records: Sequence[Mapping[str, Any]],
    phase: str = "INGESTION",
) -> Tuple[List[Holding], DataQuality]:
    """Convert API holding dicts (camelCase or snake_case) to Holding models."""
    quality = DataQuality()
    holdings: List[Holding] = []

    for record in records:
        holding, issue = safe_convert_row(record, Holding, phase)
        if holding is not None:
            holdings.append(holding)
        if issue is not None:
            quality.add_issue(issue)

    if quality.issues:
        logger.warning(f"Rejected {len(quality.issues)} holding row(s) at ingestion.")
    return holdings, quality


def holdings_from_dataframe(
    df: pd.DataFrame,
    phase: str = "INGESTION",
) -> Tuple[List[Holding], DataQuality]:
    """Convert a holdings DataFrame to Holding models."""
    if df.empty:
        return [], DataQuality()

    df = _rename_columns(df, HOLDING_COLUMN_ALIASES)
    try:
        df = HoldingsFrameSchema.validate(df, lazy=True)
    except (SchemaError, SchemaErrors) as e:
        quality = DataQuality()
        quality.add_issue(_schema_issue(e, "portfolio", phase))
        return [], quality

    return holdings_from_records([_row_to_dict(row) for _, row in df.iterrows()], phase)


def _group_constituents(
    records: Sequence[Mapping[str, Any]],
    phase: str,
) -> Tuple[ConstituentMap, DataQuality]:
    quality = DataQuality()
    table: ConstituentMap = {}

    for record in records:
        row = dict(record)
        as_of = row.get("as_of_date", row.get("asOfDate"))
        if isinstance(as_of, str) and len(as_of) > 10:
            row.pop("asOfDate", None)
            row["as_of_date"] = as_of[:10]

        constituent, issue = safe_convert_row(row, ETFConstituent, phase)
        if constituent is not None:
            table.setdefault(constituent.etf_ticker, []).append(constituent)
        if issue is not None:
            quality.add_issue(issue)

    return table, quality


def constituents_from_records(
    records: Sequence[Mapping[str, Any]],
    phase: str = "INGESTION",
) -> Tuple[ConstituentMap, DataQuality]:
    """Convert flat constituent dicts to a fund ticker -> constituents table."""
    table, quality = _group_constituents(records, phase)
    if quality.issues:
        logger.warning(f"Rejected {len(quality.issues)} constituent row(s) at ingestion.")
    return table, quality


def constituents_from_payload(
    payload: Mapping[str, Sequence[Mapping[str, Any]]],
    phase: str = "INGESTION",
) -> Tuple[ConstituentMap, DataQuality]:
    """
    Convert a grouped payload ``{etfTicker: [constituent, ...]}``.

    The fund ticker is taken from the key when a row does not carry one.
    Funds that arrive with an empty list are kept as empty entries.
    """
    records: List[Dict[str, Any]] = []
    empty: List[str] = []
    for etf_ticker, rows in payload.items():
        if not rows:
            empty.append(etf_ticker)
        for row in rows:
            merged = dict(row)
            if not merged.get("etf_ticker") and not merged.get("etfTicker"):
                merged["etf_ticker"] = etf_ticker
            records.append(merged)

    table, quality = constituents_from_records(records, phase)
    for etf_ticker in empty:
        table.setdefault(etf_ticker.strip().upper(), [])
    return table, quality


def constituents_from_dataframe(
    df: pd.DataFrame,
    phase: str = "INGESTION",
) -> Tuple[ConstituentMap, DataQuality]:
    """Convert a flat constituents DataFrame to a fund ticker -> constituents table."""
    if df.empty:
        return {}, DataQuality()

    df = _rename_columns(df, CONSTITUENT_COLUMN_ALIASES)
    try:
        df = ConstituentsFrameSchema.validate(df, lazy=True)
    except (SchemaError, SchemaErrors) as e:
        quality = DataQuality()
        quality.add_issue(_schema_issue(e, "etf_constituents", phase))
        return {}, quality

    return constituents_from_records(
        [_row_to_dict(row) for _, row in df.iterrows()], phase
    )


def holdings_to_dataframe(holdings: List[Holding]) -> pd.DataFrame:
    """Convert Holding models back to a DataFrame."""
    if not holdings:
        return pd.DataFrame(columns=["ticker", "current_value"])
    return pd.DataFrame([h.model_dump() for h in holdings])
