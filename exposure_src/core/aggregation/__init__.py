"""
Aggregation module for portfolio exposure analysis.

This module resolves sectors, merges share classes, looks through ETF
holdings and compares funds against each other. Every function is pure:
inputs are never mutated and each call builds fresh outputs.

Public API:
    run_analysis(holdings, etf_constituents, ...) -> AnalysisResult
"""

from typing import List, Mapping, Optional

from exposure_src.models import AnalysisResult, Holding

from .breakdown import compute_etf_breakdown, find_shared_securities
from .canonical import TickerCanonicalizer
from .concentration import detect_concentration
from .constituents import ConstituentTable
from .lookthrough import compute_exposure, top_exposures
from .overlap import build_pair_lookup, compute_overlap, overlap_matrix_frame
from .sector import SectorResolver, compute_sector_exposure, resolve_sector

__all__ = [
    "run_analysis",
    "SectorResolver",
    "TickerCanonicalizer",
    "resolve_sector",
    "compute_sector_exposure",
    "compute_exposure",
    "top_exposures",
    "compute_overlap",
    "build_pair_lookup",
    "overlap_matrix_frame",
    "detect_concentration",
    "compute_etf_breakdown",
    "find_shared_securities",
]


def run_analysis(
    holdings: List[Holding],
    etf_constituents: Optional[ConstituentTable] = None,
    sector_map: Optional[Mapping[str, str]] = None,
    canonical_map: Optional[Mapping[str, str]] = None,
    concentration_threshold: Optional[float] = None,
    top_n: Optional[int] = None,
) -> AnalysisResult:
    """
    Run the entire exposure analysis for one portfolio snapshot.

    This function:
    1. Computes sector exposure from the raw holdings
    2. Looks through ETF holdings into blended per-company exposure
    3. Builds the pairwise ETF overlap matrix
    4. Flags concentration risk over the blended exposure

    Args:
        holdings: Portfolio snapshot
        etf_constituents: Fund ticker -> constituent rows
        sector_map: Ticker -> sector table (built-in when None)
        canonical_map: Alias -> canonical table (built-in when None)
        concentration_threshold: Warning threshold in percent
        top_n: Number of exposures kept in top_exposures

    Returns:
        AnalysisResult with every derived structure
    """
    from exposure_src.core.engine import ExposureEngine

    engine = ExposureEngine(
        sector_map=sector_map,
        canonical_map=canonical_map,
        concentration_threshold=concentration_threshold,
        top_n=top_n,
    )
    return engine.analyze(holdings, etf_constituents)
