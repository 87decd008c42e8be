"""
Pydantic models for the exposure analysis inputs and outputs.

Inputs (Holding, ETFConstituent) are validated once at the ingestion
boundary; outputs are rebuilt on every pass and passed to the
presentation layer as plain data.

Usage:
    from exposure_src.models import Holding, ETFConstituent, ExposureEntry
"""

from .analysis import AnalysisResult
from .exposure import (
    BreakdownHolding,
    ConcentrationWarning,
    EtfBreakdown,
    ExposureEntry,
    ExposureSource,
    SectorExposure,
    SharedSecurity,
    exposure_to_dataframe,
    sector_exposure_to_dataframe,
)
from .holdings import ETFConstituent
from .overlap import OverlapPair, SharedHolding, overlap_to_dataframe
from .portfolio import Holding

__all__ = [
    # Inputs
    "Holding",
    "ETFConstituent",
    # Exposure outputs
    "ExposureSource",
    "ExposureEntry",
    "SectorExposure",
    "ConcentrationWarning",
    "BreakdownHolding",
    "EtfBreakdown",
    "SharedSecurity",
    # Overlap outputs
    "SharedHolding",
    "OverlapPair",
    # Combined
    "AnalysisResult",
    # DataFrame adapters
    "exposure_to_dataframe",
    "sector_exposure_to_dataframe",
    "overlap_to_dataframe",
]
