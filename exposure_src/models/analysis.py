"""
Combined output of one analysis pass.
"""

from typing import Any, Dict, List

from pydantic import Field

from .base import ApiModel
from .exposure import (
    ConcentrationWarning,
    EtfBreakdown,
    ExposureEntry,
    SectorExposure,
    SharedSecurity,
)
from .overlap import OverlapPair


class AnalysisResult(ApiModel):
    """
    Everything the presentation layer needs for the exposure views.

    Attributes:
        sector_exposure: Portfolio-wide sector weights
        exposures: Full look-through exposure list (untruncated)
        top_exposures: The first top_n exposures
        overlap: Complete upper-triangular ETF overlap matrix
        warnings: Concentration warnings over the full exposure list
        etf_breakdown: Per-fund constituent breakdown
        shared_securities: Companies reached through several funds
        quality: DataQuality summary (score, issues)
        errors: Stage failures as AnalysisError dicts
    """

    sector_exposure: List[SectorExposure] = Field(default_factory=list)
    exposures: List[ExposureEntry] = Field(default_factory=list)
    top_exposures: List[ExposureEntry] = Field(default_factory=list)
    overlap: List[OverlapPair] = Field(default_factory=list)
    warnings: List[ConcentrationWarning] = Field(default_factory=list)
    etf_breakdown: List[EtfBreakdown] = Field(default_factory=list)
    shared_securities: List[SharedSecurity] = Field(default_factory=list)
    quality: Dict[str, Any] = Field(default_factory=dict)
    errors: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors
