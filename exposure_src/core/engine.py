# core/engine.py
"""
Exposure Engine - Runs every exposure analysis over injected lookup tables.

UI-agnostic: the presentation layer hands in a portfolio snapshot and the
ETF constituent table and receives plain data back.
"""

from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar

from exposure_src import config
from exposure_src.core.aggregation.breakdown import (
    compute_etf_breakdown,
    find_shared_securities,
)
from exposure_src.core.aggregation.canonical import TickerCanonicalizer
from exposure_src.core.aggregation.concentration import detect_concentration
from exposure_src.core.aggregation.constituents import (
    ConstituentTable,
    normalize_constituent_table,
)
from exposure_src.core.aggregation.lookthrough import compute_exposure, top_exposures
from exposure_src.core.aggregation.overlap import compute_overlap
from exposure_src.core.aggregation.sector import SectorResolver, compute_sector_exposure
from exposure_src.core.contracts import (
    DataQuality,
    validate_constituent_table,
    validate_holdings,
    validate_missing_constituents,
    validate_percentage_sum,
)
from exposure_src.core.errors import AnalysisError, ErrorPhase, ErrorType
from exposure_src.data.tables import load_canonical_map, load_sector_map
from exposure_src.models import (
    AnalysisResult,
    ConcentrationWarning,
    EtfBreakdown,
    ExposureEntry,
    Holding,
    OverlapPair,
    SectorExposure,
    SharedSecurity,
)
from exposure_src.utils.logging_config import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


class ExposureEngine:
    """Holds the static tables and runs the analysis stages. UI-agnostic."""

    def __init__(
        self,
        sector_map: Optional[Mapping[str, str]] = None,
        canonical_map: Optional[Mapping[str, str]] = None,
        concentration_threshold: Optional[float] = None,
        top_n: Optional[int] = None,
    ):
        self.canonicalizer = TickerCanonicalizer(canonical_map)
        self.resolver = SectorResolver(sector_map, canonicalizer=self.canonicalizer)
        self.concentration_threshold = (
            config.CONCENTRATION_THRESHOLD
            if concentration_threshold is None
            else concentration_threshold
        )
        self.top_n = config.TOP_N if top_n is None else top_n

    @classmethod
    def from_config(cls) -> "ExposureEngine":
        """Build an engine from the tables and defaults named in config."""
        return cls(
            sector_map=load_sector_map(config.SECTOR_MAP_PATH),
            canonical_map=load_canonical_map(config.CANONICAL_MAP_PATH),
            concentration_threshold=config.CONCENTRATION_THRESHOLD,
            top_n=config.TOP_N,
        )

    # --- single operations -------------------------------------------------

    def resolve_sector(self, ticker: str) -> str:
        return self.resolver.resolve(ticker)

    def canonicalize(self, ticker: str) -> str:
        return self.canonicalizer.canonicalize(ticker)

    def sector_exposure(self, holdings: List[Holding]) -> List[SectorExposure]:
        return compute_sector_exposure(holdings, self.resolver)

    def exposure(
        self, holdings: List[Holding], etf_constituents: Optional[ConstituentTable]
    ) -> List[ExposureEntry]:
        return compute_exposure(holdings, etf_constituents, self.canonicalizer)

    def overlap(
        self, etf_tickers: Sequence[str], etf_constituents: Optional[ConstituentTable]
    ) -> List[OverlapPair]:
        return compute_overlap(etf_tickers, etf_constituents, self.canonicalizer)

    def concentration(
        self, exposure: List[ExposureEntry], threshold_percent: Optional[float] = None
    ) -> List[ConcentrationWarning]:
        if threshold_percent is None:
            threshold_percent = self.concentration_threshold
        return detect_concentration(exposure, threshold_percent)

    def etf_breakdown(
        self, holdings: List[Holding], etf_constituents: Optional[ConstituentTable]
    ) -> List[EtfBreakdown]:
        return compute_etf_breakdown(holdings, etf_constituents, self.canonicalizer)

    def shared_securities(
        self, holdings: List[Holding], etf_constituents: Optional[ConstituentTable]
    ) -> List[SharedSecurity]:
        return find_shared_securities(holdings, etf_constituents, self.canonicalizer)

    # --- full pass ---------------------------------------------------------

    def analyze(
        self,
        holdings: List[Holding],
        etf_constituents: Optional[ConstituentTable] = None,
    ) -> AnalysisResult:
        """
        Run every analysis stage over one portfolio snapshot.

        A stage that fails unexpectedly is logged and reported in
        `errors`; its output is left empty and the other stages still run.

        Args:
            holdings: Portfolio snapshot
            etf_constituents: Fund ticker -> constituent rows

        Returns:
            AnalysisResult with every derived structure and a quality summary
        """
        errors: List[AnalysisError] = []
        quality = DataQuality()
        table = normalize_constituent_table(etf_constituents)

        held_etfs = [h.ticker for h in holdings if h.ticker in table]

        quality.extend(validate_holdings(holdings))
        quality.extend(validate_constituent_table({t: table[t] for t in held_etfs}))
        quality.extend(validate_missing_constituents(held_etfs, table))

        logger.info(
            f"Analyzing {len(holdings)} holdings ({len(held_etfs)} ETFs, "
            f"{len(table)} constituent tables)."
        )

        sector_rows = self._run_stage(
            ErrorPhase.SECTOR_EXPOSURE,
            lambda: self.sector_exposure(holdings),
            [],
            errors,
        )
        exposures = self._run_stage(
            ErrorPhase.LOOK_THROUGH,
            lambda: self.exposure(holdings, table),
            [],
            errors,
        )
        quality.extend(validate_percentage_sum(exposures))

        overlap = self._run_stage(
            ErrorPhase.OVERLAP,
            lambda: self.overlap(held_etfs, table),
            [],
            errors,
        )
        warnings = self._run_stage(
            ErrorPhase.CONCENTRATION,
            lambda: self.concentration(exposures),
            [],
            errors,
        )
        breakdown = self._run_stage(
            ErrorPhase.BREAKDOWN,
            lambda: self.etf_breakdown(holdings, table),
            [],
            errors,
        )
        shared = self._run_stage(
            ErrorPhase.BREAKDOWN,
            lambda: self.shared_securities(holdings, table),
            [],
            errors,
        )

        return AnalysisResult(
            sector_exposure=sector_rows,
            exposures=exposures,
            top_exposures=top_exposures(exposures, self.top_n),
            overlap=overlap,
            warnings=warnings,
            etf_breakdown=breakdown,
            shared_securities=shared,
            quality=quality.to_summary(),
            errors=[e.to_dict() for e in errors],
        )

    @staticmethod
    def _run_stage(
        phase: ErrorPhase,
        stage: Callable[[], R],
        default: Any,
        errors: List[AnalysisError],
    ) -> R:
        try:
            return stage()
        except Exception as e:
            logger.error(f"{phase.value} failed: {e}", exc_info=True)
            errors.append(
                AnalysisError(
                    phase=phase,
                    error_type=ErrorType.CALCULATION_FAILED,
                    item=phase.value.lower(),
                    message=f"{phase.value} failed: {e}",
                    fix_hint="Check the holdings and constituent payloads",
                )
            )
            return default
