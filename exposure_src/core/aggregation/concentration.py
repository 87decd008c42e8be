"""Concentration risk flags over look-through exposure."""

from typing import List, Optional

from exposure_src.config import DEFAULT_CONCENTRATION_THRESHOLD
from exposure_src.models import ConcentrationWarning, ExposureEntry
from exposure_src.utils.logging_config import get_logger

logger = get_logger(__name__)


def detect_concentration(
    exposure: List[ExposureEntry],
    threshold_percent: Optional[float] = None,
) -> List[ConcentrationWarning]:
    """
    Flag every company whose blended exposure reaches the threshold.

    The threshold is inclusive: an entry at exactly 10.0% is flagged.

    Args:
        exposure: Look-through exposure entries
        threshold_percent: Risk threshold in percent (default 10.0)

    Returns:
        One warning per qualifying entry, in input order
    """
    if threshold_percent is None:
        threshold_percent = DEFAULT_CONCENTRATION_THRESHOLD

    warnings = [
        ConcentrationWarning(
            ticker=e.ticker,
            exposure_percent=e.exposure_percent,
            message=(
                f"High concentration: {e.ticker} is "
                f"{e.exposure_percent:.1f}% of portfolio exposure"
            ),
        )
        for e in exposure
        if e.exposure_percent >= threshold_percent
    ]

    if warnings:
        logger.info(
            f"{len(warnings)} concentration warning(s) at >= {threshold_percent}%."
        )
    return warnings
