"""Ticker canonicalization for dual-class securities."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from exposure_src.core.errors import CanonicalMapError
from exposure_src.data.canonical_tickers import DEFAULT_CANONICAL_MAP
from exposure_src.models import ExposureEntry
from exposure_src.utils.logging_config import get_logger
from exposure_src.utils.tickers import normalize_ticker

logger = get_logger(__name__)


def _collapse_chains(alias_map: Mapping[str, str]) -> Dict[str, str]:
    """
    Point every alias directly at its final canonical ticker.

    Raises:
        CanonicalMapError: If following aliases loops back on itself
    """
    normalized: Dict[str, str] = {}
    for alias, canonical in alias_map.items():
        key = normalize_ticker(alias)
        target = normalize_ticker(canonical)
        if not key or not target:
            raise CanonicalMapError(f"Empty ticker in alias entry {alias!r} -> {canonical!r}")
        normalized[key] = target

    collapsed: Dict[str, str] = {}
    for alias in normalized:
        seen = [alias]
        target = normalized[alias]
        while target in normalized and normalized[target] != target:
            if target in seen:
                raise CanonicalMapError(
                    f"Alias cycle in canonical table: {' -> '.join(seen + [target])}"
                )
            seen.append(target)
            target = normalized[target]
        collapsed[alias] = target

    return collapsed


class TickerCanonicalizer:
    """
    Maps alias tickers (secondary share classes) to one canonical ticker.

    Must run before any grouping so both listings of a company land in
    the same row and combine additively.
    """

    def __init__(self, alias_map: Optional[Mapping[str, str]] = None):
        if alias_map is None:
            alias_map = DEFAULT_CANONICAL_MAP
        self._aliases = MappingProxyType(_collapse_chains(alias_map))

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def canonicalize(self, ticker: str) -> str:
        """
        Return the canonical ticker for an alias, else the input unchanged.

        Matching is case-insensitive; unknown tickers keep their original
        spelling. Idempotent because every alias points at a ticker that
        is not itself an alias.
        """
        return self._aliases.get(normalize_ticker(ticker), ticker)

    def __call__(self, ticker: str) -> str:
        return self.canonicalize(ticker)

    def aliases_of(self, canonical: str) -> List[str]:
        """All alias tickers that merge into the given canonical ticker."""
        target = normalize_ticker(canonical)
        return sorted(a for a, c in self._aliases.items() if c == target and a != c)

    def merge_exposure_entries(
        self, entries: List[ExposureEntry]
    ) -> List[ExposureEntry]:
        """
        Merge already-computed exposure rows whose tickers share a canonical.

        Values and percentages are summed and source lists concatenated.
        Result is sorted by total exposure value, largest first.

        Args:
            entries: Exposure rows, possibly keyed by alias tickers

        Returns:
            New list of merged rows; the input is left untouched
        """
        merged: Dict[str, dict] = {}
        for entry in entries:
            canonical = normalize_ticker(self.canonicalize(entry.ticker))
            existing = merged.get(canonical)
            if existing is None:
                merged[canonical] = {
                    "ticker": canonical,
                    "total_exposure_value": entry.total_exposure_value,
                    "exposure_percent": entry.exposure_percent,
                    "sources": list(entry.sources),
                }
            else:
                existing["total_exposure_value"] += entry.total_exposure_value
                existing["exposure_percent"] += entry.exposure_percent
                existing["sources"].extend(entry.sources)

        if len(merged) < len(entries):
            logger.debug(f"Merged {len(entries) - len(merged)} alias exposure rows.")

        return sorted(
            (ExposureEntry(**row) for row in merged.values()),
            key=lambda e: e.total_exposure_value,
            reverse=True,
        )
