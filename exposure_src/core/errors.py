# core/errors.py
"""
Structured error types for the exposure analysis.

These types enable:
- Machine-readable error tracking per analysis stage
- Bug reports with portfolio values stripped out
- Structured debugging via JSON logs
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class ErrorPhase(Enum):
    """Stage where error occurred."""
    INGESTION = "INGESTION"
    SECTOR_EXPOSURE = "SECTOR_EXPOSURE"
    LOOK_THROUGH = "LOOK_THROUGH"
    OVERLAP = "OVERLAP"
    CONCENTRATION = "CONCENTRATION"
    BREAKDOWN = "BREAKDOWN"


class ErrorType(Enum):
    """Type of error for categorization."""
    VALIDATION_FAILED = "VALIDATION_FAILED"
    MISSING_CONSTITUENTS = "MISSING_CONSTITUENTS"
    CALCULATION_FAILED = "CALCULATION_FAILED"
    UNKNOWN = "UNKNOWN"


class ConfigurationError(ValueError):
    """A static lookup table could not be loaded or is inconsistent."""


class CanonicalMapError(ConfigurationError):
    """The alias -> canonical table contains a cycle or a bad entry."""


@dataclass
class AnalysisError:
    """Structured error for debugging and bug reporting."""
    phase: ErrorPhase
    error_type: ErrorType
    item: str  # ticker or stage name (safe to share)
    message: str
    fix_hint: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "phase": self.phase.value,
            "error_type": self.error_type.value,
            "item": self.item,
            "message": self.message,
            "fix_hint": self.fix_hint,
            "timestamp": self.timestamp,
        }

    def anonymize(self) -> dict:
        """Return dict safe for a public bug report (no timestamps)."""
        data = self.to_dict()
        del data["timestamp"]
        return data
