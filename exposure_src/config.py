import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Base project directory (1 level up from exposure_src/config.py)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DEFAULT_CONCENTRATION_THRESHOLD = 10.0
DEFAULT_TOP_N = 20


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if not raw:
        return None
    path = Path(raw).expanduser()
    return path if path.is_absolute() else PROJECT_ROOT / path


# ===== ANALYSIS DEFAULTS =====
# Exposure share (percent) at which a company is flagged as a concentration risk
CONCENTRATION_THRESHOLD = _env_float(
    "EXPOSURE_CONCENTRATION_THRESHOLD", DEFAULT_CONCENTRATION_THRESHOLD
)

# How many exposure rows the dashboard shows
TOP_N = _env_int("EXPOSURE_TOP_N", DEFAULT_TOP_N)

# ===== STATIC TABLE OVERRIDES =====
# JSON {sector: [tickers]}; the built-in table is used when unset
SECTOR_MAP_PATH = _env_path("EXPOSURE_SECTOR_MAP_PATH")

# JSON {alias: canonical}; the built-in table is used when unset
CANONICAL_MAP_PATH = _env_path("EXPOSURE_CANONICAL_MAP_PATH")

LOG_LEVEL = os.getenv("EXPOSURE_LOG_LEVEL", "INFO")
