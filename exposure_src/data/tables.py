"""
Loading of the static lookup tables.

Tables are loaded once at process start and wrapped read-only so they can
be shared by any number of concurrent analysis calls.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from exposure_src.core.errors import ConfigurationError
from exposure_src.utils.logging_config import get_logger
from exposure_src.utils.tickers import normalize_ticker

from .canonical_tickers import DEFAULT_CANONICAL_MAP
from .sector_map import DEFAULT_SECTOR_MAP, build_sector_map

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> object:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Table file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Table file {path} is not valid JSON: {e}") from e


def load_sector_map(path: Optional[PathLike] = None) -> Mapping[str, str]:
    """
    Load the ticker -> sector table.

    Args:
        path: JSON file of {sector: [tickers]}; built-in table when None

    Returns:
        Read-only mapping keyed by normalized ticker
    """
    if path is None:
        return MappingProxyType(dict(DEFAULT_SECTOR_MAP))

    raw = _read_json(path)
    if not isinstance(raw, dict) or not all(
        isinstance(v, list) for v in raw.values()
    ):
        raise ConfigurationError(
            f"Sector table {path} must be an object of sector -> [tickers]"
        )

    groups: Dict[str, List[str]] = {
        str(sector): [str(t) for t in tickers] for sector, tickers in raw.items()
    }
    sector_map = build_sector_map(groups)
    logger.info(f"Loaded {len(sector_map)} sector assignments from {path}")
    return MappingProxyType(sector_map)


def load_canonical_map(path: Optional[PathLike] = None) -> Mapping[str, str]:
    """
    Load the alias -> canonical ticker table.

    Args:
        path: JSON file of {alias: canonical}; built-in table when None

    Returns:
        Read-only mapping with normalized keys and values
    """
    if path is None:
        raw: object = DEFAULT_CANONICAL_MAP
    else:
        raw = _read_json(path)

    if not isinstance(raw, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in raw.items()
    ):
        raise ConfigurationError(
            f"Canonical table {path} must be an object of alias -> ticker"
        )

    alias_map = {normalize_ticker(k): normalize_ticker(v) for k, v in raw.items()}
    if path is not None:
        logger.info(f"Loaded {len(alias_map)} ticker aliases from {path}")
    return MappingProxyType(alias_map)
