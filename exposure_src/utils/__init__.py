from .logging_config import configure_root_logger, get_logger
from .tickers import normalize_ticker

__all__ = ["configure_root_logger", "get_logger", "normalize_ticker"]
