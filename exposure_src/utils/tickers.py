from typing import Any


def normalize_ticker(ticker: Any) -> str:
    """
    Normalize a ticker symbol for exact-match lookups.

    Applied once at every ingestion boundary so downstream code can
    compare tickers with plain dict lookups.

    Args:
        ticker: Raw ticker value (non-strings normalize to "")

    Returns:
        Stripped, uppercased ticker
    """
    if not isinstance(ticker, str):
        return ""
    return ticker.strip().upper()
