import logging
import re
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from exposure_src import config

_console = Console(stderr=True)


class ValueRedactionFilter(logging.Filter):
    """Masks monetary amounts so log output can be attached to bug reports."""

    PATTERNS = [
        (r"[$€£]\s?-?[0-9][0-9,]*(?:\.[0-9]+)?[kKmM]?", "[VALUE]"),
        (r"-?[0-9][0-9,]*(?:\.[0-9]+)?\s?(?:USD|EUR|GBP)\b", "[VALUE]"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True

        msg = record.getMessage()
        for pattern, replacement in self.PATTERNS:
            msg = re.sub(pattern, replacement, msg)

        record.msg = msg
        record.args = None
        return True


class ExposureFormatter(logging.Formatter):
    PREFIX = "  \033[90mEXPOSURE\033[0m ↳ "

    COLORS = {
        "DEBUG": "\033[90mDEBUG\033[0m",
        "INFO": "\033[34mINFO \033[0m",
        "WARNING": "\033[33mWARN \033[0m",
        "ERROR": "\033[31mERROR\033[0m",
        "CRITICAL": "\033[31mFATAL\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_name = record.levelname
        color_level = self.COLORS.get(level_name, level_name)

        log_fmt = f"{self.PREFIX}{color_level} {record.name}: {record.getMessage()}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            if record.exc_text:
                log_fmt += f"\n{record.exc_text}"

        return log_fmt


def configure_root_logger(
    level: Optional[int] = None,
    use_rich: bool = False,
    redact_values: bool = False,
) -> logging.Handler:
    """
    Install a single stderr handler on the root logger.

    Args:
        level: Root level; EXPOSURE_LOG_LEVEL when None
        use_rich: Use rich's handler instead of the plain prefixed formatter
        redact_values: Mask monetary amounts in every message

    Returns:
        The installed handler
    """
    if level is None:
        level = level_from_name(config.LOG_LEVEL)

    root = logging.getLogger()
    root.setLevel(level)

    for h in root.handlers[:]:
        root.removeHandler(h)

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=_console, show_path=False, rich_tracebacks=True
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ExposureFormatter())

    if redact_values:
        handler.addFilter(ValueRedactionFilter())

    root.addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Returns a named logger.
    Assumes configure_root_logger() has been called.
    """
    return logging.getLogger(name)


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as "debug" into a logging constant."""
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default
