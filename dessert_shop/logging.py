"""
Logging setup for the dessert shop.

The root logger gets a single stdout handler the first time this module
is imported. Modules then ask for their own logger:

    from dessert_shop.logging import get_logger
    logger = get_logger(__name__)

Environment:
    LOG_LEVEL  level name, default INFO
    SHOP_ENV   "production" switches to the short line format
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    root = logging.getLogger()
    # Leave an already-configured host application alone
    if root.handlers:
        return

    level = _get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    short = os.environ.get("SHOP_ENV") == "production"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if short else LOG_FORMAT))
    root.addHandler(handler)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically get_logger(__name__)."""
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None, max_length: int = 32) -> str:
    """
    Make a dessert or order id safe to put in a log line.

    Control characters are escaped so an id can't start a forged log
    entry, and long ids are cut to max_length followed by "...".
    Empty ids come back as "N/A".
    """
    if not id_value:
        return "N/A"
    safe_value = (
        str(id_value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) > max_length:
        return safe_value[:max_length] + "..."
    return safe_value


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
]
