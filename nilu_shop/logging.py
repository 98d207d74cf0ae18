"""
Logging setup for the storefront.

Usage:
    from nilu_shop.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level(level_name: str | None = None) -> int:
    if level_name is None:
        level_name = os.environ.get("LOG_LEVEL", "INFO")
    return getattr(logging, level_name.upper(), logging.INFO)


def configure_logging(level_name: str | None = None) -> None:
    """Attach a stdout handler to the package logger once."""
    root = logging.getLogger("nilu_shop")
    root.setLevel(_get_log_level(level_name))

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def mask_phone(value: str | None) -> str:
    """Keep only the last 4 digits of a phone number for log lines."""
    if not value:
        return "N/A"
    digits = "".join(ch for ch in value if ch.isdigit())
    if len(digits) <= 4:
        return "****"
    return "*" * (len(digits) - 4) + digits[-4:]


__all__ = ["LOG_FORMAT", "configure_logging", "get_logger", "mask_phone"]
