"""Loguru sink configuration shared by scripts."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str = "INFO") -> int:
    """
    Replace the default loguru sink with a stderr sink at ``level``.

    Returns the handler id so callers can remove it again.
    """
    logger.remove()
    return logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
