"""Logging initialization utilities using loguru."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from i18nstore.core.config import get_settings


def init_logging(level: str | None = None, sink: Any = sys.stderr) -> int:
    """Route i18nstore diagnostics to `sink` at `level`.

    Also enables the package logger, which is disabled on import.
    Returns the loguru handler id so callers can remove it again.
    """
    if level is None:
        level = get_settings().LOG_LEVEL

    logger.remove()
    logger.enable("i18nstore")
    return logger.add(
        sink,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}",
        backtrace=False,
        diagnose=False,
    )
