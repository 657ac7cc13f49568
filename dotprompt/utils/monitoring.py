"""Logging setup for dotprompt (Loguru sinks)."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dotprompt.config import settings


def setup_logging(
    log_level: str | None = None, log_file: str | Path | None = None
) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Logging level (e.g., "DEBUG", "INFO", "WARNING", "ERROR").
            Defaults to ``settings.log_level``.
        log_file: Optional log file path for file output. Defaults to
            ``settings.log_file``.
    """
    log_level = (log_level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>dotprompt</cyan> - <level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file:
        logger.add(
            str(log_file),
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
            "{name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="7 days",
            compression="gz",
        )

    logger.debug("Logging configured: level={}, file={}", log_level, log_file)
