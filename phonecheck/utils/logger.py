"""Logging utility for PhoneCheck."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config_loader import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "phonecheck",
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Attach stdout (and optionally file) handlers to the ``phonecheck`` logger.

    Every module logs under ``phonecheck.*``, so configuring the root of that
    hierarchy once per entry point is enough. Calling it again replaces the
    handlers instead of stacking them (Streamlit re-runs the script on every
    interaction).

    Args:
        name: Logger name.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to console.

    Returns:
        Configured logger instance.
    """
    level = getattr(logging, log_level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def setup_logger_from_settings(
    settings: "Settings",
    log_level: Optional[str] = None,
) -> logging.Logger:
    """``setup_logger`` with level and file taken from ``Settings``.

    Args:
        settings: Loaded settings.
        log_level: Overrides ``settings.log_level`` (CLI flag).
    """
    return setup_logger(
        log_level=log_level or settings.log_level,
        log_file=settings.log_file,
    )
