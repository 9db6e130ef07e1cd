from __future__ import annotations

import logging
from typing import Optional, Dict, Any


def get_logger(name: str = "phonecheck.provider") -> logging.Logger:
    """Return a logger for provider clients.

    Loggers live under the ``phonecheck`` hierarchy so that whatever
    ``setup_logger`` configured for the entry point also applies here.
    """

    if not name.startswith("phonecheck"):
        name = f"phonecheck.{name}"
    return logging.getLogger(name)


def log_event(
    logger: logging.Logger,
    level: int,
    message: str,
    extra: Optional[Dict[str, Any]] = None,
    exc_info: bool = False,
) -> None:
    """Log an event with optional structured extra context.

    Args:
        logger: Logger instance from ``get_logger``.
        level: Logging level from ``logging`` (e.g., logging.INFO).
        message: Human-readable message.
        extra: Optional dictionary with additional context.
        exc_info: Attach the active exception traceback.
    """

    if extra is None:
        logger.log(level, message, exc_info=exc_info)
    else:
        logger.log(level, f"{message} | extra={extra}", exc_info=exc_info)
