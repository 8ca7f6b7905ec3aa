"""Centralized logging configuration."""

import sys

from loguru import logger as loguru_logger

from tickets.config import settings

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
    )
)


def configure_logging(level: str | None = None) -> int:
    """Replace loguru's default handler with a stderr sink.

    Returns the handler id so callers can remove it again.
    """
    loguru_logger.remove()
    return loguru_logger.add(sys.stderr, format=log_format, level=level or settings.LOG_LEVEL)
