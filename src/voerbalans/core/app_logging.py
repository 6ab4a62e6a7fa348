"""Logging configuration helpers."""

import logging

from voerbalans.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure the voerbalans logger with a single stream handler.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to settings.log_level.
    """
    logger = logging.getLogger("voerbalans")
    logger.setLevel((level or settings.log_level).upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
