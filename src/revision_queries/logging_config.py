"""Logging setup for the revision_queries package."""

from __future__ import annotations

import logging
import sys

from revision_queries.config import load_settings

LOGGER_NAME = "revision_queries"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    ``level`` defaults to ``LOG_LEVEL`` from the environment settings. Calling
    it again only updates the level; no second handler is added. Raises
    ``ValueError`` for an unknown level name.
    """
    level = (level or load_settings().app.log_level).upper()
    levels = logging.getLevelNamesMapping()
    if level not in levels:
        raise ValueError(f"Unknown log level {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(levels[level])
    return logger
