"""Logging setup for the steam_machine_id package logger."""

import logging
import sys

from steam_machine_id.config import get_settings

LOGGER_NAME = "steam_machine_id"
DEFAULT_LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    name = (level if level is not None else get_settings().log_level).upper()
    resolved = logging.getLevelName(name)
    if isinstance(resolved, int):
        return resolved
    print(
        f"Warning: Invalid log level '{name}'. "
        f"Defaulting to {logging.getLevelName(DEFAULT_LOG_LEVEL)}.",
        file=sys.stderr,
    )
    return DEFAULT_LOG_LEVEL


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: A level number or name. If None, Settings.log_level is used.

    Repeated calls only change the level; a single stderr handler is kept.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
