"""Centralized logging configuration."""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Logging level (defaults to INFO)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = logging.INFO

    logger = logging.getLogger(name)

    # Only configure if no handlers exist
    if not logger.handlers:
        logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

        logger.addHandler(handler)

    return logger


def set_log_level(prefix: str, level_name: str) -> None:
    """
    Change the level of every configured logger under a name prefix.

    Args:
        prefix: Logger name prefix (e.g. 'src.goals')
        level_name: Standard level name ('DEBUG', 'INFO', ...)

    Raises:
        ValueError: If level_name is not a standard logging level
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name!r}")

    for name in list(logging.root.manager.loggerDict):
        if name != prefix and not name.startswith(prefix + "."):
            continue
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
