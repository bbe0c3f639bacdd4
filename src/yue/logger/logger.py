"""Global logger configuration for the Yue project."""

import logging
import sys

from yue.core.config import Settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "yue",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    settings = Settings.load()
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Create default logger instance for the project
logger = setup_logger()
