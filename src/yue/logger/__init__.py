"""Logging setup for the Yue package."""

from yue.logger.logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
