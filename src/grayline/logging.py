"""
Logging configuration for the grayline package.

This module provides a standardized logging setup for all modules
within grayline, ensuring consistent log formatting and control.
"""

import logging
import os
import sys

# Default logging level - Debug messages are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

ROOT_LOGGER_NAME = "grayline"

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure the logger if it hasn't been already
    if not logger.handlers:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        if root_logger.level != logging.NOTSET:
            log_level = root_logger.level
        else:
            log_level = _get_log_level()
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def _get_log_level() -> int:
    """
    Get the logging level based on environment variables.

    Returns:
        The appropriate logging level as an int
    """
    log_level_str = os.environ.get("GRAYLINE_LOG_LEVEL", "").upper()

    if log_level_str == "DEBUG":
        return logging.DEBUG
    elif log_level_str == "INFO":
        return logging.INFO
    elif log_level_str == "WARNING":
        return logging.WARNING
    elif log_level_str == "ERROR":
        return logging.ERROR
    elif log_level_str == "CRITICAL":
        return logging.CRITICAL
    else:
        return DEFAULT_LOG_LEVEL


def set_log_level(level: int) -> None:
    """
    Set the logging level for all grayline loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Child loggers created by get_logger carry their own level and handler
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger):
            continue
        if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
