"""
Centralized logging configuration for byteunits.

This module provides functions for setting up logging in a consistent
way across the entire package. This helps avoid double logging and
ensures that logging is properly configured regardless of how the
package is imported or used.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ROOT_LOGGER_NAME = "byteunits"
HANDLER_NAME = "byteunits.stdout"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_logging_configured = False


def configure_logging(level: Optional[str] = None, format_str: Optional[str] = None):
    """
    Configure the root logger for byteunits.

    Only the first call has an effect; later calls are ignored so that
    importing the package from several places never stacks handlers. Use
    update_log_level() to change the level afterwards.

    Args:
        level: The logging level as a string ('debug', 'info', etc.), defaults to 'warning'
        format_str: The log format string (defaults to DEFAULT_FORMAT)
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = logging.WARNING if level is None else _get_level_from_string(level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    # Only replace the handler this package installs
    for handler in logger.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_str or DEFAULT_FORMAT))
    logger.addHandler(handler)

    # Prevent propagation to the root logger to avoid double logging
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    The name is prefixed with 'byteunits' if it's not already, so every
    logger in the package hangs off the configured root.

    Args:
        name: The name of the logger

    Returns:
        A logger instance
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def _get_level_from_string(level: str) -> int:
    """
    Convert a string log level to a logging level constant.

    Unknown names fall back to WARNING.
    """
    return _LEVELS.get(level.lower(), logging.WARNING)


def update_log_level(level: str):
    """
    Update the log level of all byteunits loggers.

    Args:
        level: The new log level as a string ('debug', 'info', etc.)
    """
    log_level = _get_level_from_string(level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers:
        handler.setLevel(log_level)
