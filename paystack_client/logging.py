"""
Logging helpers for the Paystack client.

The package logs under the ``paystack_client`` logger and leaves handler
setup to the host application.

Usage:
    from paystack_client.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
from functools import cache

PACKAGE_LOGGER_NAME = "paystack_client"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
if not any(isinstance(handler, logging.NullHandler) for handler in _package_logger.handlers):
    _package_logger.addHandler(logging.NullHandler())


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str | int) -> None:
    """Set the level of the package logger; handlers stay the host's concern."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _package_logger.setLevel(level)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make a caller-supplied value safe to put in a log line.

    Newlines and tabs are escaped so a reference cannot forge log entries,
    and long values are truncated.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if empty
    """
    if not value:
        return "N/A"
    safe_value = (
        str(value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "sanitize_string_for_logging",
]
