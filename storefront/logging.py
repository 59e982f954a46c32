"""
Centralized logging configuration for storefront.

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Item added to cart")
    logger.warning("Product out of stock")
"""

import logging
import sys
from functools import cache

from storefront import config

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level(level_name: str | None = None) -> int:
    """Resolve a level name, falling back to the configured LOG_LEVEL then INFO."""
    name = (level_name or config.LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def _configure_package_logger() -> None:
    """Attach a console handler to the package logger once."""
    package_logger = logging.getLogger("storefront")

    # Only configure if no handlers exist
    if package_logger.handlers:
        return

    package_logger.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        LOG_FORMAT_SIMPLE if config.LOG_FORMAT_STYLE == "simple" else LOG_FORMAT
    )
    handler.setFormatter(formatter)

    package_logger.addHandler(handler)


# Configure once on module import
_configure_package_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def set_log_level(level_name: str) -> None:
    """Change the package log level at runtime (used by the demo CLI)."""
    logging.getLogger("storefront").setLevel(_get_log_level(level_name))


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Sanitize a caller-supplied string (e.g. an item name) before logging it.

    Escapes newlines and control characters so a name cannot forge extra
    log lines, and truncates long values.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if None
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


# Convenience exports
__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "set_log_level",
    "sanitize_string_for_logging",
]
