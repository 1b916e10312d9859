"""
Documents context logger.

Provides logging interface for the documents context with automatic [document] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[document]"


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [document] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")
