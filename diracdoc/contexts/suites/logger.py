"""
Suites context logger.

Provides logging interface for batch runs with automatic [batch] prefix.
"""

from pathlib import Path

from loguru import logger

from diracdoc.utils.logger import setup_logger as _setup_logger
from diracdoc.utils.timestamp import format_elapsed

CONTEXT_PREFIX = "[batch]"


def setup_batch_logger(log_dir: Path, executable: Path, verbose: bool = False) -> Path:
    """
    Setup logger for a batch run.

    Args:
        log_dir: Directory for this batch session
        executable: dirac executable recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="batch",
        log_dir=log_dir,
        extra_provenance={"dirac executable": executable},
        console_level="DEBUG" if verbose else "INFO",
    )


def _log_info(message: str) -> None:
    """Log info message with [batch] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [batch] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [batch] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [batch] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_batch_summary(summary, elapsed_time: float) -> None:
    """
    Log the outcome of a batch.

    Args:
        summary: BatchSummary from run_batch()
        elapsed_time: Time taken by the batch in seconds
    """
    message = (
        f"{summary.succeeded}/{summary.total} expressions computed "
        f"({format_elapsed(elapsed_time)})"
    )
    if summary.failed:
        _log_warning(f"{message}, {summary.failed} rendered verbatim")
    else:
        _log_success(message)
