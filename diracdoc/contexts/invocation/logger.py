"""
Invocation context logger.

Provides logging interface for the invocation context with automatic [invoke] prefix.
All invocation modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[invoke]"


def _log_warning(message: str) -> None:
    """Log warning message with [invoke] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [invoke] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_invocation_start(command: str) -> None:
    """Log the command line about to be executed."""
    _log_debug(f"Running: {command}")


def log_invocation_result(expression: str, result) -> None:
    """
    Log the outcome of a single dirac invocation.

    Args:
        expression: Expression passed with -e
        result: InvocationResult from DiracInvocation.run()
    """
    if result.succeeded:
        _log_debug(f"OK: {expression}")
    else:
        _log_warning(f"dirac exited with code {result.exit_code} for: {expression}")

    # Raw tool output keeps its own line breaks
    if result.raw_output:
        logger.opt(raw=True).debug(f"{result.raw_output.rstrip()}\n")
    if result.stderr:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nDIRAC STDERR:\n{'=' * 80}\n{result.stderr.rstrip()}\n"
        )
