"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_compilation_start(tex_path: Path, command: str) -> None:
    """Log start of typesetting with context."""
    _log_info(f"Running {command}...")
    _log_debug(f"  Source: {tex_path}")


def log_compilation_result(name: str, result, elapsed_time: float) -> None:
    """
    Log typesetting result with diagnostics.

    Args:
        name: Document short name
        result: CompilationResult from typeset()
        elapsed_time: Time taken to typeset
    """
    if result.success:
        _log_success(f"{name}: {len(result.warnings)} warnings ({elapsed_time:.2f}s)")
        _log_debug(f"  PDF: {result.pdf_path}")
    else:
        _log_error(f"{name}: typesetting failed with code {result.returncode} ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > 5:
            _log_error(f"  ... and {len(result.errors) - 5} more errors")

    for i, warn in enumerate(result.warnings[:3], 1):
        _log_debug(f"  Warning {i}: {warn}")

    # Full compiler output goes to the log file only
    if not result.success and result.stdout:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nCOMPILER STDOUT:\n{'=' * 80}\n{result.stdout}\n"
        )


def log_compiler_missing(error: OSError) -> None:
    """Log a typesetting tool that could not be started."""
    _log_error(f"Typesetting skipped, compiler not found: {error.filename or error}")
