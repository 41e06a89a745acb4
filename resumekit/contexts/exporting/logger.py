"""
Exporting context logger.

Provides logging interface for exporting context with automatic [export] prefix.
All exporting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumekit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[export]"


def setup_export_logger(log_dir: Path, badge_location: str = "", verbose: bool = False) -> Path:
    """
    Setup logger for exporting context.

    Configures loguru with provenance tracking and export-specific context.

    Args:
        log_dir: Directory for this export session
        badge_location: Badge image location recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="export",
        log_dir=log_dir,
        extra_provenance={"Badge location": badge_location or "(default)"},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [export] prefix


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [export] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [export] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level export-specific logging helpers


def log_export_start(resume_name: str, fmt: str, output_dir: Path) -> None:
    """Log start of an export with context."""
    _log_info(f"Starting {fmt.upper()} export: {resume_name}")
    _log_debug(f"  Output directory: {output_dir}")


def log_export_result(resume_name: str, result) -> None:  # result: ExportResult
    """
    Log export result with diagnostics.

    Args:
        resume_name: Candidate name
        result: ExportResult from export_resume()
    """
    if result.success:
        _log_success(
            f"{resume_name}: {result.fmt.upper()} export succeeded "
            f"({result.size_bytes} bytes, {result.elapsed_s:.2f}s)"
        )
        if result.page_count is not None:
            _log_debug(f"  Pages: {result.page_count}")
        if result.output_path:
            _log_debug(f"  File: {result.output_path}")
    else:
        _log_error(f"{resume_name}: {result.fmt.upper()} export failed ({result.elapsed_s:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
