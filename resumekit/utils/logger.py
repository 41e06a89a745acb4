"""
loguru setup for export sessions (Tier 1 logging).

One session writes a full DEBUG log to <log_dir>/<context>.log and mirrors
messages at console_level to stdout. Library modules never add sinks; they log
through their context wrappers (contexts/exporting/logger.py).
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from resumekit import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Replace loguru's sinks with a session log file plus a console sink.

    Args:
        context_name: Names the log file (e.g. "export" -> export.log)
        log_dir: Session directory, created if missing
        extra_provenance: Extra key/value lines for the provenance header
        console_level: Minimum level mirrored to stdout

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def close_logger() -> None:
    """Remove all sinks, flushing and closing the session log file."""
    logger.remove()


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """Write the session header: command line, working directory, interpreter and package version."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]} | resumekit: {__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
