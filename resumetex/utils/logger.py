"""
Generic logger setup utilities for per-session logging.

Provides reusable loguru configuration with provenance tracking. Each preview
build gets its own log directory, so a log file always describes one run.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from resumetex import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console: TextIO = sys.stdout,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for one session of a context.

    Replaces all existing sinks with a DEBUG file sink at
    {log_dir}/{context_name}.log and a colorized console sink, then writes the
    provenance header.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "render")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console: Stream for the console sink. Pass sys.stderr when stdout carries
            generated output.
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        from resumetex.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/preview_20260101_120000"),
            extra_provenance={"Record": "jane_doe.yaml"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    # Per-pass render diagnostics are DEBUG, so only the file sees them
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(console, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Log where a session came from.

    Writes the command line, working directory and interpreter and package
    versions, followed by any extra context, between two rule lines.
    """
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}  resumetex: {__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(rule)
