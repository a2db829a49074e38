"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from typing import List

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_record_issues(issues: List[str]) -> None:
    """Log completeness issues found on a record (generation still proceeds)."""
    for issue in issues:
        _log_warning(f"Incomplete record: {issue}")


def log_generation_result(sections: List[str], num_chars: int) -> None:
    """Log which sections made it into the generated document."""
    if sections:
        _log_debug(f"Generated {num_chars} chars with sections: {', '.join(sections)}")
    else:
        _log_debug(f"Generated {num_chars} chars with header only")
