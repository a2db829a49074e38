"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a sortable, filesystem-safe string.

    Used to name per-session log directories (e.g., outs/logs/preview_20260101_120000).

    Example:
        now()
        # "20260101_120000"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
