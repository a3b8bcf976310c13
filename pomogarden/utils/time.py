"""
Countdown formatting helpers.

The clock works in whole seconds; these helpers turn a countdown value into
the text shown on the timer face.
"""

from datetime import datetime, timezone


def format_countdown(seconds: int) -> str:
    """
    Format a countdown as zero-padded ``MM:SS``.

    Minutes are not wrapped into hours, so 90 minutes renders as ``90:00``.

    Args:
        seconds: Non-negative number of seconds remaining

    Returns:
        Formatted countdown string
    """
    if seconds < 0:
        raise ValueError(f"Countdown cannot be negative: {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def utc_now_iso() -> str:
    """Wall-clock UTC timestamp used for storage bookkeeping."""
    return datetime.now(timezone.utc).isoformat()
