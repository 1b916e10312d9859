"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time for directory names.

    Returns:
        Timestamp like "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_elapsed(seconds: float) -> str:
    """
    Format a duration in compact form.

    Examples:
        format_elapsed(3.2)    # "3.20s"
        format_elapsed(125.0)  # "2m 5s"
    """
    if seconds < 60:
        return f"{seconds:.2f}s"

    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"

    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m"
