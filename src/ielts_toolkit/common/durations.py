"""Formatting helpers for attempt timing metadata."""

from __future__ import annotations


def format_duration(seconds: int) -> str:
    """
    Render a duration the way result pages show it.

    Args:
        seconds: Non-negative whole seconds

    Returns:
        "1h 2m 3s", "4m 5s" or "7s"

    Raises:
        ValueError: If seconds is negative

    Example:
        >>> format_duration(3723)
        '1h 2m 3s'
        >>> format_duration(60)
        '1m 0s'
    """
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative: {seconds}")
    seconds = int(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
