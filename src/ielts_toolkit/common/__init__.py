"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .durations import format_duration

__all__ = [
    "format_duration",
]
