"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_attempt,
    deserialize_attempt,
    deserialize_exam_attempt,
    serialize_statistics,
    serialize_review,
    load_attempt_json,
    save_statistics_json,
)

__all__ = [
    "serialize_attempt",
    "deserialize_attempt",
    "deserialize_exam_attempt",
    "serialize_statistics",
    "serialize_review",
    "load_attempt_json",
    "save_statistics_json",
]
