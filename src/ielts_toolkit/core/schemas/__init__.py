"""
Schemas Package

JSON Schema definitions and validation utilities for attempt payloads.
"""

from .validator import (
    validate_attempt,
    validate_exam_attempt,
    ValidationError,
)

__all__ = [
    "validate_attempt",
    "validate_exam_attempt",
    "ValidationError",
]
