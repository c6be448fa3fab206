"""
Serialization Utilities

Provides to/from JSON utilities for attempts and the statistics derived
from them.

- ``deserialize_*`` validate first, then build models via ``from_dict``
- ``serialize_*`` produce plain dicts suitable for ``json.dumps``
- Statistics are output only; there is no loader for them, they are always
  recomputed from an attempt
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.attempts import Attempt, ExamAttempt
from ..models.results import AttemptStats, QuestionResult
from ..schemas.validator import validate_attempt, validate_exam_attempt, ValidationError

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Attempt Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_attempt(attempt: Attempt) -> dict[str, Any]:
    """
    Serialize an Attempt to a dictionary.

    The output uses the stored-attempt layout and passes validation.
    """
    return attempt.to_dict()


def deserialize_attempt(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Attempt:
    """
    Deserialize an Attempt from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building models
        strict: Run the full JSON Schema as part of validation

    Returns:
        Attempt instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data violates a model invariant
    """
    if validate:
        validate_attempt(data, strict=strict)

    attempt = Attempt.from_dict(data)

    unknown = attempt.unknown_answer_ids()
    if unknown:
        logger.warning(
            f"Attempt {attempt.attempt_id}: {len(unknown)} answers reference unknown "
            f"questions: {unknown}"
        )
    return attempt


def deserialize_exam_attempt(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> ExamAttempt:
    """
    Deserialize an ExamAttempt from a dictionary.

    Accepts the ``parts`` layout and the reading and listening exam result
    layouts.

    Raises:
        ValidationError: If validate=True and the payload is invalid
        ValueError: If validate=False and the layout is not recognised
    """
    if validate:
        validate_exam_attempt(data)
    return ExamAttempt.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Result Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_statistics(stats: AttemptStats) -> dict[str, Any]:
    """Serialize AttemptStats, including the derived incorrect counts."""
    return stats.to_dict()


def serialize_review(results: Iterable[QuestionResult]) -> list[dict[str, Any]]:
    """Serialize per-question review results in order."""
    return [result.to_dict() for result in results]


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_attempt_json(path: Path, *, validate: bool = True, strict: bool = False) -> Attempt:
    """
    Load an attempt from a JSON file.

    Args:
        path: Path to the attempt JSON file
        validate: Whether to validate
        strict: Run the full JSON Schema

    Returns:
        Attempt instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Attempt file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON in {path.name}: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e

    attempt = deserialize_attempt(data, validate=validate, strict=strict)
    logger.info(f"Loaded attempt {attempt.attempt_id} with {attempt.question_count} questions from {path}")
    return attempt


def save_statistics_json(stats: AttemptStats, path: Path) -> None:
    """
    Save statistics to a JSON file.

    Args:
        stats: Statistics to save
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_statistics(stats), f, indent=2, ensure_ascii=False)
