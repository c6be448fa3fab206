"""
Schema Validation Utilities

Validates attempt and exam attempt payloads before they are turned into
models.

Two levels:
- Basic checks (always): required fields, known question kinds, unique
  question ids and orders per task, so a bad payload fails with a path
  instead of a KeyError or a model ValueError
- Strict mode: full JSON Schema validation against
  ``attempt.schema.json`` via ``jsonschema``

Answer rows are deliberately loose: a row whose fields do not fit its
question is scored as "not answered", never rejected here.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.attempts import EXAM_LAYOUTS, find_exam_layout
from ..models.kinds import QuestionKind, UnknownQuestionKindError


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_attempt(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate an attempt payload.

    Args:
        data: Attempt dictionary (stored or freshly started layout)
        strict: If True, also run the full JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Attempt must be an object, got {type(data).__name__}")

    if "task_data" in data:
        task = data["task_data"]
        task_path = "task_data"
        if not isinstance(task, dict):
            raise ValidationError("task_data must be an object", path=task_path)
    else:
        task = data
        task_path = ""

    _validate_task(task, task_path)

    # null answers mean nothing was submitted
    answers = data.get("answers")
    if answers is None:
        answers = []
    if not isinstance(answers, list):
        raise ValidationError("answers must be a list", path="answers")
    for i, answer in enumerate(answers):
        if not isinstance(answer, dict) or not isinstance(answer.get("question_id"), str):
            raise ValidationError(
                "Answer must be an object with a string question_id",
                path=f"answers[{i}]",
            )

    _validate_duration(data)

    if strict:
        schema = _load_schema("attempt")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def validate_exam_attempt(data: dict[str, Any]) -> None:
    """
    Validate an exam attempt payload.

    The ``parts`` layout validates each part as an attempt. The reading and
    listening exam result layouts validate every part task definition and
    require ``answers`` to map question ids to lists of selected values.

    Raises:
        ValidationError: If data is invalid or matches no known layout
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Exam attempt must be an object, got {type(data).__name__}")

    if "parts" in data:
        if not isinstance(data["parts"], list):
            raise ValidationError("parts must be a list", path="parts")
        for i, part in enumerate(data["parts"]):
            try:
                validate_attempt(part)
            except ValidationError as e:
                raise ValidationError(
                    f"Invalid exam part {i + 1}: {e}",
                    path=f"parts[{i}].{e.path}" if e.path else f"parts[{i}]",
                    errors=e.errors,
                ) from e
        _validate_duration(data)
        return

    layout = find_exam_layout(data)
    if layout is None:
        raise ValidationError(
            "Unrecognised exam attempt layout",
            errors=["Missing field: parts, " + ", ".join(known.exam_key for known in EXAM_LAYOUTS)],
        )

    exam = data[layout.exam_key]
    if not isinstance(exam, dict):
        raise ValidationError(f"{layout.exam_key} must be an object", path=layout.exam_key)
    for key in layout.part_keys(exam):
        task_path = f"{layout.exam_key}.{key}"
        if not isinstance(exam[key], dict):
            raise ValidationError("Part task must be an object", path=task_path)
        _validate_task(exam[key], task_path)

    answers = data.get("answers")
    if answers is None:
        answers = {}
    if not isinstance(answers, dict):
        raise ValidationError("answers must map question ids to lists", path="answers")
    for qid, values in answers.items():
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValidationError(
                f"Selected values for {qid!r} must be a list of strings",
                path=f"answers.{qid}",
            )

    _validate_duration(data)


def _validate_task(task: dict[str, Any], task_path: str) -> None:
    """Validate the question groups of one task definition."""
    groups = task.get("question_groups")
    groups_path = f"{task_path}.question_groups" if task_path else "question_groups"
    if not isinstance(groups, list):
        raise ValidationError(
            "Missing required field: question_groups",
            path=groups_path,
            errors=["Missing field: question_groups"],
        )

    seen_ids: set[str] = set()
    seen_orders: set[int] = set()
    for i, group in enumerate(groups):
        _validate_group(group, f"{groups_path}[{i}]", seen_ids, seen_orders)


def _validate_duration(data: dict[str, Any]) -> None:
    duration = data.get("duration")
    if duration is not None and (
        not isinstance(duration, int) or isinstance(duration, bool) or duration < 0
    ):
        raise ValidationError(
            f"Invalid duration: {duration} (must be non-negative integer)",
            path="duration",
        )


def _validate_group(
    data: Any, path: str, seen_ids: set[str], seen_orders: set[int]
) -> None:
    """Validate a question group and its questions."""
    if not isinstance(data, dict):
        raise ValidationError("Group must be an object", path=path)

    questions = data.get("questions")
    if not isinstance(questions, list):
        raise ValidationError(
            "Group missing required field: questions",
            path=path,
            errors=["Missing field: questions"],
        )

    marker = data.get("question_type")
    group_kind = None
    if marker is not None:
        group_kind = _parse_kind(marker, f"{path}.question_type")

    for i, question in enumerate(questions):
        q_path = f"{path}.questions[{i}]"
        kind = _validate_question(question, q_path)
        if group_kind is None:
            group_kind = kind
        elif kind != group_kind:
            raise ValidationError(
                f"Mixed question kinds in group: {group_kind} and {kind}",
                path=f"{q_path}.question_type",
            )
        qid = question["question_id"]
        if qid in seen_ids:
            raise ValidationError(f"Duplicate question_id: {qid!r}", path=f"{q_path}.question_id")
        seen_ids.add(qid)
        order = question["question_order"]
        if order in seen_orders:
            raise ValidationError(
                f"Duplicate question_order: {order}", path=f"{q_path}.question_order"
            )
        seen_orders.add(order)


def _validate_question(data: Any, path: str) -> QuestionKind:
    """Validate one question; returns its kind."""
    if not isinstance(data, dict):
        raise ValidationError("Question must be an object", path=path)

    required = ["question_id", "question_order", "question_type"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    qid = data["question_id"]
    if not isinstance(qid, str) or not qid:
        raise ValidationError(f"Invalid question_id: {qid!r}", path=f"{path}.question_id")

    order = data["question_order"]
    if not isinstance(order, int) or order < 1:
        raise ValidationError(
            f"Invalid question_order: {order} (must be integer >= 1)",
            path=f"{path}.question_order",
        )

    point = data.get("point")
    if point is not None and (not isinstance(point, int) or point < 0):
        raise ValidationError(
            f"Invalid point: {point} (must be non-negative integer)",
            path=f"{path}.point",
        )

    kind = _parse_kind(data["question_type"], f"{path}.question_type")
    if kind == QuestionKind.MULTIPLE_CHOICE and not isinstance(data.get("choices") or [], list):
        raise ValidationError("choices must be a list", path=f"{path}.choices")
    return kind


def _parse_kind(value: Any, path: str) -> QuestionKind:
    try:
        return QuestionKind.parse(value)
    except UnknownQuestionKindError as e:
        raise ValidationError(str(e), path=path) from e
