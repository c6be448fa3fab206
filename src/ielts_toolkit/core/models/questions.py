"""
Module: questions

Purpose:
    Provides the four question variants - one frozen dataclass per kind -
    and the ``Question`` union over them. Each variant carries only the
    answer key fields that make sense for its kind, so matchers never have
    to check optional fields.

Key Functions:
    - MultipleChoiceQuestion.correct_choice_ids: Calculated from choices
    - question_from_dict(data): Build the right variant from a payload
    - <Variant>.to_dict() / <Variant>.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - typing (std)
    - .kinds.QuestionKind

Used By:
    - core.models.groups.QuestionGroup
    - scoring.matcher
    - scoring.review

Design Deviation from the web client:
    The client kept every kind in one loosely-typed object with a numeric
    ``question_type`` and optional fields. Here each kind is its own type and
    ``kind`` is a class attribute, so it can never disagree with the payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, FrozenSet, Tuple, Union

from .kinds import QuestionKind, UnknownQuestionKindError


def _validate_common(question_id: str, question_order: int, point: int) -> None:
    """Checks shared by every variant."""
    if not question_id:
        raise ValueError("question_id must be non-empty")
    if question_order < 1:
        raise ValueError(f"question_order must be >= 1: {question_order}")
    if point < 0:
        raise ValueError(f"point cannot be negative: {point}")


@dataclass(frozen=True, slots=True)
class Choice:
    """
    A selectable option of a multiple-choice question.

    Attributes:
        id: Choice identifier submitted by the learner
        label: Display label like "A"
        content: Option text
        is_correct: Whether this option belongs to the answer key
        order: Display order within the question
    """

    id: str
    label: str
    content: str = ""
    is_correct: bool = False
    order: int = 0

    def to_dict(self) -> dict:
        return {
            "choice_id": self.id,
            "label": self.label,
            "content": self.content,
            "is_correct": self.is_correct,
            "choice_order": self.order,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Choice:
        return cls(
            id=data["choice_id"],
            label=data.get("label", ""),
            content=data.get("content") or "",
            is_correct=bool(data.get("is_correct", False)),
            order=data.get("choice_order", 0),
        )


@dataclass(frozen=True, slots=True)
class MultipleChoiceQuestion:
    """
    Multiple-choice question with one or more correct options.

    Scoring is all-or-nothing: the submitted choice set must equal the set of
    choices marked ``is_correct``.

    Attributes:
        question_id: Unique identifier
        question_order: 1-based position used for numbering
        choices: Options in display order
        number_of_correct_answers: How many options the learner should pick
        point: Weight awarded when correct
        explanation: Display-only explanation
        instruction: Question stem shown above the choices

    Example:
        >>> q = MultipleChoiceQuestion("q1", 1, (
        ...     Choice("a", "A", is_correct=True), Choice("b", "B")))
        >>> q.correct_choice_ids
        frozenset({'a'})
    """

    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE

    question_id: str
    question_order: int
    choices: Tuple[Choice, ...] = ()
    number_of_correct_answers: int = 1
    point: int = 1
    explanation: str = ""
    instruction: str = ""

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _validate_common(self.question_id, self.question_order, self.point)
        if self.number_of_correct_answers < 1:
            raise ValueError(
                f"number_of_correct_answers must be >= 1: {self.number_of_correct_answers}"
            )
        ids = [choice.id for choice in self.choices]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate choice ids in question {self.question_id}")

    @property
    def correct_choice_ids(self) -> FrozenSet[str]:
        """Ids of all choices marked correct. Calculated, never stored."""
        return frozenset(choice.id for choice in self.choices if choice.is_correct)

    def choice_label(self, choice_id: str) -> str:
        """Display label for a choice id, or the id itself if unknown."""
        for choice in self.choices:
            if choice.id == choice_id:
                return choice.label
        return choice_id

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "question_order": self.question_order,
            "question_type": self.kind.wire_index,
            "point": self.point,
            "explanation": self.explanation,
            "number_of_correct_answers": self.number_of_correct_answers,
            "instruction_for_choice": self.instruction,
            "choices": [choice.to_dict() for choice in self.choices],
        }

    @classmethod
    def from_dict(cls, data: dict) -> MultipleChoiceQuestion:
        choices = sorted(
            (Choice.from_dict(c) for c in data.get("choices") or []),
            key=lambda c: c.order,
        )
        return cls(
            question_id=data["question_id"],
            question_order=data["question_order"],
            choices=tuple(choices),
            number_of_correct_answers=data.get("number_of_correct_answers") or 1,
            point=_point(data),
            explanation=data.get("explanation") or "",
            instruction=data.get("instruction_for_choice") or "",
        )


@dataclass(frozen=True, slots=True)
class FillInBlankQuestion:
    """
    Gap in the group text. ``correct_answer`` is compared case-insensitively
    after trimming surrounding whitespace.
    """

    kind: ClassVar[QuestionKind] = QuestionKind.FILL_IN_BLANK

    question_id: str
    question_order: int
    blank_index: int
    correct_answer: str
    point: int = 1
    explanation: str = ""

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _validate_common(self.question_id, self.question_order, self.point)
        if self.blank_index < 0:
            raise ValueError(f"blank_index cannot be negative: {self.blank_index}")

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "question_order": self.question_order,
            "question_type": self.kind.wire_index,
            "point": self.point,
            "explanation": self.explanation,
            "blank_index": self.blank_index,
            "correct_answer": self.correct_answer,
        }

    @classmethod
    def from_dict(cls, data: dict) -> FillInBlankQuestion:
        return cls(
            question_id=data["question_id"],
            question_order=data["question_order"],
            blank_index=data.get("blank_index") or 0,
            correct_answer=data.get("correct_answer") or "",
            point=_point(data),
            explanation=data.get("explanation") or "",
        )


@dataclass(frozen=True, slots=True)
class MatchingQuestion:
    """Free-text matching question, normalised the same way as fill-in-blank."""

    kind: ClassVar[QuestionKind] = QuestionKind.MATCHING

    question_id: str
    question_order: int
    correct_answer_for_matching: str
    point: int = 1
    explanation: str = ""
    instruction: str = ""

    def __post_init__(self) -> None:
        _validate_common(self.question_id, self.question_order, self.point)

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "question_order": self.question_order,
            "question_type": self.kind.wire_index,
            "point": self.point,
            "explanation": self.explanation,
            "instruction_for_matching": self.instruction,
            "correct_answer_for_matching": self.correct_answer_for_matching,
        }

    @classmethod
    def from_dict(cls, data: dict) -> MatchingQuestion:
        return cls(
            question_id=data["question_id"],
            question_order=data["question_order"],
            correct_answer_for_matching=data.get("correct_answer_for_matching") or "",
            point=_point(data),
            explanation=data.get("explanation") or "",
            instruction=data.get("instruction_for_matching") or "",
        )


@dataclass(frozen=True, slots=True)
class DragAndDropQuestion:
    """
    One drop zone of a drag-and-drop group.

    Attributes:
        question_id: Unique identifier
        question_order: 1-based position used for numbering
        zone_index: Position of the drop zone in the group text
        correct_drag_item_id: Id of the drag item that belongs in this zone
        point: Weight awarded when correct
        explanation: Display-only explanation
    """

    kind: ClassVar[QuestionKind] = QuestionKind.DRAG_AND_DROP

    question_id: str
    question_order: int
    zone_index: int
    correct_drag_item_id: str
    point: int = 1
    explanation: str = ""

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _validate_common(self.question_id, self.question_order, self.point)
        if self.zone_index < 0:
            raise ValueError(f"zone_index cannot be negative: {self.zone_index}")

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "question_order": self.question_order,
            "question_type": self.kind.wire_index,
            "point": self.point,
            "explanation": self.explanation,
            "zone_index": self.zone_index,
            "drag_item_id": self.correct_drag_item_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DragAndDropQuestion:
        return cls(
            question_id=data["question_id"],
            question_order=data["question_order"],
            zone_index=data.get("zone_index") or 0,
            correct_drag_item_id=data.get("drag_item_id") or "",
            point=_point(data),
            explanation=data.get("explanation") or "",
        )


Question = Union[
    MultipleChoiceQuestion,
    FillInBlankQuestion,
    MatchingQuestion,
    DragAndDropQuestion,
]

QUESTION_TYPES = {
    QuestionKind.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionKind.FILL_IN_BLANK: FillInBlankQuestion,
    QuestionKind.MATCHING: MatchingQuestion,
    QuestionKind.DRAG_AND_DROP: DragAndDropQuestion,
}


def _point(data: dict[str, Any]) -> int:
    # Payloads send null for unweighted questions
    point = data.get("point")
    return 1 if point is None else point


def question_from_dict(data: dict[str, Any]) -> Question:
    """
    Deserialize any question variant, dispatching on ``question_type``.

    Args:
        data: Question payload with a numeric or string ``question_type``

    Returns:
        The matching variant instance

    Raises:
        UnknownQuestionKindError: If ``question_type`` is missing or unknown
    """
    if "question_type" not in data:
        raise UnknownQuestionKindError(None)
    kind = QuestionKind.parse(data["question_type"])
    return QUESTION_TYPES[kind].from_dict(data)
