"""
Module: groups

Purpose:
    Provides QuestionGroup - an ordered, homogeneous cluster of questions
    that share one instruction (one "Part" of an IELTS task) - and DragItem,
    the tokens available to every drop zone of a drag-and-drop group.

Key Functions:
    - QuestionGroup.ordered_questions: Questions sorted by question_order
    - QuestionGroup.drag_item_content(id): Display text for a drag item
    - QuestionGroup.to_dict() / QuestionGroup.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .kinds, .questions

Used By:
    - core.models.attempts.Attempt
    - scoring.aggregator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .kinds import QuestionKind
from .questions import Question, question_from_dict


@dataclass(frozen=True, slots=True)
class DragItem:
    """A draggable token assignable to exactly one zone."""

    id: str
    content: str = ""

    def to_dict(self) -> dict:
        return {"drag_item_id": self.id, "content": self.content}

    @classmethod
    def from_dict(cls, data: dict) -> DragItem:
        return cls(id=data["drag_item_id"], content=data.get("content") or "")


@dataclass(frozen=True)
class QuestionGroup:
    """
    Ordered group of same-kind questions (immutable).

    Attributes:
        group_id: Unique identifier
        section_label: Display label like "Questions 1-5"
        section_order: Position of the group within the task
        instruction: Shared instruction text
        question_type: Kind shared by every question (None only when empty)
        questions: Questions as authored
        drag_items: Tokens for drag-and-drop groups, empty otherwise

    Invariants:
        - Every question's kind equals question_type
        - question_type is set whenever questions is non-empty
    """

    group_id: str
    section_label: str = ""
    section_order: int = 0
    instruction: str = ""
    question_type: Optional[QuestionKind] = None
    questions: Tuple[Question, ...] = ()
    drag_items: Tuple[DragItem, ...] = ()

    def __post_init__(self) -> None:
        """Validate group homogeneity on construction."""
        if self.questions and self.question_type is None:
            raise ValueError(f"Group {self.group_id} has questions but no question_type")
        for question in self.questions:
            if question.kind != self.question_type:
                raise ValueError(
                    f"Group {self.group_id} is {self.question_type} but question "
                    f"{question.question_id} is {question.kind}"
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def ordered_questions(self) -> Tuple[Question, ...]:
        """Questions sorted by question_order."""
        return tuple(sorted(self.questions, key=lambda q: q.question_order))

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def total_points(self) -> int:
        """Maximum points available in this group."""
        return sum(q.point for q in self.questions)

    def drag_item_content(self, drag_item_id: str) -> Optional[str]:
        """
        Look up the display text of a drag item.

        Args:
            drag_item_id: Item id as submitted or stored in the answer key

        Returns:
            Item content, or None if the group has no such item
        """
        for item in self.drag_items:
            if item.id == drag_item_id:
                return item.content
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        d = {
            "group_id": self.group_id,
            "section_label": self.section_label,
            "section_order": self.section_order,
            "instruction": self.instruction,
            "questions": [q.to_dict() for q in self.questions],
            "drag_items": [item.to_dict() for item in self.drag_items],
        }
        if self.question_type is not None:
            d["question_type"] = self.question_type.wire_index
        return d

    @classmethod
    def from_dict(cls, data: dict) -> QuestionGroup:
        """
        Deserialize from dictionary.

        The group marker is optional in API payloads; when absent it is
        taken from the first question.

        Raises:
            UnknownQuestionKindError: If any question_type is unknown
            ValueError: If the group is not homogeneous
        """
        questions = tuple(question_from_dict(q) for q in data.get("questions") or [])
        if data.get("question_type") is not None:
            question_type = QuestionKind.parse(data["question_type"])
        elif questions:
            question_type = questions[0].kind
        else:
            question_type = None

        return cls(
            group_id=data.get("group_id") or data.get("question_group_id", ""),
            section_label=data.get("section_label") or "",
            section_order=data.get("section_order") or 0,
            instruction=data.get("instruction") or "",
            question_type=question_type,
            questions=questions,
            drag_items=tuple(DragItem.from_dict(d) for d in data.get("drag_items") or []),
        )

    def __repr__(self) -> str:
        return (
            f"QuestionGroup({self.group_id!r}, order={self.section_order}, "
            f"type={self.question_type}, questions={len(self.questions)})"
        )
