"""
Module: answers

Purpose:
    Provides SubmittedAnswer - one learner response to one question. Only
    the field relevant to the question's kind is expected to be filled; the
    matcher decides what "answered" means, this model never rejects a shape.

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.attempts.Attempt
    - scoring.matcher
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True, slots=True)
class SubmittedAnswer:
    """
    Learner response to a single question (immutable).

    Attributes:
        question_id: Id of the answered question
        choice_ids: Selected choices (multiple choice)
        filled_text_answer: Text typed into a blank (fill-in-blank)
        matched_text_answer: Text chosen for a matching question
        drag_item_id: Item dropped into the zone (drag-and-drop)

    Example:
        >>> SubmittedAnswer("q1", choice_ids=("a", "c"))
        SubmittedAnswer('q1', choice_ids=('a', 'c'))
    """

    question_id: str
    choice_ids: Tuple[str, ...] = ()
    filled_text_answer: Optional[str] = None
    matched_text_answer: Optional[str] = None
    drag_item_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Drop values of the wrong type so they read as "not answered"."""
        object.__setattr__(self, "choice_ids", _as_id_tuple(self.choice_ids))
        object.__setattr__(self, "filled_text_answer", _as_text(self.filled_text_answer))
        object.__setattr__(self, "matched_text_answer", _as_text(self.matched_text_answer))
        object.__setattr__(self, "drag_item_id", _as_text(self.drag_item_id))

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "choice_ids": list(self.choice_ids),
            "filled_text_answer": self.filled_text_answer,
            "matched_text_answer": self.matched_text_answer,
            "drag_item_id": self.drag_item_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SubmittedAnswer:
        """
        Deserialize from an attempt payload.

        Accepts both the stored attempt keys (``choice_ids``,
        ``filled_text_answer``, ``matched_text_answer``) and the submit
        payload keys (``choices``, ``data_filled``, ``data_matched``).
        Values of the wrong type are dropped, which leaves the question
        unanswered rather than failing the whole attempt.
        """
        choice_ids = data.get("choice_ids")
        if choice_ids is None:
            choice_ids = data.get("choices")
        return cls(
            question_id=data["question_id"],
            choice_ids=choice_ids,
            filled_text_answer=_first_present(data, "filled_text_answer", "data_filled"),
            matched_text_answer=_first_present(data, "matched_text_answer", "data_matched"),
            drag_item_id=data.get("drag_item_id"),
        )

    def __repr__(self) -> str:
        fields = [repr(self.question_id)]
        if self.choice_ids:
            fields.append(f"choice_ids={self.choice_ids!r}")
        if self.filled_text_answer is not None:
            fields.append(f"filled_text_answer={self.filled_text_answer!r}")
        if self.matched_text_answer is not None:
            fields.append(f"matched_text_answer={self.matched_text_answer!r}")
        if self.drag_item_id is not None:
            fields.append(f"drag_item_id={self.drag_item_id!r}")
        return f"SubmittedAnswer({', '.join(fields)})"


def _first_present(data: dict, *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_id_tuple(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(v for v in value if isinstance(v, str))
