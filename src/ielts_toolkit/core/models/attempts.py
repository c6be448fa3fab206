"""
Module: attempts

Purpose:
    Provides Attempt - one learner's submission against one task (a reading
    passage or listening recording) - and ExamAttempt, a full exam made of
    several tasks. Both are immutable inputs to the scoring pipeline.

Key Functions:
    - Attempt.ordered_groups: Groups in section_order
    - Attempt.iter_questions(): Questions in canonical numbering order
    - Attempt.answers_for(question_id): Submitted answers for one question
    - Attempt.elapsed_seconds: Duration, derived from timestamps if needed
    - Attempt.from_dict() / ExamAttempt.from_dict(): Payload parsing
    - find_exam_layout(data): Reading or listening exam result layout

Dependencies:
    - dataclasses (std)
    - datetime (std)
    - functools (std)
    - .answers, .groups, .kinds, .questions

Used By:
    - scoring.statistics
    - scoring.review
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import cached_property
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .answers import SubmittedAnswer
from .groups import QuestionGroup
from .kinds import QuestionKind
from .questions import Question


@dataclass(frozen=True)
class Attempt:
    """
    One learner's attempt at one task (immutable).

    Timing fields are carried for display; scoring never reads them.

    Attributes:
        attempt_id: Unique identifier
        question_groups: Groups of the task definition
        answers: Submitted answers, at most one per question in practice
        title: Task title
        start_at: When the attempt started
        finished_at: When the attempt was submitted
        duration_seconds: Reported time spent

    Invariants:
        - question_id unique across all groups
        - question_order unique across all groups
        - duration_seconds >= 0 when set
    """

    attempt_id: str
    question_groups: Tuple[QuestionGroup, ...] = ()
    answers: Tuple[SubmittedAnswer, ...] = ()
    title: str = ""
    start_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate attempt on construction."""
        ids = [q.question_id for g in self.question_groups for q in g.questions]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Attempt {self.attempt_id} has duplicate question ids")
        orders = [q.question_order for g in self.question_groups for q in g.questions]
        if len(orders) != len(set(orders)):
            raise ValueError(f"Attempt {self.attempt_id} has duplicate question_order values")
        if self.duration_seconds is not None and self.duration_seconds < 0:
            raise ValueError(f"duration_seconds cannot be negative: {self.duration_seconds}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def ordered_groups(self) -> Tuple[QuestionGroup, ...]:
        """Groups sorted by section_order (stable for equal orders)."""
        return tuple(sorted(self.question_groups, key=lambda g: g.section_order))

    @cached_property
    def question_count(self) -> int:
        return sum(g.question_count for g in self.question_groups)

    @cached_property
    def answer_index(self) -> Dict[str, List[SubmittedAnswer]]:
        """Submitted answers keyed by question id, in submission order."""
        index: Dict[str, List[SubmittedAnswer]] = {}
        for answer in self.answers:
            index.setdefault(answer.question_id, []).append(answer)
        return index

    @property
    def elapsed_seconds(self) -> Optional[int]:
        """
        Time spent on the attempt.

        Returns:
            duration_seconds if reported, else finished_at - start_at in
            whole seconds, else None
        """
        if self.duration_seconds is not None:
            return self.duration_seconds
        if self.start_at is not None and self.finished_at is not None:
            return max(0, int((self.finished_at - self.start_at).total_seconds()))
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def iter_questions(self) -> Iterator[Tuple[QuestionGroup, Question]]:
        """
        Iterate questions in canonical order.

        Yields:
            (group, question) pairs, groups by section_order and questions
            by question_order within each group
        """
        for group in self.ordered_groups:
            for question in group.ordered_questions:
                yield group, question

    def answers_for(self, question_id: str) -> List[SubmittedAnswer]:
        """Submitted answers for a question (possibly empty)."""
        return list(self.answer_index.get(question_id, ()))

    def unknown_answer_ids(self) -> List[str]:
        """Question ids referenced by answers that match no question."""
        known = {q.question_id for _, q in self.iter_questions()}
        return [qid for qid in self.answer_index if qid not in known]

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize using the platform's attempt payload layout."""
        d: Dict[str, Any] = {
            "attempt_id": self.attempt_id,
            "task_data": {
                "title": self.title,
                "question_groups": [g.to_dict() for g in self.question_groups],
            },
            "answers": [a.to_dict() for a in self.answers],
        }
        if self.duration_seconds is not None:
            d["duration"] = self.duration_seconds
        if self.start_at is not None:
            d["start_at"] = self.start_at.isoformat()
        if self.finished_at is not None:
            d["finished_at"] = self.finished_at.isoformat()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Attempt:
        """
        Deserialize from an attempt payload.

        The task definition may be nested under ``task_data`` (stored
        attempts) or sit at the top level (freshly started attempts).
        """
        task = data.get("task_data") or data
        return cls(
            attempt_id=data.get("attempt_id") or "",
            question_groups=tuple(
                QuestionGroup.from_dict(g) for g in task.get("question_groups") or []
            ),
            answers=tuple(SubmittedAnswer.from_dict(a) for a in data.get("answers") or []),
            title=task.get("title") or "",
            start_at=_parse_datetime(data.get("start_at")),
            finished_at=_parse_datetime(data.get("finished_at")),
            duration_seconds=data.get("duration"),
        )

    def __repr__(self) -> str:
        return (
            f"Attempt({self.attempt_id!r}, groups={len(self.question_groups)}, "
            f"questions={self.question_count}, answers={len(self.answers)})"
        )


@dataclass(frozen=True)
class ExamAttempt:
    """
    Full exam attempt made of several task attempts (immutable).

    Each task (passage or recording) is one Part of the exam, in the order
    given.

    Attributes:
        exam_attempt_id: Unique identifier
        parts: One Attempt per task
        title: Exam name
        duration_seconds: Reported time spent on the whole exam
    """

    exam_attempt_id: str
    parts: Tuple[Attempt, ...] = ()
    title: str = ""
    duration_seconds: Optional[int] = None

    @property
    def question_count(self) -> int:
        return sum(part.question_count for part in self.parts)

    @classmethod
    def from_dict(cls, data: dict) -> ExamAttempt:
        """
        Deserialize an exam attempt.

        Three layouts are understood:
            - ``{"exam_attempt_id", "parts": [<attempt payload>, ...]}``
            - the reading exam result layout, where ``reading_exam`` holds
              ``reading_passage_id_part1..3`` task definitions
            - the listening exam result layout, where ``listening_exam``
              holds ``listening_task_id_part1..4`` task definitions

        In both exam result layouts ``answers`` maps question id to a list
        of selected values.

        Raises:
            ValueError: If the payload matches none of the layouts
        """
        if "parts" in data:
            parts = tuple(Attempt.from_dict(p) for p in data["parts"])
            return cls(
                exam_attempt_id=data.get("exam_attempt_id") or "",
                parts=parts,
                title=data.get("title") or "",
                duration_seconds=data.get("duration"),
            )

        layout = find_exam_layout(data)
        if layout is None:
            raise ValueError(
                "Unrecognised exam attempt layout: expected one of "
                f"'parts', {', '.join(repr(known.exam_key) for known in EXAM_LAYOUTS)}"
            )

        exam = data[layout.exam_key] or {}
        selected: Dict[str, Sequence[str]] = data.get("answers") or {}
        parts = []
        for key in layout.part_keys(exam):
            task = exam[key] or {}
            groups = tuple(QuestionGroup.from_dict(g) for g in task.get("question_groups") or [])
            answers = tuple(
                _answer_from_selected(question, selected[question.question_id])
                for group in groups
                for question in group.questions
                if selected.get(question.question_id)
            )
            parts.append(Attempt(
                attempt_id=task.get(layout.task_id_key) or key,
                question_groups=groups,
                answers=answers,
                title=task.get("title") or "",
            ))
        return cls(
            exam_attempt_id=data.get("exam_attempt_id") or "",
            parts=tuple(parts),
            title=exam.get(layout.name_key) or "",
            duration_seconds=data.get("duration"),
        )


@dataclass(frozen=True)
class ExamLayout:
    """
    Key names of one exam result payload layout.

    Attributes:
        exam_key: Top-level key holding the exam definition
        part_prefix: Prefix of the per-part task keys, followed by 1..N
        task_id_key: Id field inside each task definition
        name_key: Exam name field inside the exam definition
    """

    exam_key: str
    part_prefix: str
    task_id_key: str
    name_key: str

    def part_keys(self, exam: dict) -> List[str]:
        """Part task keys present in ``exam``, in part number order."""
        keys = [
            k for k in exam
            if k.startswith(self.part_prefix) and k[len(self.part_prefix):].isdigit()
        ]
        return sorted(keys, key=lambda k: int(k[len(self.part_prefix):]))


EXAM_LAYOUTS = (
    ExamLayout("reading_exam", "reading_passage_id_part", "passage_id", "reading_exam_name"),
    ExamLayout("listening_exam", "listening_task_id_part", "task_id", "listening_exam_name"),
)


def find_exam_layout(data: dict) -> Optional[ExamLayout]:
    """Layout whose exam key is present in ``data``, or None."""
    for layout in EXAM_LAYOUTS:
        if layout.exam_key in data:
            return layout
    return None


def _answer_from_selected(question: Question, values: Any) -> SubmittedAnswer:
    """Build the kind-specific answer from a flat list of selected values."""
    if isinstance(values, str):
        values = [values]
    elif not isinstance(values, (list, tuple)):
        values = []
    values = [v for v in values if isinstance(v, str)]
    first = values[0] if values else None
    if question.kind == QuestionKind.MULTIPLE_CHOICE:
        return SubmittedAnswer(question.question_id, choice_ids=tuple(values))
    if question.kind == QuestionKind.FILL_IN_BLANK:
        return SubmittedAnswer(question.question_id, filled_text_answer=first)
    if question.kind == QuestionKind.MATCHING:
        return SubmittedAnswer(question.question_id, matched_text_answer=first)
    return SubmittedAnswer(question.question_id, drag_item_id=first)


def _parse_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    # fromisoformat rejects a trailing "Z" before Python 3.11
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
