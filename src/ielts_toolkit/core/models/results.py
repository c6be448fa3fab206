"""
Module: results

Purpose:
    Provides the derived values produced by scoring: per-question results,
    per-part subtotals and attempt-level statistics. None of these are ever
    a source of truth; they are recomputed from an Attempt on demand.

Key Classes:
    - AnswerStatus: CORRECT / INCORRECT / NOT_ANSWERED
    - PerformanceTier: Display tier for a score percentage
    - QuestionResult: One reviewed question
    - PartStat: Subtotal for one group (or one exam part)
    - AttemptStats: Whole-attempt statistics

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .kinds.QuestionKind

Used By:
    - scoring.aggregator
    - scoring.statistics
    - scoring.review
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .kinds import QuestionKind


class AnswerStatus(str, Enum):
    """Outcome of evaluating one question."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NOT_ANSWERED = "not_answered"

    def __str__(self) -> str:
        return self.value


class PerformanceTier(str, Enum):
    """Display tier for a score percentage, highest first."""
    EXPERT = "Expert"
    ADVANCED = "Advanced"
    INTERMEDIATE = "Intermediate"
    BEGINNER = "Beginner"

    def __str__(self) -> str:
        return self.value


def percentage(part: int, whole: int) -> int:
    """
    Integer percentage, 0 when whole is 0.

    Rounds half up to match the platform's score cards (Python's ``round``
    rounds half to even).

    Example:
        >>> percentage(2, 3)
        67
        >>> percentage(1, 8)
        13
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """
    Reviewed question, as shown on the per-question review screen.

    Attributes:
        number: Canonical 1-based number across the attempt
        question_id: Question identifier
        kind: Question kind
        status: Evaluation outcome
        correct_answer: Answer key values for display
        user_answer: Submitted values for display (empty if not answered)
        point: Question weight
        explanation: Display-only explanation
    """

    number: int
    question_id: str
    kind: QuestionKind
    status: AnswerStatus
    correct_answer: Tuple[str, ...] = ()
    user_answer: Tuple[str, ...] = ()
    point: int = 1
    explanation: str = ""

    @property
    def is_correct(self) -> bool:
        return self.status == AnswerStatus.CORRECT

    @property
    def points_awarded(self) -> int:
        return self.point if self.is_correct else 0

    def to_dict(self) -> dict:
        return {
            "question_index": self.number,
            "question_id": self.question_id,
            "question_type": self.kind.wire_index,
            "status": str(self.status),
            "is_correct": self.is_correct,
            "correct_answer": list(self.correct_answer),
            "user_answer": list(self.user_answer),
            "point": self.point,
            "explanation": self.explanation,
        }


@dataclass(frozen=True, slots=True)
class PartStat:
    """
    Subtotal for one part (immutable).

    Attributes:
        title: Display title like "Part 1"
        total_questions: Questions in the part
        correct: Correctly answered questions
        not_answered: Questions left blank
        points: Sum of ``point`` over correct questions
        percentage: round(correct / total_questions * 100), 0 when empty

    Invariants:
        - correct + not_answered <= total_questions
        - incorrect is derived, never stored
    """

    title: str
    total_questions: int
    correct: int
    not_answered: int = 0
    points: int = 0
    percentage: int = 0

    def __post_init__(self) -> None:
        """Validate counts on construction."""
        if min(self.total_questions, self.correct, self.not_answered, self.points) < 0:
            raise ValueError(f"PartStat counts cannot be negative: {self!r}")
        if self.correct + self.not_answered > self.total_questions:
            raise ValueError(
                f"correct ({self.correct}) + not_answered ({self.not_answered}) "
                f"exceeds total_questions ({self.total_questions})"
            )

    @property
    def incorrect(self) -> int:
        return self.total_questions - self.correct - self.not_answered

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "total_questions": self.total_questions,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "not_answered": self.not_answered,
            "points": self.points,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class AttemptStats:
    """
    Attempt-level statistics (immutable).

    Attributes:
        total_questions: Sum over parts
        correct_answers: Sum over parts
        incorrect_answers: total - correct - not_answered
        not_answered: Sum over parts
        score_percentage: round(correct / total * 100), 0 when empty
        part_stats: Per-part subtotals in part order
        total_points: Sum of points over parts
        performance_tier: Display tier for score_percentage

    Invariants:
        - total_questions == correct_answers + incorrect_answers + not_answered
    """

    total_questions: int
    correct_answers: int
    incorrect_answers: int
    not_answered: int
    score_percentage: int
    part_stats: Tuple[PartStat, ...] = ()
    total_points: int = 0
    performance_tier: PerformanceTier = PerformanceTier.BEGINNER

    def __post_init__(self) -> None:
        """Validate the exhaustiveness invariant on construction."""
        if self.correct_answers + self.incorrect_answers + self.not_answered != self.total_questions:
            raise ValueError(
                f"Counts do not add up: {self.correct_answers} correct + "
                f"{self.incorrect_answers} incorrect + {self.not_answered} not answered "
                f"!= {self.total_questions} total"
            )

    @property
    def answered(self) -> int:
        return self.correct_answers + self.incorrect_answers

    def to_dict(self) -> dict:
        return {
            "total_questions": self.total_questions,
            "correct_answers": self.correct_answers,
            "incorrect_answers": self.incorrect_answers,
            "not_answered": self.not_answered,
            "score_percentage": self.score_percentage,
            "total_points": self.total_points,
            "performance_tier": str(self.performance_tier),
            "part_stats": [p.to_dict() for p in self.part_stats],
        }

    def __repr__(self) -> str:
        return (
            f"AttemptStats({self.correct_answers}/{self.total_questions}, "
            f"{self.score_percentage}%, tier={self.performance_tier.value})"
        )
