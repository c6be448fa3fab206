"""
Core Models Package

Immutable, validated data models that serve as the single source of truth
for task definitions, submissions and the statistics derived from them.

All models are frozen dataclasses:
1. Task definitions and answers are never mutated while scoring
2. Safe to share between worker threads
3. Derived values (correct choice ids, counts, percentages) are
   calculated, never stored on inputs

| Payload shape | Model |
|---------------|-------|
| question with numeric `question_type` | one of the four `*Question` variants |
| question group | `QuestionGroup` |
| answer row | `SubmittedAnswer` |
| stored attempt | `Attempt` |
| reading exam result | `ExamAttempt` |
"""

from .kinds import QuestionKind, UnknownQuestionKindError
from .questions import (
    Choice,
    MultipleChoiceQuestion,
    FillInBlankQuestion,
    MatchingQuestion,
    DragAndDropQuestion,
    Question,
    question_from_dict,
)
from .groups import DragItem, QuestionGroup
from .answers import SubmittedAnswer
from .attempts import Attempt, ExamAttempt
from .results import (
    AnswerStatus,
    PerformanceTier,
    QuestionResult,
    PartStat,
    AttemptStats,
    percentage,
)

__all__ = [
    "QuestionKind",
    "UnknownQuestionKindError",
    "Choice",
    "MultipleChoiceQuestion",
    "FillInBlankQuestion",
    "MatchingQuestion",
    "DragAndDropQuestion",
    "Question",
    "question_from_dict",
    "DragItem",
    "QuestionGroup",
    "SubmittedAnswer",
    "Attempt",
    "ExamAttempt",
    "AnswerStatus",
    "PerformanceTier",
    "QuestionResult",
    "PartStat",
    "AttemptStats",
    "percentage",
]
