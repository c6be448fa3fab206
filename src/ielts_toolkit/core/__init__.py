"""
IELTS Toolkit Core Package

Shared data models and utilities. These models are the single source of
truth for every scoring module.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Frozen dataclasses; scoring never mutates a task or an answer

2. **Tagged Question Variants**
   - One dataclass per question kind, discriminated by a class-level `kind`
   - Payloads with a numeric `question_type` are dispatched once, on load

3. **Calculated Statistics (Never Stored)**
   - Correct choice ids, counts, percentages and points are derived values
   - Serialized statistics are output only, never read back as input
"""

from .models import (
    QuestionKind,
    Question,
    QuestionGroup,
    SubmittedAnswer,
    Attempt,
    ExamAttempt,
    PartStat,
    AttemptStats,
)

__all__ = [
    "QuestionKind",
    "Question",
    "QuestionGroup",
    "SubmittedAnswer",
    "Attempt",
    "ExamAttempt",
    "PartStat",
    "AttemptStats",
]
