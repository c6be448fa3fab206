"""
Module: scoring

Purpose:
    Answer evaluation and statistics for learner attempts. Decides whether
    each submitted answer is correct, rolls results up per group, and
    builds attempt-level statistics for result and history pages.

Key Functions:
    - is_correct(): Correctness of one question (review screens)
    - evaluate_question(): CORRECT / INCORRECT / NOT_ANSWERED
    - aggregate_group(): PartStat for one group
    - build_statistics(): AttemptStats for a task attempt
    - build_exam_statistics(): AttemptStats for a full exam
    - review_attempt(): Numbered per-question review

Key Classes:
    - ScoringConfig: Tier thresholds, part titles, worker count

Dependencies:
    - ielts_toolkit.core.models: Attempt, Question variants, results

Used By:
    - Presentation and storage layers (external)
"""

from .config import ScoringConfig, DEFAULT_CONFIG
from .matcher import (
    normalize_text,
    is_answered,
    is_correct,
    evaluate_question,
    correct_answer_values,
    submitted_values,
)
from .aggregator import index_answers, aggregate_group, aggregate_group_indexed, merge_part_stats
from .statistics import build_statistics, build_exam_statistics, fold_statistics
from .review import review_question, review_attempt
from .tiers import performance_tier

__all__ = [
    # Config
    "ScoringConfig",
    "DEFAULT_CONFIG",
    # Matching
    "normalize_text",
    "is_answered",
    "is_correct",
    "evaluate_question",
    "correct_answer_values",
    "submitted_values",
    # Aggregation
    "index_answers",
    "aggregate_group",
    "aggregate_group_indexed",
    "merge_part_stats",
    # Statistics
    "build_statistics",
    "build_exam_statistics",
    "fold_statistics",
    "performance_tier",
    # Review
    "review_question",
    "review_attempt",
]
