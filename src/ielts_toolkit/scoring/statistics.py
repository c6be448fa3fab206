"""
Module: scoring.statistics

Purpose:
    Build attempt-level statistics: aggregate every group in section order,
    then fold the per-part subtotals into totals, a score percentage and a
    performance tier.

Key Functions:
    - build_statistics(attempt): AttemptStats for one task attempt
    - build_exam_statistics(exam): AttemptStats for a multi-task exam
    - fold_statistics(part_stats): Totals from ordered PartStats

Dependencies:
    - concurrent.futures: Optional parallel group aggregation
    - scoring.aggregator: Per-group subtotals
    - scoring.tiers: Performance tier mapping

Used By:
    - Result pages and history views (external)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from ielts_toolkit.core.models.attempts import Attempt, ExamAttempt
from ielts_toolkit.core.models.results import AttemptStats, PartStat, percentage

from .aggregator import aggregate_group_indexed, merge_part_stats
from .config import DEFAULT_CONFIG, ScoringConfig
from .tiers import performance_tier

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _map_ordered(fn: Callable[[T], R], items: Sequence[T], max_workers: int) -> List[R]:
    """Apply fn to items, on a thread pool when allowed; results keep item order."""
    if max_workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as pool:
            return list(pool.map(fn, items))
    # Inline - no thread overhead
    return [fn(item) for item in items]


def fold_statistics(
    part_stats: Sequence[PartStat],
    config: Optional[ScoringConfig] = None,
) -> AttemptStats:
    """
    Fold ordered part subtotals into attempt statistics.

    Args:
        part_stats: Subtotals in display order
        config: Tier thresholds; defaults to DEFAULT_CONFIG

    Returns:
        AttemptStats; all zeros and BEGINNER tier for an empty sequence
    """
    config = config or DEFAULT_CONFIG
    total = sum(p.total_questions for p in part_stats)
    correct = sum(p.correct for p in part_stats)
    not_answered = sum(p.not_answered for p in part_stats)
    score = percentage(correct, total)
    return AttemptStats(
        total_questions=total,
        correct_answers=correct,
        incorrect_answers=total - correct - not_answered,
        not_answered=not_answered,
        score_percentage=score,
        part_stats=tuple(part_stats),
        total_points=sum(p.points for p in part_stats),
        performance_tier=performance_tier(score, config),
    )


def build_statistics(attempt: Attempt, config: Optional[ScoringConfig] = None) -> AttemptStats:
    """
    Compute statistics for one task attempt.

    Each group becomes one part, titled from ``config.part_title_template``
    by its 1-based position in section order.

    Args:
        attempt: Task definition plus submitted answers
        config: Scoring configuration; defaults to DEFAULT_CONFIG

    Returns:
        AttemptStats with one PartStat per group

    Raises:
        UnknownQuestionKindError: If any question has an unknown kind

    Example:
        >>> stats = build_statistics(attempt)
        >>> stats.total_questions == stats.correct_answers + stats.incorrect_answers + stats.not_answered
        True
    """
    config = config or DEFAULT_CONFIG
    groups = attempt.ordered_groups
    index = attempt.answer_index

    jobs = [(group, config.part_title(number)) for number, group in enumerate(groups, start=1)]
    part_stats = _map_ordered(
        lambda job: aggregate_group_indexed(job[0], index, title=job[1]),
        jobs,
        config.max_workers,
    )

    stats = fold_statistics(part_stats, config)
    logger.debug(
        f"Attempt {attempt.attempt_id}: {stats.correct_answers}/{stats.total_questions} correct, "
        f"{stats.not_answered} not answered across {len(groups)} groups"
    )
    return stats


def _score_task(task: Tuple[Attempt, str]) -> PartStat:
    attempt, title = task
    index = attempt.answer_index
    return merge_part_stats(
        title,
        (aggregate_group_indexed(group, index) for group in attempt.ordered_groups),
    )


def build_exam_statistics(
    exam: ExamAttempt, config: Optional[ScoringConfig] = None
) -> AttemptStats:
    """
    Compute statistics for a full exam.

    Each task attempt (passage or recording) becomes one part covering all
    of its groups; parts keep the exam's order.

    Args:
        exam: Exam attempt with one Attempt per task
        config: Scoring configuration; defaults to DEFAULT_CONFIG

    Returns:
        AttemptStats with one PartStat per task
    """
    config = config or DEFAULT_CONFIG
    tasks = [(part, config.part_title(number)) for number, part in enumerate(exam.parts, start=1)]
    part_stats = _map_ordered(_score_task, tasks, config.max_workers)

    stats = fold_statistics(part_stats, config)
    logger.debug(
        f"Exam {exam.exam_attempt_id}: {stats.correct_answers}/{stats.total_questions} correct "
        f"over {len(exam.parts)} parts"
    )
    return stats
