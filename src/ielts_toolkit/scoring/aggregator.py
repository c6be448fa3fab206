"""
Module: scoring.aggregator

Purpose:
    Roll per-question outcomes up into a PartStat for one question group.
    Groups are aggregated independently from a read-only answer index, so
    any number of groups can be processed concurrently.

Key Functions:
    - index_answers(answers): Group submitted answers by question id
    - aggregate_group(group, answers): PartStat for one group
    - aggregate_group_indexed(group, index): Same, from a prebuilt index
    - merge_part_stats(title, parts): Fold several PartStats into one

Dependencies:
    - scoring.matcher: evaluate_question
    - core.models: QuestionGroup, SubmittedAnswer, PartStat

Used By:
    - scoring.statistics
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ielts_toolkit.core.models.answers import SubmittedAnswer
from ielts_toolkit.core.models.groups import QuestionGroup
from ielts_toolkit.core.models.results import AnswerStatus, PartStat, percentage

from .matcher import evaluate_question


AnswerIndex = Mapping[str, Sequence[SubmittedAnswer]]


def index_answers(answers: Iterable[SubmittedAnswer]) -> Dict[str, List[SubmittedAnswer]]:
    """
    Group answers by question id, keeping submission order.

    Example:
        >>> index = index_answers([SubmittedAnswer("q1", drag_item_id="x")])
        >>> list(index)
        ['q1']
    """
    index: Dict[str, List[SubmittedAnswer]] = {}
    for answer in answers:
        index.setdefault(answer.question_id, []).append(answer)
    return index


def aggregate_group_indexed(
    group: QuestionGroup,
    index: AnswerIndex,
    *,
    title: Optional[str] = None,
) -> PartStat:
    """
    Aggregate one group against a prebuilt answer index.

    Args:
        group: Group to score
        index: Answers keyed by question id (read only)
        title: Part title; defaults to the group's section_label

    Returns:
        PartStat with correct / not answered counts and earned points

    Raises:
        UnknownQuestionKindError: If any question has an unknown kind
    """
    correct = 0
    not_answered = 0
    points = 0
    for question in group.ordered_questions:
        status = evaluate_question(question, index.get(question.question_id, ()))
        if status == AnswerStatus.CORRECT:
            correct += 1
            points += question.point
        elif status == AnswerStatus.NOT_ANSWERED:
            not_answered += 1

    total = group.question_count
    return PartStat(
        title=group.section_label if title is None else title,
        total_questions=total,
        correct=correct,
        not_answered=not_answered,
        points=points,
        percentage=percentage(correct, total),
    )


def aggregate_group(
    group: QuestionGroup,
    answers: Sequence[SubmittedAnswer],
    *,
    title: Optional[str] = None,
) -> PartStat:
    """
    Aggregate one group from a plain answer list.

    Args:
        group: Group to score
        answers: Submitted answers; entries for other groups are ignored
        title: Part title; defaults to the group's section_label

    Returns:
        PartStat for the group; an empty group yields 0 questions at 0%
    """
    return aggregate_group_indexed(group, index_answers(answers), title=title)


def merge_part_stats(title: str, parts: Iterable[PartStat]) -> PartStat:
    """
    Fold several part subtotals into one, recomputing the percentage.

    Used when a single displayed part spans several groups, e.g. one
    passage of a full reading exam.
    """
    total = correct = not_answered = points = 0
    for part in parts:
        total += part.total_questions
        correct += part.correct
        not_answered += part.not_answered
        points += part.points
    return PartStat(
        title=title,
        total_questions=total,
        correct=correct,
        not_answered=not_answered,
        points=points,
        percentage=percentage(correct, total),
    )
