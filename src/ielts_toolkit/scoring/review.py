"""
Module: scoring.review

Purpose:
    Per-question review for result screens. Numbers every question
    canonically (1..N across groups in section order, then question order)
    and annotates it with its status and display values, using the same
    matcher as the statistics builder.

Key Functions:
    - review_question(question, answers): QuestionResult for one question
    - review_attempt(attempt): QuestionResult for every question

Dependencies:
    - scoring.matcher

Used By:
    - Review screens (external)
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ielts_toolkit.core.models.answers import SubmittedAnswer
from ielts_toolkit.core.models.attempts import Attempt
from ielts_toolkit.core.models.groups import QuestionGroup
from ielts_toolkit.core.models.questions import Question
from ielts_toolkit.core.models.results import QuestionResult

from .matcher import correct_answer_values, evaluate_question, submitted_values


def review_question(
    question: Question,
    answers: Sequence[SubmittedAnswer],
    *,
    number: Optional[int] = None,
    group: Optional[QuestionGroup] = None,
) -> QuestionResult:
    """
    Review a single question.

    Args:
        question: Question to review
        answers: Submitted answers; entries for other questions are ignored
        number: Display number; defaults to question_order
        group: Owning group, used to show drag item content

    Raises:
        UnknownQuestionKindError: If question.kind is not a known kind
    """
    return QuestionResult(
        number=question.question_order if number is None else number,
        question_id=question.question_id,
        kind=question.kind,
        status=evaluate_question(question, answers),
        correct_answer=correct_answer_values(question, group),
        user_answer=submitted_values(question, answers, group),
        point=question.point,
        explanation=question.explanation,
    )


def review_attempt(attempt: Attempt) -> Tuple[QuestionResult, ...]:
    """
    Review every question of an attempt in canonical order.

    Returns:
        One QuestionResult per question, numbered from 1
    """
    return tuple(
        review_question(
            question,
            attempt.answers_for(question.question_id),
            number=number,
            group=group,
        )
        for number, (group, question) in enumerate(attempt.iter_questions(), start=1)
    )
