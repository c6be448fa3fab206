"""
Module: scoring.matcher

Purpose:
    The single authoritative definition of "correct". One rule per question
    kind decides whether a submitted answer is present and whether it
    matches the question's answer key. Review screens and statistics both
    call into this module; nothing else compares answers.

Key Functions:
    - normalize_text(value): Case-fold and trim free text
    - is_answered(question, answers): Presence + non-emptiness check
    - is_correct(question, answers): Answer key comparison
    - evaluate_question(question, answers): CORRECT / INCORRECT / NOT_ANSWERED
    - correct_answer_values(question): Answer key for display
    - submitted_values(question, answers): Learner answer for display

Dependencies:
    - ielts_toolkit.core.models: Question variants, SubmittedAnswer

Used By:
    - scoring.aggregator
    - scoring.review

Rules:
    - Multiple choice: submitted choice id set == set of correct choice ids
      (order-independent, all-or-nothing)
    - Fill-in-blank / matching: case-folded, trimmed text equality
    - Drag-and-drop: submitted drag item id == correct drag item id
    - Only the first answer whose question_id matches is considered
    - A missing answer, or one whose field for this kind is empty, is
      NOT_ANSWERED; an answer filled for another kind counts as missing
"""

from __future__ import annotations

from typing import Any, Callable, Dict, FrozenSet, Optional, Sequence, Tuple

from ielts_toolkit.core.models.answers import SubmittedAnswer
from ielts_toolkit.core.models.groups import QuestionGroup
from ielts_toolkit.core.models.kinds import QuestionKind, UnknownQuestionKindError
from ielts_toolkit.core.models.questions import (
    DragAndDropQuestion,
    FillInBlankQuestion,
    MatchingQuestion,
    MultipleChoiceQuestion,
    Question,
)
from ielts_toolkit.core.models.results import AnswerStatus


def normalize_text(value: Optional[str]) -> str:
    """
    Normalise free text for comparison.

    Example:
        >>> normalize_text("  PARIS ")
        'paris'
    """
    return (value or "").strip().casefold()


# ─────────────────────────────────────────────────────────────────────────────
# Per-kind rules
# ─────────────────────────────────────────────────────────────────────────────
# A response extractor returns the comparable form of an answer; an empty
# response means "not answered".

def _choice_response(answer: SubmittedAnswer) -> FrozenSet[str]:
    return frozenset(cid for cid in answer.choice_ids if cid and cid.strip())


def _filled_response(answer: SubmittedAnswer) -> str:
    return normalize_text(answer.filled_text_answer)


def _matched_response(answer: SubmittedAnswer) -> str:
    return normalize_text(answer.matched_text_answer)


def _drag_response(answer: SubmittedAnswer) -> str:
    item = answer.drag_item_id or ""
    return item if item.strip() else ""


def _match_choices(question: MultipleChoiceQuestion, response: FrozenSet[str]) -> bool:
    return response == question.correct_choice_ids


def _match_filled(question: FillInBlankQuestion, response: str) -> bool:
    return response == normalize_text(question.correct_answer)


def _match_matched(question: MatchingQuestion, response: str) -> bool:
    return response == normalize_text(question.correct_answer_for_matching)


def _match_drag(question: DragAndDropQuestion, response: str) -> bool:
    return response == question.correct_drag_item_id


_RULES: Dict[QuestionKind, Tuple[Callable[[SubmittedAnswer], Any], Callable[[Any, Any], bool]]] = {
    QuestionKind.MULTIPLE_CHOICE: (_choice_response, _match_choices),
    QuestionKind.FILL_IN_BLANK: (_filled_response, _match_filled),
    QuestionKind.MATCHING: (_matched_response, _match_matched),
    QuestionKind.DRAG_AND_DROP: (_drag_response, _match_drag),
}


def _rules_for(question: Question):
    kind = getattr(question, "kind", None)
    try:
        return _RULES[kind]
    except (KeyError, TypeError):
        raise UnknownQuestionKindError(kind) from None


def _first_answer(
    question: Question, answers: Sequence[SubmittedAnswer]
) -> Optional[SubmittedAnswer]:
    for answer in answers:
        if answer.question_id == question.question_id:
            return answer
    return None


def _response(question: Question, answers: Sequence[SubmittedAnswer]) -> Any:
    extract, _ = _rules_for(question)
    answer = _first_answer(question, answers)
    if answer is None:
        return None
    return extract(answer) or None


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def is_answered(question: Question, answers: Sequence[SubmittedAnswer]) -> bool:
    """
    Check whether the learner gave a usable answer to ``question``.

    Args:
        question: Any question variant
        answers: Submitted answers; entries for other questions are ignored

    Returns:
        True if the first matching answer has a non-empty field for the
        question's kind

    Raises:
        UnknownQuestionKindError: If question.kind is not a known kind
    """
    return _response(question, answers) is not None


def is_correct(question: Question, answers: Sequence[SubmittedAnswer]) -> bool:
    """
    Decide correctness of the submitted answer against the answer key.

    Unanswered questions return False; callers that need to tell
    "incorrect" from "not answered" should use evaluate_question().

    Args:
        question: Any question variant
        answers: Submitted answers; entries for other questions are ignored

    Returns:
        True only if an answer is present and matches the answer key

    Raises:
        UnknownQuestionKindError: If question.kind is not a known kind
    """
    _, match = _rules_for(question)
    response = _response(question, answers)
    return response is not None and match(question, response)


def evaluate_question(
    question: Question, answers: Sequence[SubmittedAnswer]
) -> AnswerStatus:
    """
    Classify one question as correct, incorrect or not answered.

    Presence is checked before the answer key, so a blank answer is never
    counted as incorrect.

    Raises:
        UnknownQuestionKindError: If question.kind is not a known kind
    """
    _, match = _rules_for(question)
    response = _response(question, answers)
    if response is None:
        return AnswerStatus.NOT_ANSWERED
    return AnswerStatus.CORRECT if match(question, response) else AnswerStatus.INCORRECT


# ─────────────────────────────────────────────────────────────────────────────
# Display helpers
# ─────────────────────────────────────────────────────────────────────────────

def _drag_display(group: Optional[QuestionGroup], item_id: str) -> str:
    if group is not None:
        content = group.drag_item_content(item_id)
        if content:
            return content
    return item_id


def correct_answer_values(
    question: Question, group: Optional[QuestionGroup] = None
) -> Tuple[str, ...]:
    """
    Answer key for display.

    Args:
        question: Any question variant
        group: Owning group, used to show drag item content instead of ids

    Returns:
        Choice labels in display order, the expected text, or the drag item
    """
    _rules_for(question)
    if isinstance(question, MultipleChoiceQuestion):
        return tuple(c.label for c in question.choices if c.is_correct)
    if isinstance(question, FillInBlankQuestion):
        return (question.correct_answer,)
    if isinstance(question, MatchingQuestion):
        return (question.correct_answer_for_matching,)
    return (_drag_display(group, question.correct_drag_item_id),)


def submitted_values(
    question: Question,
    answers: Sequence[SubmittedAnswer],
    group: Optional[QuestionGroup] = None,
) -> Tuple[str, ...]:
    """
    Learner answer for display; empty when not answered.

    Multiple-choice ids are shown as labels in the question's choice order.
    """
    if not is_answered(question, answers):
        return ()
    answer = _first_answer(question, answers)
    if isinstance(question, MultipleChoiceQuestion):
        picked = _choice_response(answer)
        known = [c.label for c in question.choices if c.id in picked]
        known_ids = {c.id for c in question.choices}
        unknown = sorted(cid for cid in picked if cid not in known_ids)
        return tuple(known + unknown)
    if isinstance(question, FillInBlankQuestion):
        return (answer.filled_text_answer.strip(),)
    if isinstance(question, MatchingQuestion):
        return (answer.matched_text_answer.strip(),)
    return (_drag_display(group, answer.drag_item_id),)
