"""
Unit Tests for QuestionGroup
"""

import pytest

from ielts_toolkit.core.models import (
    FillInBlankQuestion,
    MatchingQuestion,
    QuestionGroup,
    QuestionKind,
    UnknownQuestionKindError,
)


class TestQuestionGroupCreation:
    """Tests for QuestionGroup construction."""

    def test_create_when_mixed_kinds_then_raises(self):
        with pytest.raises(ValueError, match="is fill_in_blank but question q2 is matching"):
            QuestionGroup(
                "g1",
                question_type=QuestionKind.FILL_IN_BLANK,
                questions=(
                    FillInBlankQuestion("q1", 1, blank_index=0, correct_answer="x"),
                    MatchingQuestion("q2", 2, correct_answer_for_matching="y"),
                ),
            )

    def test_create_when_questions_without_marker_then_raises(self):
        with pytest.raises(ValueError, match="no question_type"):
            QuestionGroup("g1", questions=(MatchingQuestion("q1", 1, correct_answer_for_matching="y"),))

    def test_create_when_empty_then_marker_optional(self):
        group = QuestionGroup("g1")
        assert group.question_type is None
        assert group.question_count == 0
        assert group.total_points == 0


class TestQuestionGroupProperties:
    """Tests for derived group values."""

    def test_ordered_questions_when_authored_out_of_order_then_sorted(self):
        group = QuestionGroup(
            "g1",
            question_type=QuestionKind.MATCHING,
            questions=(
                MatchingQuestion("q7", 7, correct_answer_for_matching="i", point=2),
                MatchingQuestion("q6", 6, correct_answer_for_matching="ii"),
            ),
        )
        assert [q.question_id for q in group.ordered_questions] == ["q6", "q7"]
        assert group.total_points == 3

    def test_drag_item_content_when_known_then_content(self, drag_group):
        assert drag_group.drag_item_content("item-c") == "station"
        assert drag_group.drag_item_content("item-z") is None


class TestQuestionGroupFromDict:
    """Tests for QuestionGroup.from_dict()."""

    def test_from_dict_when_marker_absent_then_inferred_from_questions(self):
        group = QuestionGroup.from_dict({
            "question_group_id": "g9",
            "questions": [
                {"question_id": "q1", "question_order": 1, "question_type": 2,
                 "correct_answer_for_matching": "iv"},
            ],
        })
        assert group.group_id == "g9"
        assert group.question_type == QuestionKind.MATCHING

    def test_from_dict_when_unknown_question_type_then_raises(self):
        with pytest.raises(UnknownQuestionKindError):
            QuestionGroup.from_dict({
                "group_id": "g1",
                "questions": [{"question_id": "q1", "question_order": 1, "question_type": "essay"}],
            })

    def test_to_dict_when_drag_group_then_parses_back(self, drag_group):
        data = drag_group.to_dict()
        assert data["question_type"] == 3
        assert QuestionGroup.from_dict(data) == drag_group
