"""
Unit Tests for Result Models
"""

import pytest

from ielts_toolkit.core.models import (
    AnswerStatus,
    AttemptStats,
    PartStat,
    PerformanceTier,
    QuestionKind,
    QuestionResult,
    percentage,
)


class TestPercentage:
    """Tests for percentage()."""

    @pytest.mark.parametrize("part, whole, expected", [
        (2, 3, 67),
        (1, 3, 33),
        (1, 8, 13),
        (1, 2, 50),
        (5, 5, 100),
        (0, 4, 0),
    ])
    def test_percentage_when_values_then_rounded_half_up(self, part, whole, expected):
        assert percentage(part, whole) == expected

    def test_percentage_when_whole_zero_then_zero(self):
        assert percentage(0, 0) == 0


class TestPartStat:
    """Tests for PartStat."""

    def test_incorrect_when_counts_set_then_derived(self):
        stat = PartStat("Part 1", total_questions=5, correct=2, not_answered=1, percentage=40)
        assert stat.incorrect == 2
        assert stat.to_dict()["incorrect"] == 2

    def test_create_when_counts_exceed_total_then_raises(self):
        with pytest.raises(ValueError, match="exceeds total_questions"):
            PartStat("Part 1", total_questions=2, correct=2, not_answered=1)

    def test_create_when_negative_count_then_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            PartStat("Part 1", total_questions=2, correct=-1)


class TestAttemptStats:
    """Tests for AttemptStats."""

    def test_create_when_counts_do_not_add_up_then_raises(self):
        with pytest.raises(ValueError, match="do not add up"):
            AttemptStats(total_questions=3, correct_answers=1, incorrect_answers=1,
                         not_answered=0, score_percentage=33)

    def test_to_dict_when_serialized_then_tier_is_name(self):
        stats = AttemptStats(
            total_questions=2, correct_answers=2, incorrect_answers=0, not_answered=0,
            score_percentage=100, performance_tier=PerformanceTier.EXPERT,
            part_stats=(PartStat("Part 1", 2, 2, percentage=100),),
        )
        data = stats.to_dict()
        assert data["performance_tier"] == "Expert"
        assert data["part_stats"][0]["title"] == "Part 1"
        assert stats.answered == 2


class TestQuestionResult:
    """Tests for QuestionResult."""

    def test_points_awarded_when_incorrect_then_zero(self):
        result = QuestionResult(1, "q1", QuestionKind.MATCHING, AnswerStatus.INCORRECT, point=3)
        assert result.points_awarded == 0
        assert not result.is_correct

    def test_to_dict_when_correct_then_wire_fields(self):
        result = QuestionResult(
            4, "q4", QuestionKind.DRAG_AND_DROP, AnswerStatus.CORRECT,
            correct_answer=("harbour",), user_answer=("harbour",), point=2,
        )
        data = result.to_dict()
        assert data["question_index"] == 4
        assert data["question_type"] == 3
        assert data["status"] == "correct"
        assert data["user_answer"] == ["harbour"]
        assert result.points_awarded == 2
