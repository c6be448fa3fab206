"""
Unit Tests for the Group/Part Aggregator
"""

import pytest

from ielts_toolkit.core.models import (
    FillInBlankQuestion,
    PartStat,
    QuestionGroup,
    QuestionKind,
    SubmittedAnswer,
)
from ielts_toolkit.scoring.aggregator import (
    aggregate_group,
    aggregate_group_indexed,
    index_answers,
    merge_part_stats,
)


class TestAggregateGroup:
    """Tests for aggregate_group()."""

    def test_aggregate_when_drag_and_drop_then_one_correct_one_incorrect(self, drag_group):
        """Zones z1 -> item-a (right) and z2 -> item-c (wrong)."""
        answers = [
            SubmittedAnswer("z1", drag_item_id="item-a"),
            SubmittedAnswer("z2", drag_item_id="item-c"),
        ]

        stat = aggregate_group(drag_group, answers)

        assert stat.total_questions == 2
        assert stat.correct == 1
        assert stat.incorrect == 1
        assert stat.not_answered == 0
        assert stat.percentage == 50

    def test_aggregate_when_empty_group_then_zero_percent(self):
        """Empty groups must not divide by zero."""
        stat = aggregate_group(QuestionGroup("empty", section_label="Extra"), [])

        assert stat.total_questions == 0
        assert stat.correct == 0
        assert stat.percentage == 0

    def test_aggregate_when_no_title_then_uses_section_label(self, drag_group):
        assert aggregate_group(drag_group, []).title == "Questions 4-5"

    def test_aggregate_when_title_given_then_uses_title(self, drag_group):
        assert aggregate_group(drag_group, [], title="Part 3").title == "Part 3"

    def test_aggregate_when_blank_and_wrong_then_counted_separately(self, mc_factory):
        group = QuestionGroup(
            "g", question_type=QuestionKind.MULTIPLE_CHOICE,
            questions=(mc_factory("q1", 1), mc_factory("q2", 2), mc_factory("q3", 3)),
        )
        answers = [
            SubmittedAnswer("q1", choice_ids=("a",)),
            SubmittedAnswer("q2", choice_ids=("b",)),
            SubmittedAnswer("q3", choice_ids=()),
        ]

        stat = aggregate_group(group, answers)

        assert (stat.correct, stat.incorrect, stat.not_answered) == (1, 1, 1)
        assert stat.percentage == 33

    def test_aggregate_when_weighted_questions_then_points_sum_correct_only(self, mc_factory):
        group = QuestionGroup(
            "g", question_type=QuestionKind.MULTIPLE_CHOICE,
            questions=(mc_factory("q1", 1, point=2), mc_factory("q2", 2, point=3)),
        )
        answers = [SubmittedAnswer("q1", choice_ids=("a",)), SubmittedAnswer("q2", choice_ids=("d",))]

        stat = aggregate_group(group, answers)

        assert stat.points == 2
        assert stat.correct == 1

    def test_aggregate_when_answers_for_other_groups_then_ignored(self, drag_group):
        answers = [
            SubmittedAnswer("q99", drag_item_id="item-a"),
            SubmittedAnswer("z2", drag_item_id="item-b"),
        ]

        stat = aggregate_group(drag_group, answers)

        assert stat.correct == 1
        assert stat.not_answered == 1

    def test_aggregate_indexed_when_same_answers_then_matches_plain(self, drag_group):
        answers = [SubmittedAnswer("z1", drag_item_id="item-a")]

        plain = aggregate_group(drag_group, answers)
        indexed = aggregate_group_indexed(drag_group, index_answers(answers))

        assert plain == indexed


class TestIndexAnswers:
    """Tests for index_answers()."""

    def test_index_when_repeated_question_then_keeps_order(self):
        first = SubmittedAnswer("q1", filled_text_answer="one")
        second = SubmittedAnswer("q1", filled_text_answer="two")

        index = index_answers([first, SubmittedAnswer("q2"), second])

        assert index["q1"] == [first, second]
        assert set(index) == {"q1", "q2"}


class TestMergePartStats:
    """Tests for merge_part_stats()."""

    def test_merge_when_several_parts_then_sums_and_recomputes_percentage(self):
        merged = merge_part_stats("Part 1", [
            PartStat("a", total_questions=4, correct=3, not_answered=1, points=3, percentage=75),
            PartStat("b", total_questions=2, correct=0, not_answered=0, points=0, percentage=0),
        ])

        assert merged.title == "Part 1"
        assert merged.total_questions == 6
        assert merged.correct == 3
        assert merged.not_answered == 1
        assert merged.incorrect == 2
        assert merged.percentage == 50

    def test_merge_when_no_parts_then_zero(self):
        merged = merge_part_stats("Part 1", [])
        assert merged.total_questions == 0
        assert merged.percentage == 0


class TestGroupIsolation:
    """Aggregation reads only its own group."""

    def test_aggregate_when_text_group_then_drag_answers_do_not_leak(self):
        group = QuestionGroup(
            "g", question_type=QuestionKind.FILL_IN_BLANK,
            questions=(FillInBlankQuestion("q1", 1, blank_index=0, correct_answer="tea"),),
        )
        stat = aggregate_group(group, [SubmittedAnswer("q1", drag_item_id="tea")])
        assert stat.not_answered == 1
        assert stat.correct == 0
