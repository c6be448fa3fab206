import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import ielts_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from ielts_toolkit.core.models import (  # noqa: E402
    Attempt,
    Choice,
    DragAndDropQuestion,
    DragItem,
    FillInBlankQuestion,
    MultipleChoiceQuestion,
    QuestionGroup,
    QuestionKind,
    SubmittedAnswer,
)


def make_mc(question_id: str, order: int, correct=("a",), ids=("a", "b", "c", "d"), point: int = 1):
    """Multiple-choice question with choices labelled A, B, C... in id order."""
    choices = tuple(
        Choice(cid, chr(ord("A") + i), f"Option {cid}", cid in correct, i)
        for i, cid in enumerate(ids)
    )
    return MultipleChoiceQuestion(
        question_id, order, choices,
        number_of_correct_answers=max(1, len(correct)), point=point,
    )


# Common test fixtures
@pytest.fixture
def mc_factory():
    """Return the multiple-choice question builder."""
    return make_mc


@pytest.fixture
def reading_attempt() -> Attempt:
    """
    Two-group reading attempt.

    Group 1: two multiple-choice questions, q1 answered correctly, q2 blank.
    Group 2: one fill-in-blank question answered "london" against "London".
    """
    group1 = QuestionGroup(
        group_id="g1",
        section_label="Questions 1-2",
        section_order=1,
        instruction="Choose the correct letter.",
        question_type=QuestionKind.MULTIPLE_CHOICE,
        questions=(make_mc("q1", 1, correct=("b",)), make_mc("q2", 2, correct=("c",))),
    )
    group2 = QuestionGroup(
        group_id="g2",
        section_label="Question 3",
        section_order=2,
        instruction="Complete the sentence.",
        question_type=QuestionKind.FILL_IN_BLANK,
        questions=(FillInBlankQuestion("q3", 3, blank_index=0, correct_answer="London"),),
    )
    return Attempt(
        attempt_id="att-1",
        question_groups=(group1, group2),
        answers=(
            SubmittedAnswer("q1", choice_ids=("b",)),
            SubmittedAnswer("q3", filled_text_answer="london"),
        ),
        title="The history of tea",
        duration_seconds=1200,
    )


@pytest.fixture
def drag_group() -> QuestionGroup:
    """Drag-and-drop group with two zones: z1 -> item-a, z2 -> item-b."""
    return QuestionGroup(
        group_id="g-dnd",
        section_label="Questions 4-5",
        section_order=3,
        question_type=QuestionKind.DRAG_AND_DROP,
        questions=(
            DragAndDropQuestion("z1", 4, zone_index=0, correct_drag_item_id="item-a"),
            DragAndDropQuestion("z2", 5, zone_index=1, correct_drag_item_id="item-b"),
        ),
        drag_items=(
            DragItem("item-a", "harbour"),
            DragItem("item-b", "market"),
            DragItem("item-c", "station"),
        ),
    )


@pytest.fixture
def attempt_payload() -> dict:
    """
    Stored attempt payload as returned by the platform API.

    Groups arrive out of section order: g2 (matching q3, q4), g1 (multiple
    choice q1), g1b (fill-in q2). q1 and q2 are right, q3 wrong, q4 blank.
    """
    return {
        "attempt_id": "att-42",
        "duration": 754,
        "start_at": "2024-05-01T09:00:00",
        "finished_at": "2024-05-01T09:12:34",
        "task_data": {
            "title": "Urban farming",
            "question_groups": [
                {
                    "group_id": "g2",
                    "section_label": "Questions 3-4",
                    "section_order": 3,
                    "instruction": "Match each statement.",
                    "drag_items": [],
                    "questions": [
                        {
                            "question_id": "q3",
                            "question_order": 3,
                            "question_type": 2,
                            "point": 1,
                            "explanation": "Paragraph C.",
                            "correct_answer_for_matching": "iv",
                        },
                        {
                            "question_id": "q4",
                            "question_order": 4,
                            "question_type": 2,
                            "point": 2,
                            "explanation": "",
                            "correct_answer_for_matching": "ii",
                        },
                    ],
                },
                {
                    "group_id": "g1",
                    "section_label": "Question 1",
                    "section_order": 1,
                    "instruction": "Choose TWO letters.",
                    "drag_items": [],
                    "questions": [
                        {
                            "question_id": "q1",
                            "question_order": 1,
                            "question_type": 0,
                            "point": 1,
                            "explanation": "",
                            "number_of_correct_answers": 2,
                            "choices": [
                                {"choice_id": "c1", "label": "A", "choice_order": 1,
                                 "content": "Soil", "is_correct": True},
                                {"choice_id": "c2", "label": "B", "choice_order": 2,
                                 "content": "Light", "is_correct": False},
                                {"choice_id": "c3", "label": "C", "choice_order": 3,
                                 "content": "Water", "is_correct": True},
                            ],
                        },
                    ],
                },
                {
                    "group_id": "g1b",
                    "section_label": "Question 2",
                    "section_order": 2,
                    "instruction": "Complete the sentence.",
                    "drag_items": [],
                    "questions": [
                        {
                            "question_id": "q2",
                            "question_order": 2,
                            "question_type": 1,
                            "point": None,
                            "explanation": "",
                            "blank_index": 0,
                            "correct_answer": "rooftops",
                        },
                    ],
                },
            ],
        },
        "answers": [
            {"question_id": "q1", "choice_ids": ["c3", "c1"], "filled_text_answer": "",
             "matched_text_answer": "", "drag_item_id": ""},
            {"question_id": "q2", "choice_ids": [], "filled_text_answer": " Rooftops ",
             "matched_text_answer": "", "drag_item_id": ""},
            {"question_id": "q3", "choice_ids": [], "filled_text_answer": "",
             "matched_text_answer": "vi", "drag_item_id": ""},
            {"question_id": "q4", "choice_ids": [], "filled_text_answer": "",
             "matched_text_answer": "   ", "drag_item_id": ""},
        ],
    }
