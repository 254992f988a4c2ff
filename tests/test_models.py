"""
Unit Tests for Question Records

Tests for the wire shape produced by to_dict(): optional fields are omitted,
never emitted as null or False.
"""

import pytest

from quiztext.models import Answer, ChoiceQuestion, QuestionKind, ScaleQuestion


class TestAnswer:
    def test_to_dict_when_incorrect_then_no_correct_key(self):
        assert Answer(name="a", value="a").to_dict() == {"name": "a", "value": "a"}

    def test_to_dict_when_correct_then_correct_true(self):
        assert Answer(name="a", value="v", correct=True).to_dict() == {"name": "a", "value": "v", "correct": True}


class TestChoiceQuestion:
    def test_to_dict_when_feedback_then_camel_case_keys(self):
        question = ChoiceQuestion(
            kind=QuestionKind.CHECKBOX,
            question="Q?",
            answers=(Answer(name="a", value="a", correct=True),),
            correct_text="yes",
            incorrect_text="no",
        )
        assert question.to_dict() == {
            "kind": "checkbox",
            "question": "Q?",
            "answers": [{"name": "a", "value": "a", "correct": True}],
            "correctText": "yes",
            "incorrectText": "no",
        }

    def test_to_dict_when_no_feedback_then_keys_absent(self):
        data = ChoiceQuestion(kind=QuestionKind.RADIO, question="Q?").to_dict()
        assert data == {"kind": "radio", "question": "Q?", "answers": []}

    def test_init_when_range_kind_then_raises(self):
        with pytest.raises(ValueError, match="Choice question"):
            ChoiceQuestion(kind=QuestionKind.RANGE, question="Q?")


class TestScaleQuestion:
    def test_to_dict_when_all_fields_then_full_shape(self):
        question = ScaleQuestion(
            question="Q?",
            answers=(3, 2, 1),
            left_text="l",
            right_text="r",
            middle_text="m",
            category="c",
        )
        assert question.to_dict() == {
            "kind": "range",
            "question": "Q?",
            "answers": [3, 2, 1],
            "leftText": "l",
            "middleText": "m",
            "rightText": "r",
            "category": "c",
        }

    def test_to_dict_when_optional_missing_then_omitted(self):
        data = ScaleQuestion(question="Q?", answers=(1, 2), left_text="l", right_text="r").to_dict()
        assert "middleText" not in data
        assert "category" not in data
        assert data["kind"] == "range"
