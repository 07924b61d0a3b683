"""Unit tests for response validation service."""

import pytest

from survey_logic.schemas.logic import LogicRule, QuestionOptions, QuestionType
from survey_logic.services.response_validation import ResponseValidator, is_blank_response


class TestValidateAnswer:
    """Tests for per-type answer validation."""

    def test_choice(self, mixed_questions):
        choice = mixed_questions[0]
        assert ResponseValidator.validate_answer(choice, "Red").is_valid is True

        result = ResponseValidator.validate_answer(choice, "Green")
        assert result.is_valid is False
        assert result.error_message == "Please choose one of: Red, Blue"

    def test_choice_requires_string(self, mixed_questions):
        assert ResponseValidator.validate_answer(mixed_questions[0], ["Red"]).is_valid is False

    def test_yes_no(self, mixed_questions):
        yes_no = mixed_questions[5]
        assert ResponseValidator.validate_answer(yes_no, "Yes").is_valid is True
        assert ResponseValidator.validate_answer(yes_no, "Maybe").is_valid is False

    def test_checkbox(self, mixed_questions):
        multi = mixed_questions[3]
        assert ResponseValidator.validate_answer(multi, ["Price", "Support"]).is_valid is True

        result = ResponseValidator.validate_answer(multi, ["Price", "Shipping"])
        assert result.is_valid is False
        assert result.error_message == "Unknown options selected: Shipping"

        assert ResponseValidator.validate_answer(multi, "Price").is_valid is False

    @pytest.mark.parametrize("answer,valid", [
        (1, True),
        (5, True),
        ("3", True),
        (4.0, True),
        (0, False),
        (6, False),
        (2.5, False),
        ("three", False),
        (True, False),
    ])
    def test_rating(self, mixed_questions, answer, valid):
        rating = mixed_questions[2]
        assert ResponseValidator.validate_answer(rating, answer).is_valid is valid

    def test_custom_rating_bounds(self, question_factory):
        rating = question_factory("nps", QuestionType.RATING_SCALE, 0,
                                  options=QuestionOptions(min=0, max=10))
        assert ResponseValidator.validate_answer(rating, 0).is_valid is True
        result = ResponseValidator.validate_answer(rating, 11)
        assert result.error_message == "Please choose a rating between 0 and 10."

    def test_text(self, mixed_questions):
        assert ResponseValidator.validate_answer(mixed_questions[1], "anything").is_valid is True
        assert ResponseValidator.validate_answer(mixed_questions[1], 42).is_valid is False


class TestValidateSubmission:
    """Tests for full submission validation."""

    @pytest.fixture
    def gated_survey(self, question_factory):
        return [
            question_factory("rating", QuestionType.RATING_SCALE, 0, required=True),
            question_factory("why", QuestionType.TEXT_INPUT, 1, required=True, logic={
                "rules": [LogicRule(trigger_question_id="rating", condition="equals", value="1")],
            }),
            question_factory("comments", QuestionType.TEXT_INPUT, 2),
        ]

    def test_hidden_required_question_is_not_missing(self, gated_survey):
        result = ResponseValidator.validate_submission(gated_survey, {"rating": 4})
        assert result.is_valid is True
        assert result.visible_question_ids == ["rating", "comments"]
        assert result.missing_question_ids == []

    def test_visible_required_question_is_missing(self, gated_survey):
        result = ResponseValidator.validate_submission(gated_survey, {"rating": 1})
        assert result.is_valid is False
        assert result.missing_question_ids == ["why"]

    def test_unanswered_trigger(self, gated_survey):
        result = ResponseValidator.validate_submission(gated_survey, {"rating": ""})
        assert result.is_valid is False
        assert result.missing_question_ids == ["rating"]

    def test_hidden_answers_are_ignored(self, gated_survey):
        result = ResponseValidator.validate_submission(
            gated_survey, {"rating": 5, "why": 12345}
        )
        assert result.is_valid is True
        assert result.ignored_question_ids == ["why"]
        assert result.invalid_answers == {}

    def test_invalid_visible_answer(self, gated_survey):
        result = ResponseValidator.validate_submission(gated_survey, {"rating": 9})
        assert result.is_valid is False
        assert result.invalid_answers == {"rating": "Please choose a rating between 1 and 5."}

    def test_empty_required_selection_is_missing(self, question_factory):
        questions = [
            question_factory("features", QuestionType.CHECKBOX, 0, required=True,
                             options=QuestionOptions(choices=["Quality", "Price"])),
            question_factory("why_not_price", QuestionType.TEXT_INPUT, 1, logic={
                "rules": [LogicRule(trigger_question_id="features", condition="not_equals",
                                    value="Price")],
            }),
        ]
        result = ResponseValidator.validate_submission(questions, {"features": []})
        assert result.missing_question_ids == ["features"]
        # The empty selection still drives visibility
        assert result.visible_question_ids == ["features", "why_not_price"]


class TestIsBlankResponse:
    """Tests for the response-layer blank check."""

    @pytest.mark.parametrize("answer", [None, "", [], ()])
    def test_blank(self, answer):
        assert is_blank_response(answer) is True

    @pytest.mark.parametrize("answer", [0, False, "No", ["Price"]])
    def test_not_blank(self, answer):
        assert is_blank_response(answer) is False
