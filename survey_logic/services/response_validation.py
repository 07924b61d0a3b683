"""Response validation service for survey submissions.

This module checks a respondent's answer set against the survey before it is
stored: visible required questions must be answered and every visible answer
must fit its question type. Answers to hidden questions are ignored.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional

from survey_logic.schemas.answers import is_unanswered
from survey_logic.schemas.logic import Question, QuestionType
from survey_logic.services.visibility import get_visible_questions
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class AnswerCheck:
    """Result of checking one answer.

    Attributes:
        is_valid: Whether the answer fits the question
        error_message: Error message if the answer was rejected
    """
    is_valid: bool
    error_message: Optional[str] = None


@dataclass
class SubmissionResult:
    """Result of validating a full submission.

    Attributes:
        is_valid: Whether the submission may be stored
        visible_question_ids: Visible questions in survey order
        missing_question_ids: Visible required questions left unanswered
        invalid_answers: Question ID -> error message for rejected answers
        ignored_question_ids: Hidden questions that still carry an answer
    """
    is_valid: bool
    visible_question_ids: List[str] = field(default_factory=list)
    missing_question_ids: List[str] = field(default_factory=list)
    invalid_answers: dict = field(default_factory=dict)
    ignored_question_ids: List[str] = field(default_factory=list)


_VALID = AnswerCheck(is_valid=True)


def is_blank_response(answer: Any) -> bool:
    """Return True when a stored answer leaves its question unanswered.

    Adds the empty selection to the evaluator's unanswered states, so a
    required checkbox with nothing ticked counts as missing.
    """
    if is_unanswered(answer):
        return True
    return isinstance(answer, (list, tuple)) and len(answer) == 0


class ResponseValidator:
    """Service for validating respondent answers against survey questions."""

    @staticmethod
    def validate_answer(question: Question, answer: Any) -> AnswerCheck:
        """Validate an answered question's value against its type.

        Handles validation for all question types:
        - multiple_choice / dropdown / yes_no: one of the question's choices
        - checkbox: list of the question's choices
        - rating_scale: integer within the rating bounds
        - text_input: any string

        Args:
            question: Question being answered
            answer: Raw answer value (assumed answered)

        Returns:
            AnswerCheck with an error message when invalid
        """
        if question.type in (QuestionType.MULTIPLE_CHOICE, QuestionType.DROPDOWN, QuestionType.YES_NO):
            return ResponseValidator._validate_choice(question, answer)
        elif question.type == QuestionType.CHECKBOX:
            return ResponseValidator._validate_checkbox(question, answer)
        elif question.type == QuestionType.RATING_SCALE:
            return ResponseValidator._validate_rating(question, answer)
        elif question.type == QuestionType.TEXT_INPUT:
            if isinstance(answer, str):
                return _VALID
            return AnswerCheck(is_valid=False, error_message="Please enter a text response.")
        else:
            # Should never happen due to Pydantic validation
            logger.error(f"Unknown question type: {question.type}")
            return AnswerCheck(is_valid=False, error_message="Internal error: invalid question type")

    @staticmethod
    def _validate_choice(question: Question, answer: Any) -> AnswerCheck:
        choices = question.choice_values()
        if not isinstance(answer, str):
            return AnswerCheck(is_valid=False, error_message="Please select one option.")

        # Choices left unconfigured accept any string
        if choices and answer not in choices:
            return AnswerCheck(
                is_valid=False,
                error_message=f"Please choose one of: {', '.join(choices)}",
            )
        return _VALID

    @staticmethod
    def _validate_checkbox(question: Question, answer: Any) -> AnswerCheck:
        choices = question.choice_values()
        if not isinstance(answer, list) or not all(isinstance(a, str) for a in answer):
            return AnswerCheck(is_valid=False, error_message="Please select one or more options.")

        unknown = [a for a in answer if choices and a not in choices]
        if unknown:
            return AnswerCheck(
                is_valid=False,
                error_message=f"Unknown options selected: {', '.join(unknown)}",
            )
        return _VALID

    @staticmethod
    def _validate_rating(question: Question, answer: Any) -> AnswerCheck:
        low, high = question.rating_bounds()
        error = AnswerCheck(
            is_valid=False,
            error_message=f"Please choose a rating between {low} and {high}.",
        )

        if isinstance(answer, bool):
            return error
        if isinstance(answer, str) and answer.strip().isdigit():
            answer = int(answer.strip())
        if isinstance(answer, float) and answer.is_integer():
            answer = int(answer)
        if not isinstance(answer, int):
            return error
        if answer < low or answer > high:
            return error
        return _VALID

    @staticmethod
    def validate_submission(
        questions: Iterable[Question],
        answers: Mapping[str, Any],
    ) -> SubmissionResult:
        """Validate a complete answer set before it is stored.

        Args:
            questions: All questions of the survey
            answers: Map of question ID to answer

        Returns:
            SubmissionResult describing missing, invalid and ignored answers

        Example:
            >>> result = ResponseValidator.validate_submission(survey.questions, {"q1": 4})
            >>> result.missing_question_ids
            []
        """
        ordered = sorted(questions, key=lambda q: q.order)
        visible = get_visible_questions(ordered, answers)

        result = SubmissionResult(is_valid=True)

        for question in ordered:
            answer = answers.get(question.id)
            answered = not is_blank_response(answer)

            if question.id not in visible:
                if answered:
                    result.ignored_question_ids.append(question.id)
                continue

            result.visible_question_ids.append(question.id)

            if not answered:
                if question.required:
                    result.missing_question_ids.append(question.id)
                continue

            check = ResponseValidator.validate_answer(question, answer)
            if not check.is_valid:
                result.invalid_answers[question.id] = check.error_message

        result.is_valid = not result.missing_question_ids and not result.invalid_answers

        if not result.is_valid:
            logger.info(
                f"Submission rejected: {len(result.missing_question_ids)} missing, "
                f"{len(result.invalid_answers)} invalid"
            )

        return result
