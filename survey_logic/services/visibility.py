"""Question visibility resolution.

Combines a question's rules with its AND/OR operator and projects the result
over a whole survey to find the questions a respondent should currently see.

A question is gated purely by the answer values of its trigger questions,
not by whether those trigger questions are themselves visible. A stale answer
left behind by a trigger that has since been hidden still counts; clearing
such answers is the renderer's job.
"""

from typing import Any, Iterable, Mapping, Optional

from survey_logic.schemas.logic import LogicOperator, Question, QuestionLogic
from survey_logic.services.rule_evaluator import evaluate_rule
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)


def evaluate_question_logic(
    logic: Optional[QuestionLogic],
    answers: Mapping[str, Any],
) -> bool:
    """Decide whether a question governed by ``logic`` is visible.

    Args:
        logic: The question's logic, or None for an ungated question
        answers: Map of question ID to the respondent's current answer

    Returns:
        True if the question should be shown
    """
    if logic is None or not logic.rules:
        return True

    results = [
        evaluate_rule(rule, answers.get(rule.trigger_question_id))
        for rule in logic.rules
    ]

    if logic.operator == LogicOperator.OR:
        return any(results)
    return all(results)


def get_visible_questions(
    questions: Iterable[Question],
    answers: Mapping[str, Any],
) -> set[str]:
    """Return the IDs of every question visible for the given answers.

    Each question is evaluated independently against the answer map.

    Args:
        questions: All questions of the survey
        answers: Map of question ID to the respondent's current answer

    Returns:
        Set of visible question IDs

    Example:
        >>> visible = get_visible_questions(survey.questions, {"q1": 4})
        >>> "q2" in visible
        True
    """
    questions = list(questions)

    visible = {
        question.id
        for question in questions
        if evaluate_question_logic(question.logic, answers)
    }

    logger.debug(f"{len(visible)} of {len(questions)} questions visible")
    return visible


def get_hidden_questions(
    questions: Iterable[Question],
    answers: Mapping[str, Any],
) -> set[str]:
    """Return the IDs of questions currently hidden by their logic."""
    questions = list(questions)
    return {q.id for q in questions} - get_visible_questions(questions, answers)
