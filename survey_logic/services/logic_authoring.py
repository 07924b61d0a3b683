"""Builder-facing helpers for editing a question's logic.

Wraps the rule validator and dependency checks into the single gate the
survey builder runs before a QuestionLogic is saved, and provides the
defaults used when an author adds a new rule.
"""

from typing import Iterable, List, Optional

from survey_logic.schemas.logic import LogicRule, Question, QuestionLogic
from survey_logic.services.dependency_graph import detect_circular_dependency
from survey_logic.services.rule_validator import (
    RuleValidationResult,
    get_conditions_for_question_type,
    validate_logic_rule,
)
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)

INCOMPLETE_RULE_ERROR = "Please complete all logic rules before saving"
CIRCULAR_DEPENDENCY_ERROR = (
    "Circular dependency detected: This question cannot depend on a later question or itself"
)
NO_TRIGGERS_ERROR = "No previous questions available to create logic"


class LogicAuthoringError(Exception):
    """Raised when a logic edit cannot be started."""
    pass


def get_available_trigger_questions(
    question: Question,
    questions: Iterable[Question],
) -> List[Question]:
    """Return the questions that may trigger ``question``, in survey order."""
    candidates = [
        q for q in questions
        if q.order < question.order and q.id != question.id
    ]
    return sorted(candidates, key=lambda q: q.order)


def create_default_rule(question: Question, questions: Iterable[Question]) -> LogicRule:
    """Create the rule offered when an author clicks "add rule".

    Uses the first earlier question as trigger, its first legal condition,
    and an empty value for the author to fill in.

    Raises:
        LogicAuthoringError: If no earlier question exists
    """
    available = get_available_trigger_questions(question, questions)
    if not available:
        raise LogicAuthoringError(NO_TRIGGERS_ERROR)

    trigger = available[0]
    condition = get_conditions_for_question_type(trigger.type)[0]
    return LogicRule(trigger_question_id=trigger.id, condition=condition, value="")


def _is_incomplete(rule: LogicRule) -> bool:
    # [] counts as unfilled: a contains rule with no values never matches
    return not rule.trigger_question_id or not rule.value


def validate_question_logic(
    question_id: str,
    logic: Optional[QuestionLogic],
    questions: Iterable[Question],
) -> RuleValidationResult:
    """Validate a whole QuestionLogic before it is persisted.

    Args:
        question_id: Question that owns the logic
        logic: Proposed logic; None or an empty rule list removes gating
        questions: All questions of the survey with their current logic

    Returns:
        RuleValidationResult carrying the first problem found
    """
    if logic is None or not logic.rules:
        return RuleValidationResult(valid=True)

    questions = list(questions)

    if any(_is_incomplete(rule) for rule in logic.rules):
        return RuleValidationResult(valid=False, error=INCOMPLETE_RULE_ERROR)

    for rule in logic.rules:
        if detect_circular_dependency(question_id, rule.trigger_question_id, questions):
            return RuleValidationResult(valid=False, error=CIRCULAR_DEPENDENCY_ERROR)

        result = validate_logic_rule(rule, questions)
        if not result.valid:
            return result

    logger.debug(f"Logic for question {question_id} validated ({len(logic.rules)} rules)")
    return RuleValidationResult(valid=True)
