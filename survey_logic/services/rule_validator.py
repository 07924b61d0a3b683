"""Authoring-time validation of logic rules.

Checks that a proposed rule references a known question, uses a condition
that makes sense for that question's type, and carries a value of the right
shape. Failures are reported through RuleValidationResult, never raised, so
the builder can show the message directly.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from survey_logic.schemas.logic import LogicCondition, LogicRule, Question, QuestionType
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class RuleValidationResult:
    """Result of rule validation.

    Attributes:
        valid: Whether the rule may be saved
        error: Human-readable reason when invalid
    """
    valid: bool
    error: Optional[str] = None


_EQUALITY_CONDITIONS = [LogicCondition.EQUALS, LogicCondition.NOT_EQUALS]

CONDITIONS_BY_QUESTION_TYPE: dict[QuestionType, list[LogicCondition]] = {
    QuestionType.MULTIPLE_CHOICE: _EQUALITY_CONDITIONS,
    QuestionType.DROPDOWN: _EQUALITY_CONDITIONS,
    QuestionType.YES_NO: _EQUALITY_CONDITIONS,
    QuestionType.CHECKBOX: [LogicCondition.CONTAINS, LogicCondition.NOT_EQUALS],
    QuestionType.RATING_SCALE: _EQUALITY_CONDITIONS,
    QuestionType.TEXT_INPUT: _EQUALITY_CONDITIONS,
}

CONDITION_LABELS: dict[LogicCondition, str] = {
    LogicCondition.EQUALS: "is",
    LogicCondition.NOT_EQUALS: "is not",
    LogicCondition.CONTAINS: "contains",
}


def get_conditions_for_question_type(question_type: QuestionType) -> list[LogicCondition]:
    """Return the conditions a rule may use against a trigger of this type."""
    return list(CONDITIONS_BY_QUESTION_TYPE.get(question_type, _EQUALITY_CONDITIONS))


def get_condition_label(condition: LogicCondition) -> str:
    """Return the builder label for a condition ("is", "is not", "contains")."""
    return CONDITION_LABELS.get(condition, str(condition))


def validate_logic_rule(rule: LogicRule, questions: Iterable[Question]) -> RuleValidationResult:
    """Validate a rule against the type of the question it references.

    Checks, in order:
    1. The trigger question exists
    2. The condition is legal for the trigger's type
    3. ``contains`` carries a list of values
    4. Every other condition carries a single string

    Args:
        rule: Candidate rule
        questions: All questions of the survey

    Returns:
        RuleValidationResult with an error message when invalid

    Example:
        >>> rule = LogicRule(trigger_question_id="q1", condition="contains", value="x")
        >>> validate_logic_rule(rule, questions).error
        'Contains condition requires an array of values'
    """
    trigger = next((q for q in questions if q.id == rule.trigger_question_id), None)

    if trigger is None:
        logger.info(f"Rejected rule: unknown trigger question {rule.trigger_question_id}")
        return RuleValidationResult(valid=False, error="Trigger question not found")

    allowed = get_conditions_for_question_type(trigger.type)
    if rule.condition not in allowed:
        logger.info(
            f"Rejected rule: condition {rule.condition.value} not allowed "
            f"for {trigger.type.value} question {trigger.id}"
        )
        return RuleValidationResult(
            valid=False,
            error=(
                f'Condition "{rule.condition.value}" is not valid '
                f'for question type "{trigger.type.value}"'
            ),
        )

    if rule.condition == LogicCondition.CONTAINS and not isinstance(rule.value, list):
        return RuleValidationResult(
            valid=False,
            error="Contains condition requires an array of values",
        )

    if rule.condition != LogicCondition.CONTAINS and not isinstance(rule.value, str):
        return RuleValidationResult(
            valid=False,
            error="Condition requires a string value",
        )

    return RuleValidationResult(valid=True)
