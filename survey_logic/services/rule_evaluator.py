"""Rule evaluation for conditional question logic.

Decides whether a single LogicRule is satisfied by a single trigger answer.
Evaluation is fail-closed: an unanswered or uninterpretable trigger never
satisfies a rule, so gated questions stay hidden until their trigger is
answered.
"""

import re
from typing import Any, Optional, Union

from survey_logic.schemas.answers import (
    AnswerValue,
    MultiAnswer,
    NumberAnswer,
    TextAnswer,
    to_answer_value,
)
from survey_logic.schemas.logic import LogicCondition, LogicRule
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def parse_rule_integer(value: str) -> Optional[int]:
    """Parse the leading integer of a rule value.

    Rule values are authored as strings; "4" and "4 stars" both parse to 4.
    Returns None when the value does not start with an integer.
    """
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _answer_equals(answer: AnswerValue, expected: Union[str, list[str]]) -> bool:
    """Direct equality between a typed answer and a rule value.

    Only text and number answers can equal a rule value. A boolean or a
    multi-select answer is never equal to a scalar string, so ``not_equals``
    passes for any such answer.
    """
    if isinstance(expected, list):
        # A list rule value only has meaning for ``contains``
        return False

    if isinstance(answer, NumberAnswer):
        parsed = parse_rule_integer(expected)
        return parsed is not None and answer.value == parsed

    if isinstance(answer, TextAnswer):
        return answer.value == expected

    return False


def _answer_contains(answer: AnswerValue, expected: Union[str, list[str]]) -> bool:
    """Membership test for multi-select answers."""
    if not isinstance(answer, MultiAnswer):
        return False

    if isinstance(expected, list):
        # OR within contains: any selected value listed in the rule passes
        return any(value in answer.values for value in expected)

    return expected in answer.values


def evaluate_rule(rule: LogicRule, answer_value: Any) -> bool:
    """Evaluate one logic rule against the trigger question's answer.

    Args:
        rule: Rule to evaluate
        answer_value: Raw trigger answer or an AnswerValue

    Returns:
        True if the rule is satisfied, False otherwise (including when the
        trigger is unanswered)

    Example:
        >>> rule = LogicRule(trigger_question_id="q1", condition="equals", value="4")
        >>> evaluate_rule(rule, 4)
        True
        >>> evaluate_rule(rule, None)
        False
    """
    answer = to_answer_value(answer_value)

    if answer is None:
        logger.debug(
            f"Rule on {rule.trigger_question_id} failed closed: trigger unanswered"
        )
        return False

    if rule.condition == LogicCondition.EQUALS:
        return _answer_equals(answer, rule.value)

    if rule.condition == LogicCondition.NOT_EQUALS:
        return not _answer_equals(answer, rule.value)

    if rule.condition == LogicCondition.CONTAINS:
        return _answer_contains(answer, rule.value)

    # Should never happen due to Pydantic validation
    logger.error(f"Unknown logic condition: {rule.condition}")
    return False
