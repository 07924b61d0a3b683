"""Typed answer values.

Answers arrive untyped (string, number, boolean or list of strings depending
on the question type). They are converted once into one of the AnswerValue
records below so rule evaluation can dispatch on ``kind`` instead of probing
raw Python types.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class TextAnswer:
    value: str
    kind: str = "text"


@dataclass(frozen=True)
class NumberAnswer:
    value: Union[int, float]
    kind: str = "number"


@dataclass(frozen=True)
class BoolAnswer:
    value: bool
    kind: str = "bool"


@dataclass(frozen=True)
class MultiAnswer:
    values: tuple[str, ...]
    kind: str = "multi"


AnswerValue = Union[TextAnswer, NumberAnswer, BoolAnswer, MultiAnswer]

_ANSWER_TYPES = (TextAnswer, NumberAnswer, BoolAnswer, MultiAnswer)


def is_unanswered(raw: Any) -> bool:
    """Return True for the unanswered states: None and "".

    An empty selection ([]) is a defined answer here; whether it satisfies
    a required question is decided by the response layer.
    """
    if raw is None:
        return True
    if isinstance(raw, str) and raw == "":
        return True
    return False


def to_answer_value(raw: Any) -> Optional[AnswerValue]:
    """Convert a raw answer into an AnswerValue.

    The kind follows the runtime shape of the answer only. A plain string
    stays text even when the question is a checkbox or a rating, so
    ``contains`` never matches a non-list answer.

    Args:
        raw: Answer as received from the respondent's form

    Returns:
        The typed answer, or None when the answer is unanswered or cannot be
        interpreted (corrupted data is treated as unanswered).

    Example:
        >>> to_answer_value(4)
        NumberAnswer(value=4, kind='number')
        >>> to_answer_value(["Price"])
        MultiAnswer(values=('Price',), kind='multi')
    """
    if isinstance(raw, _ANSWER_TYPES):
        return raw

    if is_unanswered(raw):
        return None

    # bool must be checked before int: bool is an int subclass
    if isinstance(raw, bool):
        return BoolAnswer(raw)

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and math.isnan(raw):
            return None
        return NumberAnswer(raw)

    if isinstance(raw, str):
        return TextAnswer(raw)

    if isinstance(raw, (list, tuple)):
        if all(isinstance(item, str) for item in raw):
            return MultiAnswer(tuple(raw))
        return None

    return None
