"""Pydantic schemas for data validation.

This package contains the question/logic models, typed answer values, survey
definition schemas and HTTP request/response bodies.
"""

from survey_logic.schemas.logic import (
    QuestionType,
    LogicCondition,
    LogicOperator,
    LogicRule,
    QuestionLogic,
    QuestionOptions,
    Question,
)
from survey_logic.schemas.answers import (
    AnswerValue,
    TextAnswer,
    NumberAnswer,
    BoolAnswer,
    MultiAnswer,
    to_answer_value,
)
from survey_logic.schemas.survey import SurveyMetadata, Survey

__all__ = [
    "QuestionType",
    "LogicCondition",
    "LogicOperator",
    "LogicRule",
    "QuestionLogic",
    "QuestionOptions",
    "Question",
    "AnswerValue",
    "TextAnswer",
    "NumberAnswer",
    "BoolAnswer",
    "MultiAnswer",
    "to_answer_value",
    "SurveyMetadata",
    "Survey",
]
