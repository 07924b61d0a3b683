"""Request and response bodies for the HTTP API."""

from typing import Any, Optional

from pydantic import Field

from survey_logic.schemas.logic import (
    CamelModel,
    LogicCondition,
    LogicRule,
    Question,
    QuestionLogic,
)


class ConditionOption(CamelModel):
    """A condition offered by the builder, with its display label."""
    condition: LogicCondition
    label: str


class RuleValidationRequest(CamelModel):
    """Candidate rule plus the survey's questions."""
    rule: LogicRule
    questions: list[Question] = Field(default_factory=list)


class LogicValidationRequest(CamelModel):
    """Proposed logic for one question plus the survey's questions."""
    question_id: str = Field(..., min_length=1)
    logic: Optional[QuestionLogic] = None
    questions: list[Question] = Field(default_factory=list)


class ValidationResponse(CamelModel):
    """Outcome of a validation call."""
    valid: bool
    error: Optional[str] = None


class DependencyCheckRequest(CamelModel):
    """Proposed dependency of ``question_id`` on ``trigger_question_id``."""
    question_id: str = Field(..., min_length=1)
    trigger_question_id: str = Field(..., min_length=1)
    questions: list[Question] = Field(default_factory=list)


class DependencyCheckResponse(CamelModel):
    """Whether the proposed dependency is illegal."""
    circular: bool


class AnswersRequest(CamelModel):
    """Respondent's current answers, keyed by question ID."""
    answers: dict[str, Any] = Field(default_factory=dict)


class VisibilityRequest(AnswersRequest):
    """Questions and answers for a stateless visibility computation."""
    questions: list[Question] = Field(default_factory=list)


class VisibilityResponse(CamelModel):
    """Visible question IDs in survey order."""
    visible_question_ids: list[str]


class SubmissionValidationResponse(CamelModel):
    """Outcome of validating a submission."""
    valid: bool
    visible_question_ids: list[str] = Field(default_factory=list)
    missing_question_ids: list[str] = Field(default_factory=list)
    invalid_answers: dict[str, str] = Field(default_factory=dict)
    ignored_question_ids: list[str] = Field(default_factory=list)
