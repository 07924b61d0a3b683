"""Authoring and evaluation endpoints for question logic.

The survey builder calls the validation endpoints on every rule edit and
before saving; the response renderer calls the visibility endpoint after
every answer change. All endpoints are stateless: the caller sends the
survey's questions with each request.
"""

from fastapi import APIRouter

from survey_logic.schemas.api import (
    ConditionOption,
    DependencyCheckRequest,
    DependencyCheckResponse,
    LogicValidationRequest,
    RuleValidationRequest,
    ValidationResponse,
    VisibilityRequest,
    VisibilityResponse,
)
from survey_logic.schemas.logic import QuestionType
from survey_logic.services.dependency_graph import detect_circular_dependency
from survey_logic.services.logic_authoring import validate_question_logic
from survey_logic.services.rule_validator import (
    get_condition_label,
    get_conditions_for_question_type,
    validate_logic_rule,
)
from survey_logic.services.visibility import get_visible_questions
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api")


@router.get("/logic/conditions/{question_type}", response_model=list[ConditionOption])
async def list_conditions(question_type: QuestionType) -> list[ConditionOption]:
    """List the conditions a rule may use against a trigger of this type."""
    return [
        ConditionOption(condition=condition, label=get_condition_label(condition))
        for condition in get_conditions_for_question_type(question_type)
    ]


@router.post("/logic/rules/validate", response_model=ValidationResponse)
async def validate_rule(request: RuleValidationRequest) -> ValidationResponse:
    """Validate one rule against the type of its trigger question.

    Returns:
        ValidationResponse: ``valid`` plus a displayable ``error``
    """
    result = validate_logic_rule(request.rule, request.questions)
    return ValidationResponse(valid=result.valid, error=result.error)


@router.post("/logic/dependencies/check", response_model=DependencyCheckResponse)
async def check_dependency(request: DependencyCheckRequest) -> DependencyCheckResponse:
    """Check whether a question may depend on the proposed trigger.

    Returns:
        DependencyCheckResponse: ``circular`` is True when the save must be rejected
    """
    circular = detect_circular_dependency(
        request.question_id,
        request.trigger_question_id,
        request.questions,
    )
    return DependencyCheckResponse(circular=circular)


@router.post("/logic/validate", response_model=ValidationResponse)
async def validate_logic(request: LogicValidationRequest) -> ValidationResponse:
    """Validate a question's complete logic before it is saved."""
    result = validate_question_logic(request.question_id, request.logic, request.questions)

    if not result.valid:
        logger.info(
            f"Logic rejected: {result.error}",
            extra={"question_id": request.question_id},
        )

    return ValidationResponse(valid=result.valid, error=result.error)


@router.post("/visibility", response_model=VisibilityResponse)
async def compute_visibility(request: VisibilityRequest) -> VisibilityResponse:
    """Compute visible questions for inline questions and answers.

    Returns:
        VisibilityResponse: Visible question IDs in survey order
    """
    ordered = sorted(request.questions, key=lambda q: q.order)
    visible = get_visible_questions(ordered, request.answers)
    return VisibilityResponse(visible_question_ids=[q.id for q in ordered if q.id in visible])
