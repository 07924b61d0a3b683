"""Endpoints backed by stored survey definitions.

Surveys are loaded through the cached SurveyLoader; the respondent's answers
are supplied with each request.
"""

from fastapi import APIRouter, HTTPException

from survey_logic.schemas.api import (
    AnswersRequest,
    SubmissionValidationResponse,
    VisibilityResponse,
)
from survey_logic.schemas.survey import Survey
from survey_logic.services.response_validation import ResponseValidator
from survey_logic.services.survey_loader import (
    SurveyNotFoundError,
    SurveyValidationError,
    get_survey_loader,
)
from survey_logic.services.visibility import get_visible_questions
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/surveys")


def load_survey_or_raise(survey_id: str) -> Survey:
    """Load a survey definition, mapping loader errors to HTTP errors.

    Raises:
        HTTPException: 404 if the survey does not exist, 503 if its
            definition is invalid
    """
    loader = get_survey_loader()
    try:
        return loader.load_survey(survey_id)
    except SurveyNotFoundError:
        logger.info(f"Survey not found: {survey_id}", extra={"survey_id": survey_id})
        raise HTTPException(status_code=404, detail="Survey not found")
    except SurveyValidationError as e:
        logger.error(f"Survey definition invalid: {e}", extra={"survey_id": survey_id})
        raise HTTPException(
            status_code=503,
            detail="Survey is temporarily unavailable"
        )


@router.get("")
async def list_surveys() -> dict:
    """List the IDs of available survey definitions."""
    return {"surveys": get_survey_loader().list_surveys()}


@router.post("/{survey_id}/visibility", response_model=VisibilityResponse)
async def survey_visibility(survey_id: str, request: AnswersRequest) -> VisibilityResponse:
    """Compute visible questions of a stored survey for the given answers."""
    survey = load_survey_or_raise(survey_id)
    ordered = survey.ordered_questions()
    visible = get_visible_questions(ordered, request.answers)
    return VisibilityResponse(visible_question_ids=[q.id for q in ordered if q.id in visible])


@router.post("/{survey_id}/responses/validate", response_model=SubmissionValidationResponse)
async def validate_response(survey_id: str, request: AnswersRequest) -> SubmissionValidationResponse:
    """Validate a respondent's submission against a stored survey.

    Visible required questions must be answered and visible answers must fit
    their question type; answers to hidden questions are reported as ignored.
    """
    survey = load_survey_or_raise(survey_id)
    result = ResponseValidator.validate_submission(survey.questions, request.answers)

    logger.info(
        f"Validated submission: valid={result.is_valid}",
        extra={"survey_id": survey_id},
    )

    return SubmissionValidationResponse(
        valid=result.is_valid,
        visible_question_ids=result.visible_question_ids,
        missing_question_ids=result.missing_question_ids,
        invalid_answers=result.invalid_answers,
        ignored_question_ids=result.ignored_question_ids,
    )
