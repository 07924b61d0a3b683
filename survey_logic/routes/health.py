"""Health check endpoint for monitoring and deployment verification.

This module provides a health check endpoint that verifies the application
is running and can see its survey definitions.
"""

from fastapi import APIRouter, HTTPException

from survey_logic.services.survey_loader import get_survey_loader
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Verifies that:
    1. The application is running
    2. The survey definitions directory is readable

    Returns:
        dict: Health check status with survey count

    Raises:
        HTTPException: If the surveys directory is missing (503 Service Unavailable)

    Example response:
        {
            "status": "healthy",
            "surveys": 2
        }
    """
    loader = get_survey_loader()

    if not loader.surveys_dir.is_dir():
        logger.error(f"Health check failed: surveys directory {loader.surveys_dir} missing")
        raise HTTPException(
            status_code=503,
            detail="Service unavailable - survey definitions directory not found"
        )

    logger.debug("Health check passed")

    return {
        "status": "healthy",
        "surveys": len(loader.list_surveys())
    }
