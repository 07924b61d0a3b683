"""Survey loader service with caching and validation.

This module loads survey definitions from YAML files, validates them against
Pydantic schemas and the logic validator, and caches the results.
"""

from pathlib import Path
from functools import lru_cache
from typing import Optional
import yaml
from pydantic import ValidationError

from survey_logic.config import get_settings
from survey_logic.schemas.survey import Survey
from survey_logic.services.survey_validator import SurveyLogicValidator, SurveyStructureError
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)


class SurveyNotFoundError(Exception):
    """Raised when a survey file is not found."""
    pass


class SurveyValidationError(Exception):
    """Raised when a survey fails validation."""
    pass


class SurveyLoader:
    """Service for loading and caching survey definitions.

    Surveys are loaded from YAML files in the surveys directory, validated
    against Pydantic schemas, and their logic checked before being cached.
    """

    def __init__(self, surveys_dir: Optional[str] = None):
        """Initialize survey loader.

        Args:
            surveys_dir: Path to surveys directory (defaults to settings.surveys_dir)
        """
        if surveys_dir is None:
            surveys_dir = get_settings().surveys_dir

        self.surveys_dir = Path(surveys_dir)

        if not self.surveys_dir.exists():
            logger.warning(f"Surveys directory not found: {self.surveys_dir}")

    @lru_cache(maxsize=128)
    def load_survey(self, survey_id: str) -> Survey:
        """Load and validate a survey from YAML file.

        Results are cached. Clear cache with clear_cache() if needed.

        Args:
            survey_id: Survey identifier (matches YAML filename without .yaml)

        Returns:
            Validated Survey object

        Raises:
            SurveyNotFoundError: If survey file doesn't exist
            SurveyValidationError: If survey fails schema or logic validation

        Example:
            >>> loader = SurveyLoader()
            >>> survey = loader.load_survey("customer_feedback")
            >>> print(survey.metadata.name)
            'Customer Feedback'
        """
        yaml_path = self.surveys_dir / f"{survey_id}.yaml"

        if not yaml_path.exists():
            logger.error(f"Survey file not found: {yaml_path}")
            raise SurveyNotFoundError(f"Survey '{survey_id}' not found at {yaml_path}")

        try:
            with open(yaml_path, 'r') as f:
                raw_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error for {survey_id}: {e}")
            raise SurveyValidationError(f"Invalid YAML in survey '{survey_id}': {e}")
        except OSError as e:
            logger.error(f"Error reading survey file {yaml_path}: {e}")
            raise SurveyValidationError(f"Error reading survey '{survey_id}': {e}")

        if not isinstance(raw_data, dict):
            logger.error(f"Survey file {yaml_path} does not contain a mapping")
            raise SurveyValidationError(f"Survey '{survey_id}' must be a YAML mapping")

        try:
            survey = Survey(**raw_data)
        except ValidationError as e:
            logger.error(f"Validation error for survey {survey_id}: {e}")
            raise SurveyValidationError(f"Validation failed for survey '{survey_id}': {e}")

        try:
            SurveyLogicValidator.validate(survey)
        except SurveyStructureError as e:
            logger.error(f"Logic error for survey {survey_id}: {e}")
            raise SurveyValidationError(f"Invalid logic in survey '{survey_id}': {e}")

        logger.info(f"Successfully loaded survey: {survey_id} (version {survey.metadata.version})")
        return survey

    def list_surveys(self) -> list[str]:
        """List all available survey IDs.

        Returns:
            List of survey IDs (filenames without .yaml extension)
        """
        if not self.surveys_dir.exists():
            return []

        survey_ids = [f.stem for f in self.surveys_dir.glob("*.yaml")]

        logger.debug(f"Found {len(survey_ids)} surveys: {survey_ids}")
        return sorted(survey_ids)

    def clear_cache(self):
        """Clear the survey cache.

        Useful during development or when surveys are updated at runtime.
        """
        self.load_survey.cache_clear()
        logger.info("Survey cache cleared")


# Global singleton instance
_loader_instance: Optional[SurveyLoader] = None


def get_survey_loader() -> SurveyLoader:
    """Get global SurveyLoader instance.

    Creates singleton instance on first call.

    Returns:
        Global SurveyLoader instance
    """
    global _loader_instance
    if _loader_instance is None:
        _loader_instance = SurveyLoader()
    return _loader_instance
