"""Survey logic validator for structural analysis.

This module validates the logic of a complete survey definition to ensure:
- Every rule references an existing question
- Every rule is legal for its trigger question's type
- No rule references itself or a later question
- The dependency graph has no cycles
"""

from typing import List

from survey_logic.schemas.survey import Survey
from survey_logic.services.dependency_graph import detect_circular_dependency
from survey_logic.services.rule_validator import validate_logic_rule
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)


class SurveyStructureError(Exception):
    """Raised when survey logic is invalid.

    Attributes:
        problems: One message per invalid rule
    """

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


class SurveyLogicValidator:
    """Service for validating the logic graph of a survey definition."""

    @staticmethod
    def collect_problems(survey: Survey) -> List[str]:
        """Return a message for every invalid rule in the survey.

        Args:
            survey: Survey to analyze

        Returns:
            List of problem descriptions (empty when the logic is valid)
        """
        problems = []

        for question in survey.ordered_questions():
            if question.logic is None:
                continue

            for index, rule in enumerate(question.logic.rules):
                location = f"Question '{question.id}' rule {index + 1}"

                result = validate_logic_rule(rule, survey.questions)
                if not result.valid:
                    problems.append(f"{location}: {result.error}")
                    continue

                if detect_circular_dependency(question.id, rule.trigger_question_id, survey.questions):
                    problems.append(
                        f"{location}: illegal dependency on '{rule.trigger_question_id}'"
                    )

        return problems

    @staticmethod
    def validate(survey: Survey) -> None:
        """Validate survey logic.

        Args:
            survey: Survey to validate

        Raises:
            SurveyStructureError: If any rule is invalid

        Example:
            >>> survey = load_survey("customer_feedback")
            >>> SurveyLogicValidator.validate(survey)  # Raises if invalid
        """
        problems = SurveyLogicValidator.collect_problems(survey)

        if problems:
            logger.warning(
                f"Survey {survey.metadata.id} has {len(problems)} logic problems"
            )
            raise SurveyStructureError(problems)

        logger.info(f"Survey {survey.metadata.id} logic validated successfully")
