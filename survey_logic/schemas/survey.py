"""Pydantic schemas for survey definition files.

This module defines the structure of the YAML survey definitions served by
the logic service. Surveys must conform to these schemas to be loaded.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from survey_logic.schemas.logic import Question


class SurveyMetadata(BaseModel):
    """Survey metadata and identification.

    Attributes:
        id: Unique survey identifier (matches YAML filename)
        name: Human-readable survey name
        description: Survey description
        version: Survey version (semantic versioning)
    """
    id: str = Field(..., min_length=1, description="Survey identifier")
    name: str = Field(..., min_length=1, description="Survey name")
    description: str = Field(default="", description="Survey description")
    version: str = Field(..., pattern=r'^\d+\.\d+\.\d+$', description="Semantic version")

    @field_validator('id')
    @classmethod
    def id_alphanumeric(cls, v):
        """Ensure ID is alphanumeric with underscores/hyphens only."""
        if not v.replace('_', '').replace('-', '').isalnum():
            raise ValueError('Survey ID must be alphanumeric with underscores/hyphens')
        return v


class Survey(BaseModel):
    """Complete survey definition.

    Root schema for survey YAML files.

    Attributes:
        metadata: Survey identification and metadata
        questions: Survey questions with their visibility logic
    """
    metadata: SurveyMetadata
    questions: list[Question] = Field(..., min_length=1)

    @model_validator(mode='after')
    def validate_question_identity(self):
        """Reject duplicate question IDs and duplicate order positions."""
        question_ids = [q.id for q in self.questions]
        if len(question_ids) != len(set(question_ids)):
            duplicates = sorted({qid for qid in question_ids if question_ids.count(qid) > 1})
            raise ValueError(f"Duplicate question IDs found: {duplicates}")

        orders = [q.order for q in self.questions]
        if len(orders) != len(set(orders)):
            duplicates = sorted({o for o in orders if orders.count(o) > 1})
            raise ValueError(f"Duplicate question order values found: {duplicates}")

        return self

    def get_question(self, question_id: str) -> Optional[Question]:
        """Get question by ID.

        Args:
            question_id: Question identifier

        Returns:
            Question if found, None otherwise
        """
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def ordered_questions(self) -> list[Question]:
        """Return questions sorted by their survey order."""
        return sorted(self.questions, key=lambda q: q.order)
