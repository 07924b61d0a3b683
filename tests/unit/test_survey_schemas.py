"""Unit tests for survey definition schemas."""

import pytest
from pydantic import ValidationError

from survey_logic.schemas.survey import Survey, SurveyMetadata


def metadata(**overrides):
    data = {"id": "test_survey", "name": "Test", "version": "1.0.0"}
    data.update(overrides)
    return data


class TestSurveyMetadata:
    """Tests for SurveyMetadata."""

    def test_valid(self):
        meta = SurveyMetadata(**metadata())
        assert meta.id == "test_survey"
        assert meta.description == ""

    @pytest.mark.parametrize("bad_id", ["has space", "semi;colon", ""])
    def test_invalid_id(self, bad_id):
        with pytest.raises(ValidationError):
            SurveyMetadata(**metadata(id=bad_id))

    def test_version_must_be_semantic(self):
        with pytest.raises(ValidationError):
            SurveyMetadata(**metadata(version="v1"))


class TestSurvey:
    """Tests for Survey."""

    def test_requires_questions(self):
        with pytest.raises(ValidationError):
            Survey(metadata=metadata(), questions=[])

    def test_duplicate_question_ids(self):
        with pytest.raises(ValidationError, match="Duplicate question IDs"):
            Survey(metadata=metadata(), questions=[
                {"id": "q1", "type": "text_input", "order": 0},
                {"id": "q1", "type": "text_input", "order": 1},
            ])

    def test_duplicate_orders(self):
        with pytest.raises(ValidationError, match="Duplicate question order"):
            Survey(metadata=metadata(), questions=[
                {"id": "q1", "type": "text_input", "order": 0},
                {"id": "q2", "type": "text_input", "order": 0},
            ])

    def test_lookup_and_ordering(self):
        survey = Survey(metadata=metadata(), questions=[
            {"id": "second", "type": "text_input", "order": 1},
            {"id": "first", "type": "text_input", "order": 0},
        ])
        assert survey.get_question("first").order == 0
        assert survey.get_question("missing") is None
        assert [q.id for q in survey.ordered_questions()] == ["first", "second"]
