"""Pytest configuration and shared fixtures.

This module provides fixtures and configuration used across all tests.
"""

import os
from pathlib import Path

import pytest

# Set environment variables for tests BEFORE importing app modules
PROJECT_ROOT = Path(__file__).parent.parent
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SURVEYS_DIR", str(PROJECT_ROOT / "surveys"))

from survey_logic.schemas.logic import (
    LogicRule,
    Question,
    QuestionLogic,
    QuestionOptions,
    QuestionType,
)


def make_question(question_id, question_type, order, logic=None, **kwargs):
    """Build a Question with an optional QuestionLogic given as a dict."""
    if isinstance(logic, dict):
        logic = QuestionLogic(**logic)
    return Question(id=question_id, type=question_type, order=order, logic=logic, **kwargs)


@pytest.fixture
def question_factory():
    """Provide the make_question builder to tests."""
    return make_question


@pytest.fixture
def chain_questions():
    """Three questions where B depends on A and C depends on B.

    Returns:
        list[Question]: A(order=0), B(order=1, trigger=A), C(order=2, trigger=B)
    """
    return [
        make_question("A", QuestionType.MULTIPLE_CHOICE, 0,
                      options=QuestionOptions(choices=["Yes", "No"])),
        make_question("B", QuestionType.MULTIPLE_CHOICE, 1, logic={
            "rules": [LogicRule(trigger_question_id="A", condition="equals", value="Yes")],
        }),
        make_question("C", QuestionType.TEXT_INPUT, 2, logic={
            "rules": [LogicRule(trigger_question_id="B", condition="equals", value="Yes")],
        }),
    ]


@pytest.fixture
def mixed_questions():
    """One question of every type, ungated, in survey order.

    Returns:
        list[Question]: choice, text, rating, checkbox, dropdown, yes/no
    """
    return [
        make_question("choice", QuestionType.MULTIPLE_CHOICE, 0,
                      options=QuestionOptions(choices=["Red", "Blue"])),
        make_question("text", QuestionType.TEXT_INPUT, 1),
        make_question("rating", QuestionType.RATING_SCALE, 2),
        make_question("multi", QuestionType.CHECKBOX, 3,
                      options=QuestionOptions(choices=["Quality", "Price", "Ease of use", "Support"])),
        make_question("dropdown", QuestionType.DROPDOWN, 4,
                      options=QuestionOptions(choices=["US", "UK"])),
        make_question("yes_no", QuestionType.YES_NO, 5),
    ]


@pytest.fixture
def surveys_dir() -> Path:
    """Path to the bundled survey definitions."""
    return PROJECT_ROOT / "surveys"
