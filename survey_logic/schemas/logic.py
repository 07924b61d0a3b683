"""Pydantic schemas for questions and their conditional logic.

A question may carry a QuestionLogic: a flat list of LogicRule entries
combined with a single AND/OR operator. Each rule inspects the answer of an
earlier (trigger) question.

Field names are snake_case in Python and camelCase on the wire
(``triggerQuestionId``); both spellings are accepted on input.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """Valid question types in a survey."""
    MULTIPLE_CHOICE = "multiple_choice"
    TEXT_INPUT = "text_input"
    RATING_SCALE = "rating_scale"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"
    YES_NO = "yes_no"


class LogicCondition(str, Enum):
    """Comparison applied between a trigger answer and a rule value."""
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"


class LogicOperator(str, Enum):
    """How the results of a question's rules are combined."""
    AND = "AND"
    OR = "OR"


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase aliases."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LogicRule(CamelModel):
    """A single visibility condition.

    Attributes:
        trigger_question_id: Question whose answer is inspected
        condition: equals / not_equals / contains
        value: Single string, or a list of strings for ``contains``
    """
    trigger_question_id: str = Field(..., description="Question whose answer is inspected")
    condition: LogicCondition = Field(..., description="Comparison to apply")
    value: Union[str, list[str]] = Field(..., description="Expected trigger answer value(s)")


class QuestionLogic(CamelModel):
    """Ordered rule list plus the operator combining them.

    Attributes:
        rules: Rules evaluated independently against the answer map
        operator: AND (every rule must pass) or OR (at least one)
    """
    rules: list[LogicRule] = Field(default_factory=list)
    operator: LogicOperator = Field(default=LogicOperator.AND)


class QuestionOptions(CamelModel):
    """Type-specific presentation options.

    Attributes:
        choices: Options for multiple_choice / dropdown / checkbox questions
        min: Lowest rating for rating_scale questions
        max: Highest rating for rating_scale questions
        min_label: Label shown beside the lowest rating
        max_label: Label shown beside the highest rating
    """
    choices: Optional[list[str]] = None
    min: Optional[int] = None
    max: Optional[int] = None
    min_label: Optional[str] = None
    max_label: Optional[str] = None


DEFAULT_RATING_MIN = 1
DEFAULT_RATING_MAX = 5
YES_NO_CHOICES = ("Yes", "No")


class Question(CamelModel):
    """A survey question as seen by the logic engine.

    Attributes:
        id: Unique question identifier
        type: Question type
        order: Fixed position in the survey (0-based)
        text: Question text shown to respondents
        required: Whether a visible question must be answered
        options: Type-specific options
        logic: Visibility logic; None means always visible
    """
    id: str = Field(..., min_length=1, description="Unique question identifier")
    type: QuestionType = Field(..., description="Question type")
    order: int = Field(..., ge=0, description="Position in the survey")
    text: str = Field(default="", description="Question text")
    required: bool = Field(default=False, description="Answer required when visible")
    options: QuestionOptions = Field(default_factory=QuestionOptions)
    logic: Optional[QuestionLogic] = Field(default=None, description="Visibility logic")

    def choice_values(self) -> list[str]:
        """Return the selectable values for choice-style questions."""
        if self.type == QuestionType.YES_NO:
            return list(YES_NO_CHOICES)
        return list(self.options.choices or [])

    def rating_bounds(self) -> tuple[int, int]:
        """Return (min, max) for rating questions, applying the 1..5 default."""
        low = self.options.min if self.options.min is not None else DEFAULT_RATING_MIN
        high = self.options.max if self.options.max is not None else DEFAULT_RATING_MAX
        return low, high
