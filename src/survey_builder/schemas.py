"""
Pydantic schemas for externally supplied survey and response documents.

These models describe the wire shape only. `to_domain` converts a
validated document into the frozen model objects used by the reducer.
"""

from typing import Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, Field, RootModel, StrictBool, StrictStr, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from survey_builder.model import MultipleChoiceResponse, Option, Question, QuestionType, ResponseValue


class OptionModel(BaseModel):
    """Schema for one choice of a multiple-choice question."""

    id: StrictStr
    text: StrictStr

    def to_domain(self) -> Option:
        return Option(id=self.id, text=self.text)


class QuestionModel(BaseModel):
    """Schema for one question. Multiple-choice questions need at least one option."""

    id: StrictStr
    label: StrictStr
    type: Literal["text", "multipleChoice"]
    required: StrictBool
    options: List[OptionModel]

    @field_validator("options")
    @classmethod
    def multiple_choice_has_options(cls, v, info: ValidationInfo):
        if info.data.get("type") == QuestionType.MULTIPLE_CHOICE.value and not v:
            raise PydanticCustomError(
                "options_required",
                "Multiple choice questions must have at least one option",
            )
        return v

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            label=self.label,
            type=QuestionType(self.type),
            required=self.required,
            options=tuple(o.to_domain() for o in self.options),
        )


class SurveyDefinitionModel(BaseModel):
    """Schema for the survey export document."""

    questions: List[QuestionModel]

    def to_domain(self) -> Tuple[Question, ...]:
        return tuple(q.to_domain() for q in self.questions)


class MultipleChoiceResponseModel(BaseModel):
    option_id: StrictStr = Field(..., alias="optionId")
    option_text: StrictStr = Field(..., alias="optionText")

    def to_domain(self) -> MultipleChoiceResponse:
        return MultipleChoiceResponse(option_id=self.option_id, option_text=self.option_text)


class SurveyResponseModel(RootModel[Dict[StrictStr, Union[StrictStr, MultipleChoiceResponseModel]]]):
    """Schema for the response map: question id -> text or chosen option."""

    def to_domain(self) -> Dict[str, ResponseValue]:
        return {
            qid: value if isinstance(value, str) else value.to_domain()
            for qid, value in self.root.items()
        }
