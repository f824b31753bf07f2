"""
Serialization helpers for survey builder objects (questions, options, responses).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.

Document shapes:
    survey:    {"questions": [{"id", "label", "type", "required",
                               "options": [{"id", "text"}]}]}
    responses: {questionId: "text answer" | {"optionId", "optionText"}}

Two levels of reading are offered:
    - *_from_dict / *_from_json / *_from_yaml: lenient, trust the input
    - parse_survey_definition / parse_survey_response: strict, validated
      through the pydantic models in survey_builder.schemas, raising
      SurveyParseError
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml
from pydantic import ValidationError

from survey_builder.model import (
    MultipleChoiceResponse,
    Option,
    Question,
    QuestionType,
    ResponseValue,
)
from survey_builder.responses import ResponseStore
from survey_builder.schemas import SurveyDefinitionModel, SurveyResponseModel


class SurveyParseError(ValueError):
    """
    Raised when external survey or response data fails strict parsing.

    Properties:
        issues: list of (path, message) pairs, path being a tuple of keys
    """

    def __init__(self, issues: List[Tuple[Tuple[Any, ...], str]]):
        self.issues = issues
        super().__init__(format_issues(issues))

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> SurveyParseError:
        return cls([(tuple(e["loc"]), e["msg"]) for e in error.errors()])


def format_issues(issues: List[Tuple[Tuple[Any, ...], str]]) -> str:
    lines = []
    for path, message in issues:
        joined = ".".join(str(p) for p in path)
        lines.append(f"{joined}: {message}" if joined else message)
    return "\n".join(lines)


def format_parse_error(error: SurveyParseError) -> str:
    """Render an error as one "path: message" line per issue."""
    return format_issues(error.issues)


# =========================================================================
# Questions
# =========================================================================

def option_to_dict(o: Option) -> Dict[str, Any]:
    return {"id": o.id, "text": o.text}


def option_from_dict(d: Dict[str, Any]) -> Option:
    return Option(id=d["id"], text=d.get("text", ""))


def question_to_dict(q: Question) -> Dict[str, Any]:
    return {
        "id": q.id,
        "label": q.label,
        "type": QuestionType(q.type).value,
        "required": q.required,
        "options": [option_to_dict(o) for o in q.options],
    }


def question_from_dict(d: Dict[str, Any]) -> Question:
    return Question(
        id=d["id"],
        label=d.get("label", ""),
        type=QuestionType(d.get("type", QuestionType.TEXT.value)),
        required=bool(d.get("required", False)),
        options=tuple(option_from_dict(o) for o in d.get("options", [])),
    )


def survey_to_dict(questions: Sequence[Question]) -> Dict[str, Any]:
    return {"questions": [question_to_dict(q) for q in questions]}


def survey_from_dict(d: Dict[str, Any]) -> Tuple[Question, ...]:
    return tuple(question_from_dict(q) for q in d.get("questions", []))


def survey_to_json(questions: Sequence[Question], indent: Optional[int] = None) -> str:
    return json.dumps(survey_to_dict(questions), sort_keys=True, indent=indent)


def survey_from_json(s: str) -> Tuple[Question, ...]:
    d = json.loads(s)
    return survey_from_dict(d)


def survey_to_yaml(questions: Sequence[Question]) -> str:
    return yaml.safe_dump(survey_to_dict(questions))


def survey_from_yaml(s: str) -> Tuple[Question, ...]:
    d = yaml.safe_load(s)
    return survey_from_dict(d or {})


# =========================================================================
# Responses
# =========================================================================

def response_value_to_dict(value: ResponseValue) -> Any:
    if isinstance(value, MultipleChoiceResponse):
        return {"optionId": value.option_id, "optionText": value.option_text}
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported response value type: {type(value)}")


def response_value_from_dict(d: Any) -> ResponseValue:
    if isinstance(d, str):
        return d
    if isinstance(d, dict):
        return MultipleChoiceResponse(option_id=d["optionId"], option_text=d["optionText"])
    raise TypeError(f"Unsupported response value: {d!r}")


def responses_to_dict(responses: ResponseStore) -> Dict[str, Any]:
    return {qid: response_value_to_dict(value) for qid, value in responses.items()}


def responses_from_dict(d: Dict[str, Any]) -> ResponseStore:
    return ResponseStore({qid: response_value_from_dict(v) for qid, v in d.items()})


def responses_to_json(responses: ResponseStore, indent: Optional[int] = None) -> str:
    return json.dumps(responses_to_dict(responses), sort_keys=True, indent=indent)


def responses_from_json(s: str) -> ResponseStore:
    return responses_from_dict(json.loads(s))


# =========================================================================
# Strict parsing
# =========================================================================

def parse_survey_definition(data: Any) -> Tuple[Question, ...]:
    """
    Strictly parse a survey document.

    Every question needs id/label/type/required/options with the right
    types, type must be a known QuestionType, and multiple-choice questions
    need at least one option.

    Raises:
        SurveyParseError: listing every problem found
    """
    try:
        document = SurveyDefinitionModel.model_validate(data)
    except ValidationError as e:
        raise SurveyParseError.from_validation_error(e) from e
    return document.to_domain()


def validate_survey_definition(data: Any) -> Tuple[bool, Optional[SurveyParseError]]:
    try:
        parse_survey_definition(data)
    except SurveyParseError as e:
        return False, e
    return True, None


def parse_survey_response(data: Any, questions: Sequence[Question]) -> ResponseStore:
    """
    Strictly parse a response document against the question list.

    Checks, per entry:
        - the question id exists
        - multiple-choice answers are structured, reference an existing
          option, and carry that option's current text
        - text answers are strings

    Raises:
        SurveyParseError: every shape problem, or the first semantic problem
    """
    try:
        values = SurveyResponseModel.model_validate(data).to_domain()
    except ValidationError as e:
        raise SurveyParseError.from_validation_error(e) from e

    by_id = {q.id: q for q in questions}
    for question_id, value in values.items():
        question = by_id.get(question_id)
        if question is None:
            raise SurveyParseError([(
                (question_id,),
                f'Question with id "{question_id}" not found in survey definition',
            )])

        if question.type == QuestionType.MULTIPLE_CHOICE:
            if isinstance(value, str):
                raise SurveyParseError([(
                    (question_id,),
                    "Multiple choice question must have structured response with optionId and optionText",
                )])
            option = question.get_option(value.option_id)
            if option is None:
                raise SurveyParseError([(
                    (question_id, "optionId"),
                    f'Option with id "{value.option_id}" not found in question options',
                )])
            if option.text != value.option_text:
                raise SurveyParseError([(
                    (question_id, "optionText"),
                    f'Option text mismatch. Expected "{option.text}", got "{value.option_text}"',
                )])
        elif not isinstance(value, str):
            raise SurveyParseError([((question_id,), "Text question must have string response")])

    return ResponseStore(values)


def validate_survey_response(data: Any, questions: Sequence[Question]) -> Tuple[bool, Optional[SurveyParseError]]:
    try:
        parse_survey_response(data, questions)
    except SurveyParseError as e:
        return False, e
    return True, None
