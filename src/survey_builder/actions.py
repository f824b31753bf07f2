"""
Action System for the Question List

Every mutation of the question list is described by an action value.
The set of actions is closed: the reducer only accepts the classes
listed in ACTION_TYPES and rejects anything else with TypeError.

ARCHITECTURAL RULE:
    Actions carry data only.
    They do NOT apply themselves (belongs in the reducer).
    They do NOT generate identifiers on their own; a caller that needs
    to know the id of a new question pre-generates it and passes it in.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .model import QuestionType


@dataclass(frozen=True)
class AddQuestion:
    """
    Append a blank text question at the end of the list.

    Properties:
        question_id: Pre-generated id (optional). When None the
            reducer asks its id factory for a fresh one.
    """

    question_id: Optional[str] = None


@dataclass(frozen=True)
class RemoveQuestion:
    id: str


@dataclass(frozen=True)
class UpdateQuestion:
    """
    Patch label and/or required on a question.

    Only fields that are not None are merged. The id, type and options
    are never touched by this action.
    """

    id: str
    label: Optional[str] = None
    required: Optional[bool] = None


@dataclass(frozen=True)
class ChangeType:
    id: str
    new_type: QuestionType


@dataclass(frozen=True)
class AddOption:
    question_id: str
    option_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateOption:
    question_id: str
    option_id: str
    text: str


@dataclass(frozen=True)
class RemoveOption:
    question_id: str
    option_id: str


@dataclass(frozen=True)
class MoveUp:
    id: str


@dataclass(frozen=True)
class MoveDown:
    id: str


Action = Union[
    AddQuestion,
    RemoveQuestion,
    UpdateQuestion,
    ChangeType,
    AddOption,
    UpdateOption,
    RemoveOption,
    MoveUp,
    MoveDown,
]

ACTION_TYPES = (
    AddQuestion,
    RemoveQuestion,
    UpdateQuestion,
    ChangeType,
    AddOption,
    UpdateOption,
    RemoveOption,
    MoveUp,
    MoveDown,
)
