"""
Core Survey Builder Model Objects

Defines the fundamental data structures of the question list.

These are pure value classes representing:
    - Question types (text, multipleChoice)
    - Options (choices of a multiple-choice question)
    - Questions (one survey item)
    - Multiple-choice responses (denormalized answer record)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about rendering or the preview surface
        - Are immutable (frozen=True)
        - Are fully serializable
        - Represent structure, not behavior

    Mutation happens only in the reducer, which builds new objects.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class QuestionType(str, Enum):
    """
    The two question kinds a survey can contain.

    Values are the wire values used in the JSON export.
    """

    TEXT = "text"
    MULTIPLE_CHOICE = "multipleChoice"


@dataclass(frozen=True)
class Option:
    """
    One selectable choice belonging to a multiple-choice question.

    Properties:
        id:
            Identifier, unique within the parent question's options
            and stable for the option's lifetime
        text:
            Choice text shown to the respondent (may be empty while drafting)
    """

    id: str
    text: str = ""


@dataclass(frozen=True)
class Question:
    """
    Represents a single survey item.

    Properties:
        id:
            Opaque identifier generated at creation.
            Unique across the list, never reused after deletion.

        label:
            Question text. May be empty: the question is a draft until filled.

        type:
            QuestionType. Determines which fields are meaningful.

        required:
            Consumed by the preview surface only.
            Does not affect storage validity.

        options:
            Ordered tuple of Option.
            Empty for a freshly created text question.

    IMPORTANT:
        The model does NOT enforce a minimum option count for
        multiple-choice questions, and it does NOT purge options when a
        question is switched back to text. Both are observed behaviors
        and are preserved by the reducer.
    """

    id: str
    label: str = ""
    type: QuestionType = QuestionType.TEXT
    required: bool = False
    options: Tuple[Option, ...] = ()

    def get_option(self, option_id: str) -> Optional[Option]:
        """
        Retrieve an option by ID.

        Returns:
            Option object or None if not found
        """
        for option in self.options:
            if option.id == option_id:
                return option
        return None


@dataclass(frozen=True)
class MultipleChoiceResponse:
    """
    Answer recorded for a multiple-choice question.

    option_text is captured at selection time. A later edit to the
    option's text does not change a previously recorded response.
    """

    option_id: str
    option_text: str


ResponseValue = Union[str, MultipleChoiceResponse]


def new_id() -> str:
    """Default identifier factory."""
    return str(uuid.uuid4())


def question_type_label(question_type: QuestionType) -> str:
    if question_type == QuestionType.MULTIPLE_CHOICE:
        return "Multiple Choice"
    return "Freeform Text"


def question_type_tag(question_type: QuestionType) -> str:
    if question_type == QuestionType.MULTIPLE_CHOICE:
        return "MC"
    return "Text"


def required_label(required: bool) -> str:
    return "Required" if required else "Optional"
