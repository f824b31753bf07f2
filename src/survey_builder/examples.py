"""
Starter survey content.

Builds the single multiple-choice question a new builder session opens
with. Ids are fixed strings so repeated builds produce identical exports.
"""
from typing import Tuple

from survey_builder.model import Option, Question, QuestionType


def create_initial_questions() -> Tuple[Question, ...]:
    return (
        Question(
            id="initial-question-1",
            label="How likely are you to recommend us to a friend?",
            type=QuestionType.MULTIPLE_CHOICE,
            required=True,
            options=(
                Option(id="initial-option-1", text="Very likely"),
                Option(id="initial-option-2", text="Somewhat likely"),
                Option(id="initial-option-3", text="Not likely"),
            ),
        ),
    )
