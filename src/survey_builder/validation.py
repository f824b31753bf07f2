"""
Completeness checks for questions.

A question is "complete" when its text fields are filled in. This gates
the add-question action: a new question can only be appended once every
existing question is complete.

NOTE: The option count is not checked. A multiple-choice question with a
label and zero options counts as complete.
"""

from typing import List, Sequence

from survey_builder.model import Question, QuestionType


def is_complete(question: Question) -> bool:
    if not question.label.strip():
        return False
    if question.type == QuestionType.MULTIPLE_CHOICE:
        return all(option.text.strip() for option in question.options)
    return True


def find_incomplete(questions: Sequence[Question]) -> List[Question]:
    """Return the incomplete questions in list order."""
    return [q for q in questions if not is_complete(q)]


def can_add_question(questions: Sequence[Question]) -> bool:
    return not find_incomplete(questions)
