"""
Selected-question reconciliation.

The selected question id lives outside the reducer. Whenever the list
changes it is re-derived with `resolve_selected_id`.
"""

from typing import Optional, Sequence

from survey_builder.model import Question


def resolve_selected_id(questions: Sequence[Question], selected_id: Optional[str]) -> Optional[str]:
    """
    Return a selection that is valid for `questions`.

    Rules:
        - keep `selected_id` if it is still in the list
        - otherwise fall back to the first question
        - None if the list is empty
    """
    if not questions:
        return None
    if selected_id is not None and any(q.id == selected_id for q in questions):
        return selected_id
    return questions[0].id
