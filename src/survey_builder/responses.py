"""
Response capture for the preview surface.

ResponseStore maps question id -> answer value:
    - text questions:            plain string
    - multipleChoice questions:  MultipleChoiceResponse(option_id, option_text)

A question with no entry is unanswered. Entries are only dropped when the
owning question is deleted or its type changes (see `reconcile`).

IMPORTANT: Writes are not shape-checked against the question type.
Callers are responsible for writing the right shape; use
`serialization.parse_survey_response` for strict checking of external data.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Sequence

from survey_builder.model import MultipleChoiceResponse, Question, ResponseValue

logger = logging.getLogger(__name__)


class ResponseStore:
    """Mutable mapping of question id to response value."""

    def __init__(self, values: Optional[Dict[str, ResponseValue]] = None):
        self._values: Dict[str, ResponseValue] = dict(values or {})

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResponseStore):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResponseStore({self._values!r})"

    def get(self, question_id: str) -> Optional[ResponseValue]:
        """Return the answer for `question_id`, or None if unanswered."""
        return self._values.get(question_id)

    def is_answered(self, question_id: str) -> bool:
        return question_id in self._values

    def items(self):
        return self._values.items()

    def as_dict(self) -> Dict[str, ResponseValue]:
        return dict(self._values)

    def set_text(self, question_id: str, text: str) -> None:
        self._values[question_id] = text

    def choose_option(self, question: Question, option_id: str) -> MultipleChoiceResponse:
        """
        Record the chosen option of a multiple-choice question.

        The option text is copied at selection time.

        Raises:
            KeyError: if `option_id` is not one of the question's options
        """
        option = question.get_option(option_id)
        if option is None:
            raise KeyError(f"Option {option_id!r} not found in question {question.id!r}")
        response = MultipleChoiceResponse(option_id=option.id, option_text=option.text)
        self._values[question.id] = response
        return response

    def clear(self, question_id: str) -> None:
        self._values.pop(question_id, None)

    def reconcile(self, previous: Sequence[Question], current: Sequence[Question]) -> None:
        """
        Drop entries invalidated by a list change.

        An entry is removed when its question no longer exists in `current`
        or when the question's type differs between `previous` and `current`.
        Entries for unknown questions that were never in `previous` are kept.
        """
        before = {q.id: q.type for q in previous}
        after = {q.id: q.type for q in current}
        for question_id in list(self._values):
            if question_id not in before:
                continue
            if question_id not in after or after[question_id] != before[question_id]:
                logger.debug("Dropping response for question %s", question_id)
                del self._values[question_id]
