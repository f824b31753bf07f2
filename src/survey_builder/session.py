"""
Builder session: the collaborator boundary used by a UI layer.

SurveySession wires the pure pieces together:
    - the question list and the reducer (dispatch)
    - the completeness gate on adding a question
    - the derived selected question id
    - the response store and its reconciliation
    - the validation banner

IMPORTANT: A session assumes a single writer. Every dispatch runs to
completion before the next one is accepted. Callers with several writers
must serialize their calls (e.g. through a single-writer queue).
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from survey_builder.actions import Action, AddQuestion
from survey_builder.banner import Scheduler, ValidationBanner
from survey_builder.config import BuilderSettings
from survey_builder.model import Question, new_id
from survey_builder.reducer import IdFactory, apply_action
from survey_builder.responses import ResponseStore
from survey_builder.selection import resolve_selected_id
from survey_builder.serialization import responses_to_json, survey_to_json
from survey_builder.validation import find_incomplete, is_complete

logger = logging.getLogger(__name__)

__all__ = ["SurveySession", "is_complete"]


class SurveySession:
    """
    Owns the current question list and its external derived state.

    Properties:
        questions: Current immutable tuple of questions
        selected_id: Selected question id, always valid for `questions`
        responses: ResponseStore written by the preview surface
        banner: ValidationBanner for the add-question gate
    """

    def __init__(self, questions: Iterable[Question] = (),
                 responses: Optional[ResponseStore] = None,
                 settings: Optional[BuilderSettings] = None,
                 id_factory: IdFactory = new_id,
                 scheduler: Optional[Scheduler] = None):
        self.settings = settings or BuilderSettings()
        self.id_factory = id_factory
        self.responses = responses if responses is not None else ResponseStore()
        self.banner = ValidationBanner(self.settings.banner_timeout_seconds, scheduler)
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._selected_id = resolve_selected_id(self._questions, None)

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected_question(self) -> Optional[Question]:
        return self.get_question(self._selected_id) if self._selected_id else None

    def get_question(self, question_id: str) -> Optional[Question]:
        for question in self._questions:
            if question.id == question_id:
                return question
        return None

    def dispatch(self, action: Action) -> Tuple[Question, ...]:
        """
        Apply one action and reconcile derived state.

        AddQuestion goes through the same completeness gate and selection
        rule as add_question().

        Returns:
            The new question list (unchanged if an add was refused)
        """
        if isinstance(action, AddQuestion):
            self._add(action)
        else:
            self._apply(action)
        return self._questions

    def add_question(self) -> Optional[str]:
        """
        Append a new question if every existing question is complete.

        On success the new question becomes selected and any banner is
        dismissed. On refusal the banner shows the configured message.

        Returns:
            The new question id, or None if the add was refused
        """
        return self._add(AddQuestion())

    def _add(self, action: AddQuestion) -> Optional[str]:
        incomplete = find_incomplete(self._questions)
        if incomplete:
            logger.info(
                "Refusing to add question: %d incomplete (%s)",
                len(incomplete), ", ".join(q.id for q in incomplete),
            )
            self.banner.show(self.settings.incomplete_message)
            return None

        # Generate the id up front so the new question can be selected
        question_id = action.question_id or self.id_factory()
        self._apply(AddQuestion(question_id=question_id))
        self._selected_id = question_id
        self.banner.dismiss()
        return question_id

    def _apply(self, action: Action) -> None:
        previous = self._questions
        self._questions = apply_action(previous, action, self.id_factory)
        self.responses.reconcile(previous, self._questions)
        self._selected_id = resolve_selected_id(self._questions, self._selected_id)

    def select(self, question_id: Optional[str]) -> Optional[str]:
        """Select a question; unknown ids fall back like any other reconciliation."""
        self._selected_id = resolve_selected_id(self._questions, question_id)
        return self._selected_id

    def export_survey_json(self) -> str:
        return survey_to_json(self._questions, indent=self.settings.json_indent)

    def export_responses_json(self) -> str:
        return responses_to_json(self.responses, indent=self.settings.json_indent)
