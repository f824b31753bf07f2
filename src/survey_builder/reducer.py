"""
Question List Reducer

Pure state machine over the ordered question list:

    apply_action(state, action) -> new state

IMPORTANT: The reducer has no side effects. The only non-deterministic
input is identifier generation, which is injected through `id_factory`
so tests can supply predictable ids.

Behavior notes:
    - A missing question/option id is never an error; the action is a no-op.
    - Changed questions are rebuilt with dataclasses.replace, so callers
      must not rely on object identity surviving a dispatch.
    - Unknown action types raise TypeError instead of silently no-oping.
    - A pre-generated id that is already taken raises ValueError.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, Sequence, Tuple

from survey_builder.actions import (
    Action,
    AddOption,
    AddQuestion,
    ChangeType,
    MoveDown,
    MoveUp,
    RemoveOption,
    RemoveQuestion,
    UpdateOption,
    UpdateQuestion,
)
from survey_builder.model import Option, Question, QuestionType, new_id

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
QuestionList = Tuple[Question, ...]

# Blank options created when a question with no options becomes multiple choice
AUTO_OPTION_COUNT = 2


def _map_question(state: Sequence[Question], question_id: str,
                  fn: Callable[[Question], Question]) -> QuestionList:
    return tuple(fn(q) if q.id == question_id else q for q in state)


def _index_of(state: Sequence[Question], question_id: str) -> int:
    for index, question in enumerate(state):
        if question.id == question_id:
            return index
    return -1


def _swap(state: Sequence[Question], i: int, j: int) -> QuestionList:
    items = list(state)
    items[i], items[j] = items[j], items[i]
    return tuple(items)


def _change_type(question: Question, new_type: QuestionType, id_factory: IdFactory) -> Question:
    if new_type == QuestionType.MULTIPLE_CHOICE and not question.options:
        options = tuple(Option(id=id_factory()) for _ in range(AUTO_OPTION_COUNT))
        return replace(question, type=new_type, options=options)
    # Switching to text keeps any existing options; they reappear on the way back.
    return replace(question, type=new_type)


def apply_action(state: Sequence[Question], action: Action,
                 id_factory: IdFactory = new_id) -> QuestionList:
    """
    Apply one action to the question list and return the new list.

    Args:
        state: Current ordered questions
        action: One of the closed set of actions in survey_builder.actions
        id_factory: Callable producing fresh identifiers

    Returns:
        New tuple of questions

    Raises:
        TypeError: if `action` is not a known action type
        ValueError: if a pre-generated question or option id is already in use
    """
    logger.debug("Applying %s", action)

    if isinstance(action, AddQuestion):
        if action.question_id is not None and _index_of(state, action.question_id) >= 0:
            raise ValueError(f"Question id already in use: {action.question_id!r}")
        question = Question(id=action.question_id or id_factory())
        return tuple(state) + (question,)

    if isinstance(action, RemoveQuestion):
        return tuple(q for q in state if q.id != action.id)

    if isinstance(action, UpdateQuestion):
        patch = {}
        if action.label is not None:
            patch["label"] = action.label
        if action.required is not None:
            patch["required"] = action.required
        return _map_question(state, action.id, lambda q: replace(q, **patch))

    if isinstance(action, ChangeType):
        new_type = QuestionType(action.new_type)
        return _map_question(state, action.id, lambda q: _change_type(q, new_type, id_factory))

    if isinstance(action, AddOption):
        def add_option(q: Question) -> Question:
            if action.option_id is not None and q.get_option(action.option_id) is not None:
                raise ValueError(
                    f"Option id already in use in question {q.id!r}: {action.option_id!r}"
                )
            option = Option(id=action.option_id or id_factory())
            return replace(q, options=q.options + (option,))
        return _map_question(state, action.question_id, add_option)

    if isinstance(action, UpdateOption):
        def update_option(q: Question) -> Question:
            options = tuple(
                replace(opt, text=action.text) if opt.id == action.option_id else opt
                for opt in q.options
            )
            return replace(q, options=options)
        return _map_question(state, action.question_id, update_option)

    if isinstance(action, RemoveOption):
        def remove_option(q: Question) -> Question:
            return replace(q, options=tuple(opt for opt in q.options if opt.id != action.option_id))
        return _map_question(state, action.question_id, remove_option)

    if isinstance(action, MoveUp):
        index = _index_of(state, action.id)
        if index <= 0:
            return tuple(state)
        return _swap(state, index - 1, index)

    if isinstance(action, MoveDown):
        index = _index_of(state, action.id)
        if index < 0 or index >= len(state) - 1:
            return tuple(state)
        return _swap(state, index, index + 1)

    raise TypeError(f"Unsupported action type: {type(action)}")


def reduce_actions(state: Sequence[Question], actions: Iterable[Action],
                   id_factory: IdFactory = new_id) -> QuestionList:
    """Apply a sequence of actions in order."""
    result = tuple(state)
    for action in actions:
        result = apply_action(result, action, id_factory)
    return result
