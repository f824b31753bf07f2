import itertools

import pytest
from survey_builder.actions import (
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
from survey_builder.model import QuestionType


class CountingIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


class ManualTimer:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Collects scheduled callbacks; tests fire them explicitly."""

    def __init__(self):
        self.timers = []

    def __call__(self, delay, callback):
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    def fire_all(self):
        # Fires cancelled timers too, to simulate a late callback
        for timer in list(self.timers):
            timer.callback()


@pytest.fixture
def ids():
    return CountingIds()


@pytest.fixture
def scheduler():
    return ManualScheduler()


def pick_random_action(rng, state):
    """Choose one action, biased towards ids that exist in `state`."""
    qid = rng.choice([q.id for q in state] or ["ghost"])
    options = [o.id for q in state if q.id == qid for o in q.options] or ["ghost-opt"]
    return rng.choice([
        AddQuestion(),
        RemoveQuestion(qid),
        UpdateQuestion(qid, label=rng.choice(["", "L"]), required=rng.choice([None, True, False])),
        ChangeType(qid, rng.choice(list(QuestionType))),
        AddOption(qid),
        UpdateOption(qid, rng.choice(options), rng.choice(["", "t", "ü ✓"])),
        RemoveOption(qid, rng.choice(options)),
        MoveUp(qid),
        MoveDown(qid),
    ])


@pytest.fixture
def random_action():
    return pick_random_action
