"""
Transient validation banner.

Holds the one user-visible failure message of the builder (the refused
add-question) and clears it after a fixed interval.

Timer semantics:
    - Each show() starts a new generation and cancels the previous timer.
    - An expiry callback only clears the message if its generation is
      still current, so a stale timer firing late is a no-op.
    - dismiss() clears immediately and invalidates any pending timer.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol

from survey_builder.config import DEFAULT_BANNER_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def thread_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Default scheduler: run `callback` after `delay` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class ValidationBanner:
    """Auto-dismissing message holder."""

    def __init__(self, timeout_seconds: float = DEFAULT_BANNER_TIMEOUT_SECONDS,
                 scheduler: Optional[Scheduler] = None):
        self.timeout_seconds = timeout_seconds
        self._scheduler = scheduler or thread_scheduler
        self._lock = threading.Lock()
        self._message: Optional[str] = None
        self._generation = 0
        self._timer: Optional[TimerHandle] = None

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def visible(self) -> bool:
        return self._message is not None

    def show(self, message: str) -> None:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._message = message
            previous, self._timer = self._timer, None
        if previous is not None:
            previous.cancel()
        timer = self._scheduler(self.timeout_seconds, lambda: self._expire(generation))
        with self._lock:
            if self._generation == generation:
                self._timer = timer
                return
        # Superseded while scheduling
        timer.cancel()

    def dismiss(self) -> None:
        with self._lock:
            self._generation += 1
            self._message = None
            previous, self._timer = self._timer, None
        if previous is not None:
            previous.cancel()

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._message = None
            self._timer = None
        logger.debug("Validation banner expired")
