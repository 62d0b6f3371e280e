"""
Module: exam.events

Purpose:
    Completion notification for exams. Handlers subscribe before the exam
    runs and are called once, in registration order, when it finishes.

Key Classes:
    - ExamCompletedEvent: Ordered list of completion handlers

Used By:
    - exam.exams.Exam.completed
    - app.main (completion banner)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List

if TYPE_CHECKING:
    from .exams import Exam

logger = logging.getLogger(__name__)

ExamCompletedHandler = Callable[["Exam"], None]


class ExamCompletedEvent:
    """
    Synchronous publish/subscribe hook fired when an exam completes.

    Handlers receive the finished exam as the sender and nothing else.
    Firing with no handlers does nothing. Exceptions raised by a handler
    propagate to the caller of fire() and stop the remaining handlers.

    Example:
        >>> event = ExamCompletedEvent()
        >>> event.subscribe(lambda exam: print("done"))
        >>> event.fire(exam)
        done
    """

    def __init__(self) -> None:
        self._handlers: List[ExamCompletedHandler] = []

    def subscribe(self, handler: ExamCompletedHandler) -> None:
        """Register a handler. The same handler may be registered twice."""
        if not callable(handler):
            raise TypeError(f"Completion handler must be callable: {handler!r}")
        self._handlers.append(handler)

    def unsubscribe(self, handler: ExamCompletedHandler) -> None:
        """Remove the most recent registration of a handler, if any."""
        for i in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[i] == handler:
                del self._handlers[i]
                return

    def fire(self, exam: Exam) -> None:
        """Call every handler in registration order."""
        logger.debug("Firing exam completion to %d handler(s)", len(self._handlers))
        for handler in list(self._handlers):
            handler(exam)

    def __len__(self) -> int:
        return len(self._handlers)
