"""
Unit Tests for the Exam Completion Event
"""

import pytest

from exam_system.exam.events import ExamCompletedEvent


class TestExamCompletedEvent:
    """Tests for subscribe / fire ordering."""

    def test_fire_when_no_handlers_then_noop(self):
        event = ExamCompletedEvent()
        event.fire(object())  # type: ignore
        assert len(event) == 0

    def test_fire_when_handlers_then_called_in_registration_order(self):
        event = ExamCompletedEvent()
        calls = []
        event.subscribe(lambda exam: calls.append("first"))
        event.subscribe(lambda exam: calls.append("second"))
        event.subscribe(lambda exam: calls.append("third"))

        event.fire(object())  # type: ignore

        assert calls == ["first", "second", "third"]

    def test_fire_when_called_then_handler_receives_sender(self):
        event = ExamCompletedEvent()
        received = []
        event.subscribe(received.append)
        sender = object()

        event.fire(sender)  # type: ignore

        assert received == [sender]

    def test_subscribe_when_not_callable_then_raises_error(self):
        with pytest.raises(TypeError, match="must be callable"):
            ExamCompletedEvent().subscribe("not a function")  # type: ignore

    def test_unsubscribe_when_registered_then_not_called(self):
        event = ExamCompletedEvent()
        calls = []
        handler = lambda exam: calls.append(exam)  # noqa: E731
        event.subscribe(handler)
        event.unsubscribe(handler)

        event.fire(object())  # type: ignore

        assert calls == []

    def test_unsubscribe_when_unknown_then_ignored(self):
        event = ExamCompletedEvent()
        event.unsubscribe(print)
        assert len(event) == 0

    def test_fire_when_handler_raises_then_propagates(self):
        event = ExamCompletedEvent()

        def broken(exam):
            raise RuntimeError("boom")

        event.subscribe(broken)
        with pytest.raises(RuntimeError, match="boom"):
            event.fire(object())  # type: ignore
