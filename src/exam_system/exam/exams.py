"""
Module: exam.exams

Purpose:
    Exam delivery modes. An exam walks its questions once, reads one answer
    line per question, marks it, and reports the total score before firing
    its completion event.

Key Classes:
    - ExamState: NOT_STARTED -> IN_PROGRESS -> COMPLETED
    - Exam: Shared question loop and lifecycle
    - PracticeExam: Feedback after every answer
    - FinalExam: No feedback until the final score
    - ExamResult / QuestionOutcome: What a run produced
    - ExamError: Exception for lifecycle misuse

Key Functions:
    - create_exam(): Pick the delivery mode from the menu choice

Dependencies:
    - core.models (questions, subject, answer)
    - exam.events.ExamCompletedEvent
    - exam.console.Console

Used By:
    - app.main
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence

from exam_system.core.models import Answer, Question, Subject

from .config import ExamConfig
from .console import Console
from .events import ExamCompletedEvent

logger = logging.getLogger(__name__)

PRACTICE_CHOICE = "1"


class ExamError(Exception):
    """Error in exam setup or lifecycle."""
    pass


class ExamState(str, Enum):
    """Lifecycle of a single exam instance."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class QuestionOutcome:
    """
    How one question was answered.

    Attributes:
        header: Question header like "Q1"
        answer: Tokens the candidate submitted
        correct: Whether the answer earned the marks
        marks_awarded: Question marks if correct, else 0
    """
    header: str
    answer: Answer
    correct: bool
    marks_awarded: int


@dataclass(frozen=True)
class ExamResult:
    """
    Result of a completed exam run (immutable).

    Invariants:
        - score == sum of marks_awarded over outcomes
        - 0 <= score <= total_marks
    """
    score: int
    total_marks: int
    outcomes: tuple[QuestionOutcome, ...]

    def __post_init__(self) -> None:
        awarded = sum(o.marks_awarded for o in self.outcomes)
        if awarded != self.score:
            raise ValueError(f"score {self.score} does not match awarded marks {awarded}")
        if not (0 <= self.score <= self.total_marks):
            raise ValueError(f"score must be 0-{self.total_marks}: {self.score}")

    @property
    def correct_count(self) -> int:
        return sum(1 for o in self.outcomes if o.correct)


class Exam(ABC):
    """
    Base class for exam delivery modes.

    An exam owns its question sequence and shares its subject. It runs
    exactly once; a second run() raises ExamError.

    Attributes:
        time_in_minutes: Advertised time limit (not enforced)
        questions: Questions in the order they are asked
        subject: Course the exam belongs to
        completed: Completion event, fired once after the score line
        state: Current ExamState
    """

    score_label: ClassVar[str]

    def __init__(
        self,
        time_in_minutes: int,
        questions: Sequence[Question],
        subject: Subject,
        *,
        config: Optional[ExamConfig] = None,
    ):
        if time_in_minutes <= 0:
            raise ExamError(f"time_in_minutes must be positive: {time_in_minutes}")
        if not questions:
            raise ExamError("An exam needs at least one question")

        self.time_in_minutes = time_in_minutes
        self.questions: tuple[Question, ...] = tuple(questions)
        self.subject = subject
        self.config = config or ExamConfig(time_in_minutes=time_in_minutes)
        self.completed = ExamCompletedEvent()
        self._state = ExamState.NOT_STARTED
        self._score = 0

    @property
    def state(self) -> ExamState:
        return self._state

    @property
    def score(self) -> int:
        """Marks accumulated so far (final once the exam is COMPLETED)."""
        return self._score

    @property
    def total_marks(self) -> int:
        """Sum of all question marks. Always calculated, never stored."""
        return sum(q.marks for q in self.questions)

    def run(self, console: Console) -> ExamResult:
        """
        Ask every question once, print the score and fire completion.

        Args:
            console: Where questions are shown and answers read from

        Returns:
            ExamResult for this run

        Raises:
            ExamError: If the exam has already been started
        """
        if self._state is not ExamState.NOT_STARTED:
            raise ExamError(f"Exam has already been run (state: {self._state})")

        self._state = ExamState.IN_PROGRESS
        logger.info(
            "Starting %s for %s (%d questions, %d marks)",
            type(self).__name__, self.subject.code, len(self.questions), self.total_marks,
        )

        outcomes = []
        for question in self.questions:
            question.display(console)
            answer = Answer.from_line(console.prompt(self.config.answer_prompt))
            correct = question.evaluate_answer(answer.tokens)
            awarded = question.marks if correct else 0
            self._score += awarded
            logger.debug("%s answered %r: correct=%s", question.header, answer.tokens, correct)
            outcomes.append(QuestionOutcome(question.header, answer, correct, awarded))
            self._after_answer(console, correct)

        self._state = ExamState.COMPLETED
        console.write_line(f"{self.score_label}: {self._score}")
        logger.info("Completed %s: %d/%d", type(self).__name__, self._score, self.total_marks)

        self.completed.fire(self)
        return ExamResult(self._score, self.total_marks, tuple(outcomes))

    show_exam = run

    @abstractmethod
    def _after_answer(self, console: Console, correct: bool) -> None:
        """Write whatever follows a marked answer."""


class PracticeExam(Exam):
    """Exam that says whether each answer was right straight away."""

    score_label = "Your Score"

    def _after_answer(self, console: Console, correct: bool) -> None:
        console.write_line("Correct!" if correct else "Wrong Answer.")
        console.write_line()


class FinalExam(Exam):
    """Exam that only reveals the total score at the end."""

    score_label = "Your Final Score"

    def _after_answer(self, console: Console, correct: bool) -> None:
        console.write_line()


def create_exam(
    choice: str,
    questions: Sequence[Question],
    subject: Subject,
    config: Optional[ExamConfig] = None,
) -> Exam:
    """
    Pick the delivery mode from the menu choice.

    "1" gives a PracticeExam; anything else (including "" and "2") gives a
    FinalExam. The choice is compared as typed, without trimming.
    """
    config = config or ExamConfig()
    exam_cls = PracticeExam if choice == PRACTICE_CHOICE else FinalExam
    return exam_cls(config.time_in_minutes, questions, subject, config=config)
