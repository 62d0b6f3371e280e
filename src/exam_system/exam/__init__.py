"""
Module: exam

Purpose:
    Exam delivery: the practice and final modes, their completion event
    and the console they talk to.

Key Functions:
    - create_exam(): Choose a delivery mode from the menu choice

Key Classes:
    - ExamConfig: Settings for a run
    - PracticeExam / FinalExam: Delivery modes
    - ExamCompletedEvent: Completion notification
    - StdConsole: stdin/stdout console

Used By:
    - exam_system.app: Console entry point
"""

from .config import ExamConfig
from .console import Console, StdConsole
from .events import ExamCompletedEvent
from .exams import (
    Exam,
    ExamError,
    ExamResult,
    ExamState,
    FinalExam,
    PracticeExam,
    QuestionOutcome,
    create_exam,
)

__all__ = [
    # Config
    "ExamConfig",
    # I/O
    "Console",
    "StdConsole",
    # Events
    "ExamCompletedEvent",
    # Exams
    "Exam",
    "ExamError",
    "ExamResult",
    "ExamState",
    "FinalExam",
    "PracticeExam",
    "QuestionOutcome",
    "create_exam",
]
