"""
Module: exam.config

Purpose:
    Configuration dataclass for running an exam. Immutable configuration
    with validation on construction.

Key Classes:
    - ExamConfig: Settings shared by both delivery modes

Used By:
    - exam.exams.create_exam
    - app.main
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExamConfig:
    """
    Configuration for an exam run (immutable).

    Attributes:
        time_in_minutes: Advertised time limit. Stored on the exam only,
            nothing enforces it.
        answer_prompt: Text written before reading each answer line

    Example:
        >>> config = ExamConfig(time_in_minutes=45)
    """

    time_in_minutes: int = 30
    answer_prompt: str = "Your Answer: "

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.time_in_minutes <= 0:
            raise ValueError(f"time_in_minutes must be positive: {self.time_in_minutes}")
