"""
Examination System Core Package

Shared data models and payload schemas used by the exam delivery modes.

1. **Immutable Data Models**
   - Questions, subjects and answers are frozen dataclasses
   - Required fields are validated when the object is built

2. **Closed Question Variants**
   - TrueFalseQuestion, ChooseOneQuestion, ChooseAllQuestion
   - Each tagged with a QuestionType that callers cannot change

3. **Validated Payloads**
   - `from_dict()` checks payloads against JSON schemas before building
"""

from .models import (
    Answer,
    ChooseAllQuestion,
    ChooseOneQuestion,
    Question,
    QuestionType,
    Subject,
    TrueFalseQuestion,
)

__all__ = [
    "Answer",
    "ChooseAllQuestion",
    "ChooseOneQuestion",
    "Question",
    "QuestionType",
    "Subject",
    "TrueFalseQuestion",
]
