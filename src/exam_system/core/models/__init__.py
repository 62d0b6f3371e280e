"""
Core Models Package

Immutable, validated data models for questions, subjects and answers.
All models are frozen dataclasses; question variants are a closed set
tagged by QuestionType.
"""

from .answer import Answer
from .questions import (
    ChooseAllQuestion,
    ChooseOneQuestion,
    Question,
    QuestionType,
    TrueFalseQuestion,
)
from .subject import Subject

__all__ = [
    "Answer",
    "ChooseAllQuestion",
    "ChooseOneQuestion",
    "Question",
    "QuestionType",
    "Subject",
    "TrueFalseQuestion",
]
