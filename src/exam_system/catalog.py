"""
Module: catalog

Purpose:
    The built-in subject and question set the console app runs. Kept as
    payloads so every build goes through the same schema validation as
    any other question data.

Key Functions:
    - build_subject(): Fresh Subject
    - build_questions(): Fresh tuple of the three default questions
"""

from __future__ import annotations

from exam_system.core.models import Question, Subject


DEFAULT_SUBJECT: dict = {"name": "Computer Science", "code": "CS101"}

DEFAULT_QUESTIONS: tuple[dict, ...] = (
    {
        "type": "true_false",
        "header": "Q1",
        "body": "C# is a statically typed language.",
        "marks": 5,
        "correct_answer": True,
    },
    {
        "type": "choose_one",
        "header": "Q2",
        "body": "Which language is primarily used for web development?",
        "marks": 5,
        "options": ["C#", "Java", "JavaScript", "Python"],
        "correct_answer": "JavaScript",
    },
    {
        "type": "choose_all",
        "header": "Q3",
        "body": "Select all object-oriented languages:",
        "marks": 10,
        "options": ["C#", "HTML", "Python", "CSS"],
        "correct_answers": ["C#", "Python"],
    },
)


def build_subject() -> Subject:
    return Subject.from_dict(DEFAULT_SUBJECT)


def build_questions() -> tuple[Question, ...]:
    """Build the default questions. Each call returns new objects."""
    return tuple(Question.from_dict(payload) for payload in DEFAULT_QUESTIONS)
