import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import exam_system
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_system.core.models import (
    ChooseAllQuestion,
    ChooseOneQuestion,
    Subject,
    TrueFalseQuestion,
)


class ScriptedConsole:
    """Console double: replays input lines and records everything written."""

    def __init__(self, lines=()):
        self._lines = list(lines)
        self.output: list[str] = []
        self.prompts: list[str] = []

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self._lines:
            raise EOFError("script exhausted")
        return self._lines.pop(0)


# Common test fixtures
@pytest.fixture
def make_console():
    """Factory for scripted consoles."""
    return ScriptedConsole


@pytest.fixture
def subject() -> Subject:
    return Subject("Computer Science", "CS101")


@pytest.fixture
def questions():
    """The 5/5/10 mark question set used by the console app."""
    return (
        TrueFalseQuestion(
            header="Q1",
            body="C# is a statically typed language.",
            marks=5,
            correct_answer=True,
        ),
        ChooseOneQuestion(
            header="Q2",
            body="Which language is primarily used for web development?",
            marks=5,
            options=("C#", "Java", "JavaScript", "Python"),
            correct_answer="JavaScript",
        ),
        ChooseAllQuestion(
            header="Q3",
            body="Select all object-oriented languages:",
            marks=10,
            options=("C#", "HTML", "Python", "CSS"),
            correct_answers=("C#", "Python"),
        ),
    )
