"""
Module: questions

Purpose:
    Provides the Question variants - the closed set of question kinds an
    exam can ask. Every variant is an immutable record that knows how to
    render itself and how to mark a user's answer tokens.

Key Classes:
    - QuestionType: Tag identifying the variant
    - Question: Abstract base (header, body, marks)
    - TrueFalseQuestion: Boolean answer
    - ChooseOneQuestion: One option out of a list
    - ChooseAllQuestion: Every correct option out of a list

Key Functions:
    - Question.render(): Lines of the human readable rendering
    - Question.display(console): Write the rendering to a console
    - Question.evaluate_answer(tokens): Mark a submitted answer
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - abc, dataclasses, enum (std)
    - core.schemas.validator (payload validation)

Used By:
    - exam.exams (PracticeExam, FinalExam)
    - catalog (default question set)

Marking Rules:
    Malformed or missing answer tokens never raise. They are an incorrect
    answer, so evaluate_answer() always returns a bool.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Sequence, Type

from ..schemas.validator import validate_question

if TYPE_CHECKING:
    from ...exam.console import Console


class QuestionType(str, Enum):
    """Which variant a question is."""
    TRUE_FALSE = "true_false"
    CHOOSE_ONE = "choose_one"
    CHOOSE_ALL = "choose_all"

    def __str__(self) -> str:
        return self.value


def _normalize(text: str) -> str:
    return text.strip().casefold()


@dataclass(frozen=True)
class Question(ABC):
    """
    Common fields and capabilities of every question (immutable).

    Attributes:
        header: Short label like "Q1"
        body: Prompt text shown to the candidate
        marks: Points awarded for a correct answer (non-negative)

    The variant tag is exposed as ``question_type``. It is a class-level
    constant of each variant and cannot be set by the caller.
    """

    question_type: ClassVar[QuestionType]

    header: str
    body: str
    marks: int

    def __post_init__(self) -> None:
        """Validate shared fields on construction."""
        if not isinstance(self.header, str) or not self.header.strip():
            raise ValueError(f"header must be a non-empty string: {self.header!r}")
        if not isinstance(self.body, str) or not self.body.strip():
            raise ValueError(f"body must be a non-empty string: {self.body!r}")
        if isinstance(self.marks, bool) or not isinstance(self.marks, int):
            raise ValueError(f"marks must be an integer: {self.marks!r}")
        if self.marks < 0:
            raise ValueError(f"marks cannot be negative: {self.marks}")

    # ─────────────────────────────────────────────────────────────────────────
    # Display
    # ─────────────────────────────────────────────────────────────────────────

    def render(self) -> list[str]:
        """
        Render the question as display lines.

        Returns:
            Header/marks line, body, then any numbered options
        """
        return [f"{self.header} - {self.marks} Marks", self.body, *self._option_lines()]

    def display(self, console: Console) -> None:
        """Write the rendered question to the console."""
        for line in self.render():
            console.write_line(line)

    def _option_lines(self) -> list[str]:
        return []

    # ─────────────────────────────────────────────────────────────────────────
    # Marking
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def evaluate_answer(self, tokens: Sequence[str]) -> bool:
        """
        Mark a submitted answer.

        Args:
            tokens: Answer tokens in submission order (comma separated input)

        Returns:
            True if the answer earns this question's marks
        """

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to a payload accepted by from_dict()."""
        return {
            "type": self.question_type.value,
            "header": self.header,
            "body": self.body,
            "marks": self.marks,
            **self._extra_fields(),
        }

    @abstractmethod
    def _extra_fields(self) -> Dict[str, Any]:
        """Variant specific payload fields."""

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Build the matching variant from a payload.

        Args:
            data: Dict with a "type" key plus the variant's fields

        Returns:
            A TrueFalseQuestion, ChooseOneQuestion or ChooseAllQuestion

        Raises:
            ValidationError: If the payload does not match the schema
        """
        validate_question(data)
        variant = _VARIANTS[QuestionType(data["type"])]
        return variant._from_payload(data)

    @classmethod
    @abstractmethod
    def _from_payload(cls, data: dict) -> Question:
        """Construct this variant from an already validated payload."""


@dataclass(frozen=True)
class TrueFalseQuestion(Question):
    """Question answered with "true" or "false"."""

    question_type: ClassVar[QuestionType] = QuestionType.TRUE_FALSE

    correct_answer: bool

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.correct_answer, bool):
            raise ValueError(f"correct_answer must be a bool: {self.correct_answer!r}")

    def _option_lines(self) -> list[str]:
        return ["1. True", "2. False"]

    def evaluate_answer(self, tokens: Sequence[str]) -> bool:
        if not tokens:
            return False
        parsed = _parse_bool(tokens[0])
        return parsed is not None and parsed == self.correct_answer

    def _extra_fields(self) -> Dict[str, Any]:
        return {"correct_answer": self.correct_answer}

    @classmethod
    def _from_payload(cls, data: dict) -> TrueFalseQuestion:
        return cls(
            header=data["header"],
            body=data["body"],
            marks=data["marks"],
            correct_answer=data["correct_answer"],
        )


def _parse_bool(token: str) -> bool | None:
    """Parse "true"/"false" in any casing, None for anything else."""
    value = _normalize(token)
    if value == "true":
        return True
    if value == "false":
        return False
    return None


@dataclass(frozen=True)
class _OptionsQuestion(Question):
    """Shared option handling for the choice variants."""

    options: tuple[str, ...]

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise ValueError(f"{self.header}: options cannot be empty")
        for option in self.options:
            if not isinstance(option, str) or not option.strip():
                raise ValueError(f"{self.header}: options must be non-empty strings: {option!r}")

    def _option_lines(self) -> list[str]:
        return [f"{i}. {option}" for i, option in enumerate(self.options, start=1)]

    def _is_option(self, answer: str) -> bool:
        return any(_normalize(option) == _normalize(answer) for option in self.options)


@dataclass(frozen=True)
class ChooseOneQuestion(_OptionsQuestion):
    """Question with exactly one correct option."""

    question_type: ClassVar[QuestionType] = QuestionType.CHOOSE_ONE

    correct_answer: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.correct_answer, str) or not self._is_option(self.correct_answer):
            raise ValueError(
                f"{self.header}: correct_answer {self.correct_answer!r} is not one of the options"
            )

    def evaluate_answer(self, tokens: Sequence[str]) -> bool:
        if not tokens:
            return False
        return _normalize(tokens[0]) == _normalize(self.correct_answer)

    def _extra_fields(self) -> Dict[str, Any]:
        return {"options": list(self.options), "correct_answer": self.correct_answer}

    @classmethod
    def _from_payload(cls, data: dict) -> ChooseOneQuestion:
        return cls(
            header=data["header"],
            body=data["body"],
            marks=data["marks"],
            options=tuple(data["options"]),
            correct_answer=data["correct_answer"],
        )


@dataclass(frozen=True)
class ChooseAllQuestion(_OptionsQuestion):
    """
    Question where every correct option must be selected.

    Marking is a length check followed by a per-token membership test:
    the number of submitted tokens must equal the number of correct answers,
    then each token must match some correct answer. Tokens are not checked
    for being distinct, so ["C#", "C#"] passes against {"C#", "Python"}.
    """

    question_type: ClassVar[QuestionType] = QuestionType.CHOOSE_ALL

    correct_answers: tuple[str, ...]

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "correct_answers", tuple(self.correct_answers))
        if not self.correct_answers:
            raise ValueError(f"{self.header}: correct_answers cannot be empty")
        seen: set[str] = set()
        for answer in self.correct_answers:
            if not isinstance(answer, str) or not self._is_option(answer):
                raise ValueError(f"{self.header}: correct answer {answer!r} is not one of the options")
            key = _normalize(answer)
            if key in seen:
                raise ValueError(f"{self.header}: duplicate correct answer {answer!r}")
            seen.add(key)

    def evaluate_answer(self, tokens: Sequence[str]) -> bool:
        if len(tokens) != len(self.correct_answers):
            return False
        accepted = {_normalize(answer) for answer in self.correct_answers}
        return all(_normalize(token) in accepted for token in tokens)

    def _extra_fields(self) -> Dict[str, Any]:
        return {"options": list(self.options), "correct_answers": list(self.correct_answers)}

    @classmethod
    def _from_payload(cls, data: dict) -> ChooseAllQuestion:
        return cls(
            header=data["header"],
            body=data["body"],
            marks=data["marks"],
            options=tuple(data["options"]),
            correct_answers=tuple(data["correct_answers"]),
        )


_VARIANTS: Dict[QuestionType, Type[Question]] = {
    QuestionType.TRUE_FALSE: TrueFalseQuestion,
    QuestionType.CHOOSE_ONE: ChooseOneQuestion,
    QuestionType.CHOOSE_ALL: ChooseAllQuestion,
}
