"""
Module: answer

Purpose:
    Provides the Answer dataclass - one submitted response, held only for
    the duration of a single evaluation.

Key Functions:
    - Answer.from_line(line): Split a console line into tokens
    - Answer.empty(): Answer with no tokens
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


TOKEN_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class Answer:
    """
    Submitted answer tokens (immutable).

    Tokens keep their original whitespace and casing; questions decide
    how to compare them.

    Example:
        >>> Answer.from_line("C#, Python").tokens
        ('C#', ' Python')
        >>> Answer.from_line("").tokens
        ('',)
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))

    @classmethod
    def from_line(cls, line: str) -> Answer:
        """
        Split one input line on commas (no escaping).

        An empty line yields a single empty token, never an empty answer.
        """
        return cls(tokens=tuple(line.split(TOKEN_SEPARATOR)))

    @classmethod
    def empty(cls) -> Answer:
        return cls(tokens=())

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> str:
        return self.tokens[index]
