"""
Module: subject

Purpose:
    Provides the Subject dataclass - the identity (name and code) of the
    course an exam belongs to. Several exams may share one Subject.

Dependencies:
    - dataclasses (std)
    - core.schemas.validator (payload validation)

Used By:
    - exam.exams.Exam
    - catalog
"""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas.validator import validate_subject


@dataclass(frozen=True, slots=True)
class Subject:
    """
    Course identity (immutable).

    Attributes:
        name: Human readable name like "Computer Science"
        code: Course code like "CS101"

    Example:
        >>> s = Subject("Computer Science", "CS101")
        >>> s.code
        'CS101'
    """

    name: str
    code: str

    def __post_init__(self) -> None:
        """Validate subject on construction."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Subject name must be a non-empty string: {self.name!r}")
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError(f"Subject code must be a non-empty string: {self.code!r}")

    def to_dict(self) -> dict:
        return {"name": self.name, "code": self.code}

    @classmethod
    def from_dict(cls, data: dict) -> Subject:
        """Build a Subject from a validated payload."""
        validate_subject(data)
        return cls(name=data["name"], code=data["code"])

    def __str__(self) -> str:
        return f"{self.code} {self.name}"
