"""
Schema Validation Utilities

Validates question and subject payloads against the JSON schemas shipped
next to this module.

Payloads are plain dicts (the same shape `to_dict()` produces). Every
payload is checked with jsonschema before a model is built from it, and
all violations are reported together rather than only the first one.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Loaded lazily, keyed by schema name
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate(data: Any, schema_name: str) -> None:
    schema = _load_schema(schema_name)
    validator = jsonschema.Draft7Validator(schema)
    violations = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if not violations:
        return

    first = violations[0]
    raise ValidationError(
        f"{schema_name} schema validation failed: {first.message}",
        path=".".join(str(p) for p in first.absolute_path),
        errors=[e.message for e in violations],
    )


def validate_question(data: dict[str, Any]) -> None:
    """
    Validate a question payload.

    Args:
        data: Question dictionary to validate

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question payload must be a dict, got {type(data).__name__}")
    _validate(data, "question")


def validate_subject(data: dict[str, Any]) -> None:
    """
    Validate a subject payload.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Subject payload must be a dict, got {type(data).__name__}")
    _validate(data, "subject")
