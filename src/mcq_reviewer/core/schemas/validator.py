"""
Schema Validation Utilities

Validates exported question data before it is turned back into
ParsedQuestion records.

Two levels:
- Basic checks (always): required fields, types, option count and keys.
  Tolerant of missing ``answerKey``/``explanation`` so hand-written files load.
- Strict mode: full JSON Schema validation with ``jsonschema`` against
  ``parsed_question.schema.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.questions import MIN_OPTIONS, OPTION_KEYS


# Load schemas lazily
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


def validate_question(data: Any, *, strict: bool = False) -> None:
    """
    Validate one exported question.

    Args:
        data: Decoded JSON value for a single question
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question must be an object, got {type(data).__name__}",
            path="",
        )

    required = ["number", "question", "options"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    number = data["number"]
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise ValidationError(
            f"Invalid number: {number!r} (must be a non-negative integer)",
            path="number"
        )

    question = data["question"]
    if not isinstance(question, str) or not question.strip():
        raise ValidationError("question must be a non-empty string", path="question")

    options = data["options"]
    if not isinstance(options, list):
        raise ValidationError("options must be a list", path="options")
    if len(options) < MIN_OPTIONS:
        raise ValidationError(
            f"Too few options: {len(options)} (need at least {MIN_OPTIONS})",
            path="options"
        )
    for i, option in enumerate(options):
        _validate_option(option, f"options[{i}]")

    answer_key = data.get("answerKey", "")
    if answer_key and str(answer_key).upper() not in OPTION_KEYS:
        raise ValidationError(
            f"Invalid answerKey: {answer_key!r} (must be A-D or empty)",
            path="answerKey"
        )

    if strict:
        schema = _load_schema("parsed_question")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )


def _validate_option(data: Any, path: str) -> None:
    """Validate a single option object."""
    if not isinstance(data, dict):
        raise ValidationError("option must be an object", path=path)

    missing = [f for f in ("key", "text") if f not in data]
    if missing:
        raise ValidationError(
            f"Option missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    key = data["key"]
    if not isinstance(key, str) or key.upper() not in OPTION_KEYS:
        raise ValidationError(f"Invalid option key: {key!r}", path=f"{path}.key")

    text = data["text"]
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("option text must be a non-empty string", path=f"{path}.text")
