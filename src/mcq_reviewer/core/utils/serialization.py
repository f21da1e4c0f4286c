"""
Serialization Utilities

Export and re-import of parsed questions as JSON.

The exported file is a pretty-printed JSON array of interchange-shape
objects (see ``ParsedQuestion.to_dict``), the same layout the original
browser app downloaded as ``parsed-mcqs.json``. Re-importing an export
reproduces identical ParsedQuestion values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import ParsedQuestion
from ..schemas.validator import validate_question, ValidationError

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: ParsedQuestion) -> dict[str, Any]:
    """
    Serialize a ParsedQuestion to a dictionary.

    The output can be written to JSON and will pass strict validation.
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> ParsedQuestion:
    """
    Deserialize a ParsedQuestion from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building the record
        strict: Use full JSON Schema validation

    Returns:
        ParsedQuestion instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data breaks a model invariant
    """
    if validate:
        validate_question(data, strict=strict)
    return ParsedQuestion.from_dict(data)


def serialize_questions(questions: Iterable[ParsedQuestion]) -> list[dict[str, Any]]:
    """Serialize questions in order."""
    return [serialize_question(q) for q in questions]


def deserialize_questions(
    data: Any,
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[ParsedQuestion]:
    """
    Deserialize a decoded JSON array of questions.

    Raises:
        ValidationError: If data is not a list or any entry is invalid.
            The message names the offending index.
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Expected a list of questions, got {type(data).__name__}",
            path="",
        )

    questions = []
    for i, item in enumerate(data):
        try:
            questions.append(deserialize_question(item, validate=validate, strict=strict))
        except ValidationError as e:
            raise ValidationError(
                f"Invalid question at index {i}: {e}",
                path=f"[{i}].{e.path}" if e.path else f"[{i}]",
                errors=e.errors or [str(e)],
            ) from e
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid question at index {i}: {e}",
                path=f"[{i}]",
                errors=[str(e)],
            ) from e
    return questions


# ─────────────────────────────────────────────────────────────────────────────
# JSON File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def dumps_questions(questions: Iterable[ParsedQuestion]) -> str:
    """Render questions as the pretty JSON text used for exports."""
    return json.dumps(serialize_questions(questions), indent=2, ensure_ascii=False)


def save_questions_json(questions: Iterable[ParsedQuestion], path: Path) -> None:
    """
    Save questions to a JSON file.

    Args:
        questions: Questions to save, in order
        path: Output path, parent directories are created
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps_questions(questions))
        f.write("\n")
    logger.debug(f"Saved questions to {path}")


def load_questions_json(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[ParsedQuestion]:
    """
    Load questions from a JSON export.

    Args:
        path: Path to the JSON file
        validate: Whether to validate each question
        strict: Use full JSON Schema validation

    Returns:
        List of ParsedQuestion in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or any question is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Error parsing {path.name}: {e}",
                path=str(path),
                errors=[str(e)]
            ) from e

    return deserialize_questions(data, validate=validate, strict=strict)
