"""
Utils Package

Serialization of parsed questions.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_questions,
    deserialize_questions,
    dumps_questions,
    load_questions_json,
    save_questions_json,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_questions",
    "deserialize_questions",
    "dumps_questions",
    "load_questions_json",
    "save_questions_json",
]
