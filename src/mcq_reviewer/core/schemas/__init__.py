"""
Schemas Package

JSON schema definition and validation for the question interchange shape.
"""

from .validator import (
    validate_question,
    ValidationError,
)

__all__ = [
    "validate_question",
    "ValidationError",
]
