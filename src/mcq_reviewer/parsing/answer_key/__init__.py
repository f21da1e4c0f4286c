"""
Module: parsing.answer_key

Purpose:
    Answer-key extraction from the trailing section of a document.

Key Functions:
    - extract_answer_key(): Number → (letter, explanation) mapping

Used By:
    - parsing.pipeline
"""

from .extractor import (
    extract_answer_key,
    extract_line_entries,
    extract_structured_entries,
)

__all__ = [
    "extract_answer_key",
    "extract_line_entries",
    "extract_structured_entries",
]
