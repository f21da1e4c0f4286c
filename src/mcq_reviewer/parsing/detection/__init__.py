"""
Module: parsing.detection

Purpose:
    Marker detection for locating question and option boundaries by
    position.

Key Modules:
    - numerals: Question start markers ("1.", "2)", "3 -")
    - options: Option markers ("A)", "B.", "C:", "D -")

Used By:
    - parsing.pipeline / parsing.assembler
"""

from .numerals import QuestionMarker, find_question_markers, segment_questions
from .options import extract_options

__all__ = [
    "QuestionMarker",
    "find_question_markers",
    "segment_questions",
    "extract_options",
]
