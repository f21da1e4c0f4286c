"""
Module: parsing

Purpose:
    Text parsing pipeline that turns noisy question-paper text into
    validated multiple-choice records. Pure and stateless.

Key Functions:
    - parse_mcq_text(): Main entry point
    - parse_document(): Entry point with stage statistics
    - normalize_text(): Whitespace/punctuation cleanup

Key Classes:
    - ParseResult: Questions plus statistics

Used By:
    - mcq_reviewer.cli
"""

from .normalizer import normalize_text
from .pipeline import ParseResult, parse_document, parse_mcq_text

__all__ = [
    "normalize_text",
    "parse_document",
    "parse_mcq_text",
    "ParseResult",
]
