"""
Module: parsing.normalizer

Purpose:
    Canonicalize whitespace and punctuation variants introduced by PDF
    text extraction or copy/paste, so later stages can match markers by
    position.

Key Functions:
    - normalize_text(): Total, idempotent text cleanup

Used By:
    - parsing.pipeline: First stage of parse_mcq_text
    - parsing.answer_key.extractor: Cleans explanation text
    - extraction.pdf: Cleans each extracted line
"""

from __future__ import annotations

import re
from typing import Optional

NBSP = "\u00a0"
DASH_VARIANTS_PATTERN = re.compile("[\u2013\u2014]")  # en dash, em dash
SPACE_RUN_PATTERN = re.compile(r"[ \t]+")
INDENTED_LINE_PATTERN = re.compile(r"\n[ \t]+")


def normalize_text(raw: Optional[str]) -> str:
    """
    Normalize raw text.

    Applied in order:
    1. Non-breaking space → space
    2. En/em dash → "-"
    3. Carriage returns removed
    4. Runs of spaces/tabs → one space
    5. Leading spaces/tabs after a newline removed
    6. Whole text trimmed

    Args:
        raw: Text to clean; None is treated as empty.

    Returns:
        Normalized text ("" for empty input). Never raises.

    Example:
        >>> normalize_text("  1.\\u00a0Pick\\r\\n   A) one \\u2013 two ")
        '1. Pick\\nA) one - two'
    """
    if not raw:
        return ""
    text = raw.replace(NBSP, " ")
    text = DASH_VARIANTS_PATTERN.sub("-", text)
    text = text.replace("\r", "")
    text = SPACE_RUN_PATTERN.sub(" ", text)
    text = INDENTED_LINE_PATTERN.sub("\n", text)
    return text.strip()
