"""
Module: parsing.splitter

Purpose:
    Separate the question body from a trailing answer-key section.

Key Functions:
    - split_document(): Split normalized text at the first answer-key heading

Used By:
    - parsing.pipeline

Notes:
    Only the first heading counts. A line in the question body starting
    with "Answer ..." will mis-split the document; heading-based detection
    accepts that limitation.
"""

from __future__ import annotations

import logging
import re

from mcq_reviewer.core.models.blocks import DocumentHalves

logger = logging.getLogger(__name__)

# "Answers", "Answer", "Answer Key", "Answer Explanations" as a whole word
# at the start of a line (after a newline).
ANSWER_HEADING_PATTERN = re.compile(
    r"\n(?:answers?|answer key|answer explanations)\b",
    re.IGNORECASE,
)


def split_document(text: str) -> DocumentHalves:
    """
    Split text into main body and answer-key section.

    Args:
        text: Normalized document text.

    Returns:
        DocumentHalves. ``answer_key_text`` starts at the heading line;
        ``main_text`` is everything before it, trimmed. Without a heading
        the whole input is the main text.

    Example:
        >>> halves = split_document("1. Q\\nA) x\\nAnswers\\n1. A")
        >>> halves.answer_key_text
        'Answers\\n1. A'
    """
    match = ANSWER_HEADING_PATTERN.search(text)
    if not match:
        return DocumentHalves(main_text=text, answer_key_text="")

    heading_start = match.start() + 1  # skip the newline
    logger.debug(f"Answer-key heading found at offset {heading_start}")
    return DocumentHalves(
        main_text=text[:match.start()].strip(),
        answer_key_text=text[heading_start:],
    )
