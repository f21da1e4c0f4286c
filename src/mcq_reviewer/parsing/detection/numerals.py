"""
Module: parsing.detection.numerals

Purpose:
    Question numeral detection - finds question start markers
    ("1.", "12)", "3 -") in the main body and cuts the text into
    QuestionBlocks.

Key Functions:
    - find_question_markers(): All start markers in document order
    - segment_questions(): Split main text into QuestionBlocks

Key Classes:
    - QuestionMarker: Immutable dataclass for a detected question start

Used By:
    - parsing.pipeline: Segments the main text
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from mcq_reviewer.core.models.blocks import QuestionBlock

logger = logging.getLogger(__name__)

# 1-4 digits, one of . ) -, then whitespace; only at a line start.
# The trailing whitespace may span a newline, so "1.\n2. x" is an empty
# block 1 (dropped) followed by block 2.
QUESTION_START_PATTERN = re.compile(r"^[ \t]*(\d{1,4})[ \t]*[.)-]\s+", re.MULTILINE)


@dataclass(frozen=True)
class QuestionMarker:
    """
    Detected question start.

    Attributes:
        number: Parsed numeral.
        start: Offset of the marker's first character.
        end: Offset just past the marker (and its trailing whitespace).
    """
    number: int
    start: int
    end: int


def find_question_markers(text: str) -> List[QuestionMarker]:
    """
    Scan text left to right for question start markers.

    Markers never overlap, so offsets are strictly increasing.
    """
    return [
        QuestionMarker(number=int(m.group(1)), start=m.start(), end=m.end())
        for m in QUESTION_START_PATTERN.finditer(text)
    ]


def segment_questions(main_text: str) -> List[QuestionBlock]:
    """
    Split the main body into numbered question blocks.

    Each block's body is the text between one marker's end and the next
    marker's start (the last runs to the end of the text), trimmed.
    Blocks with blank bodies are dropped. Numbers are kept exactly as
    written: duplicates and gaps are preserved in document order.

    Args:
        main_text: Normalized question body.

    Returns:
        Blocks in document order. If the text has no markers at all but
        is not empty, a single block numbered 1 holding the whole text.

    Example:
        >>> [b.number for b in segment_questions("1. A?\\n3) B?\\n3. C?")]
        [1, 3, 3]
    """
    markers = find_question_markers(main_text)

    if not markers:
        body = main_text.strip()
        if not body:
            return []
        logger.debug("No question numerals found; treating text as one question")
        return [QuestionBlock(number=1, body=body)]

    blocks: List[QuestionBlock] = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start if i + 1 < len(markers) else len(main_text)
        body = main_text[marker.end:end].strip()
        if not body:
            logger.debug(f"Dropping empty block for numeral {marker.number}")
            continue
        blocks.append(QuestionBlock(number=marker.number, body=body))

    logger.debug(f"Segmented {len(blocks)} block(s) from {len(markers)} marker(s)")
    return blocks
