"""
Module: parsing.answer_key.extractor

Purpose:
    Read the answer-key section of a document into a mapping from
    question number to correct letter and explanation.

Key Functions:
    - extract_answer_key(): Try structured entries, then one-line entries
    - extract_structured_entries(): "<n>. Correct answer: <L>" + explanation
    - extract_line_entries(): "<n>) <L> - reason" one per line

Used By:
    - parsing.pipeline: Called once per document

Algorithm:
    1. Structured strategy: repeated "N. Correct answer: L" units, each
       explanation running until the next unit or the end of the text.
    2. Only if (1) found nothing: line strategy over non-empty trimmed
       lines; lines that do not match are skipped.
    In both, a later entry for the same number replaces an earlier one.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

from mcq_reviewer.core.models.answers import AnswerKeyEntry
from ..normalizer import normalize_text

logger = logging.getLogger(__name__)

# "1. Correct answer: D" followed by explanation up to the next such unit.
# The explanation may start right after the letter ("BBecause ...").
# Only spaces or tabs between a newline and the numeral; blank lines are not skipped.
STRUCTURED_ENTRY_PATTERN = re.compile(
    r"(?:^|\n)[ \t]*(\d{1,4})\.\s*correct\s*answer\s*:\s*([A-D])\s*(.*?)"
    r"(?=\n[ \t]*\d{1,4}\.\s*correct\s*answer\s*:|\Z)",
    re.IGNORECASE | re.DOTALL,
)

# "1) B - explanation", "2: c", "3 D: reason"
LINE_ENTRY_PATTERN = re.compile(
    r"(\d{1,4})\s*[).:-]?\s*([A-D])\b(?:\s*[-\u2013\u2014:]\s*(.+))?",
    re.IGNORECASE,
)


def extract_structured_entries(text: str) -> Dict[int, AnswerKeyEntry]:
    """
    Parse paragraph-style "N. Correct answer: L" entries.

    Explanations are normalized with the same rules as the document.
    """
    entries: Dict[int, AnswerKeyEntry] = {}
    for match in STRUCTURED_ENTRY_PATTERN.finditer(text):
        number = int(match.group(1))
        entries[number] = AnswerKeyEntry(
            letter=match.group(2).upper(),
            explanation=normalize_text(match.group(3)),
        )
    return entries


def extract_line_entries(text: str) -> Dict[int, AnswerKeyEntry]:
    """Parse terse one-answer-per-line entries, skipping other lines."""
    entries: Dict[int, AnswerKeyEntry] = {}
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        match = LINE_ENTRY_PATTERN.fullmatch(line)
        if not match:
            continue
        entries[int(match.group(1))] = AnswerKeyEntry(
            letter=match.group(2).upper(),
            explanation=(match.group(3) or "").strip(),
        )
    return entries


def extract_answer_key(answer_key_text: str) -> Dict[int, AnswerKeyEntry]:
    """
    Parse an answer-key section.

    Args:
        answer_key_text: Section text from the splitter, possibly empty.

    Returns:
        Dict mapping question number → AnswerKeyEntry. Empty when the text
        is empty or in neither recognised format.

    Example:
        >>> extract_answer_key("Answers\\n3) C - short reason")
        {3: AnswerKeyEntry(letter='C', explanation='short reason')}
    """
    if not answer_key_text:
        return {}

    text = answer_key_text.strip()

    entries = extract_structured_entries(text)
    if entries:
        logger.debug(f"Answer key: {len(entries)} structured entries")
        return entries

    entries = extract_line_entries(text)
    if entries:
        logger.debug(f"Answer key: {len(entries)} line entries")
    else:
        logger.debug("Answer key section present but no entries recognised")
    return entries
