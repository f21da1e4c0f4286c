"""
Module: parsing.pipeline

Purpose:
    Main entry point of the parser. Composes normalization, splitting,
    segmentation, answer-key extraction, option extraction and assembly.

Key Functions:
    - parse_mcq_text(): Raw text → list of ParsedQuestion
    - parse_document(): Same, with per-stage counts in a ParseResult

Key Classes:
    - ParseResult: Questions plus block / answer-key statistics

Used By:
    - mcq_reviewer.cli: parse and quiz commands
    - PDF text and pasted text share this entry point

Pipeline:
    1. normalize_text
    2. split_document → main text / answer-key text
    3. segment_questions(main text)      } independent
    4. extract_answer_key(answer text)   }
    5. extract_options per block (inside assemble_questions)
    6. assemble_questions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from mcq_reviewer.core.models.questions import ParsedQuestion
from .answer_key.extractor import extract_answer_key
from .assembler import assemble_questions
from .detection.numerals import segment_questions
from .normalizer import normalize_text
from .splitter import split_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one document.

    Attributes:
        questions: Validated questions in document order.
        block_count: Number of question blocks segmented.
        answer_key_count: Number of answer-key entries recognised.
        has_answer_key: Whether an answer-key heading was found.
    """
    questions: tuple[ParsedQuestion, ...]
    block_count: int
    answer_key_count: int
    has_answer_key: bool

    @property
    def dropped_count(self) -> int:
        """Blocks that did not become questions."""
        return self.block_count - len(self.questions)

    @property
    def answered_count(self) -> int:
        """Questions correlated with an answer-key entry."""
        return sum(1 for q in self.questions if q.answer_key)


def parse_document(raw_text: Optional[str]) -> ParseResult:
    """
    Parse raw text and report stage statistics.

    Never raises for string input; empty input gives an empty result.

    Example:
        >>> result = parse_document("1. What is 2+2?\\nA) 3\\nB) 4\\nC) 5")
        >>> len(result.questions), result.dropped_count
        (1, 0)
    """
    text = normalize_text(raw_text)
    halves = split_document(text)

    blocks = segment_questions(halves.main_text)
    answer_key = extract_answer_key(halves.answer_key_text)
    questions = assemble_questions(blocks, answer_key)

    result = ParseResult(
        questions=tuple(questions),
        block_count=len(blocks),
        answer_key_count=len(answer_key),
        has_answer_key=halves.has_answer_key,
    )
    logger.info(f"Parsed {len(questions)} question(s) from {len(blocks)} block(s)")
    if result.has_answer_key:
        logger.debug(
            f"Answer key: {result.answer_key_count} entries, "
            f"{result.answered_count} question(s) correlated"
        )
    return result


def parse_mcq_text(raw_text: Optional[str]) -> List[ParsedQuestion]:
    """
    Parse raw text into multiple-choice questions.

    Args:
        raw_text: Text from PDF extraction or pasted by a user.

    Returns:
        New list of ParsedQuestion in document order, each with a
        non-empty stem and at least three options. The caller owns it.

    Example:
        >>> qs = parse_mcq_text("1. What is 2+2?\\nA) 3\\nB) 4\\nC) 5\\n")
        >>> qs[0].question, qs[0].answer_key
        ('What is 2+2?', '')
    """
    return list(parse_document(raw_text).questions)
