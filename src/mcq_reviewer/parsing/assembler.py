"""
Module: parsing.assembler

Purpose:
    Join question blocks, their extracted options and the answer-key
    mapping into validated ParsedQuestion records.

Key Functions:
    - assemble_questions(): Blocks + answer key → ParsedQuestions

Used By:
    - parsing.pipeline
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping

from mcq_reviewer.core.models.answers import AnswerKeyEntry
from mcq_reviewer.core.models.blocks import QuestionBlock
from mcq_reviewer.core.models.questions import ParsedQuestion
from .detection.options import extract_options

logger = logging.getLogger(__name__)


def assemble_questions(
    blocks: Iterable[QuestionBlock],
    answer_key: Mapping[int, AnswerKeyEntry],
) -> List[ParsedQuestion]:
    """
    Build final records in block (document) order.

    A block without a stem or with fewer than three options is dropped
    entirely; no partial record is emitted. Blocks whose number has no
    answer-key entry get an empty answer key and explanation.

    Args:
        blocks: Question blocks in document order.
        answer_key: Question number → AnswerKeyEntry.

    Returns:
        New list of ParsedQuestion. Pure: the same inputs always give
        equal output.
    """
    questions: List[ParsedQuestion] = []
    for block in blocks:
        extraction = extract_options(block)
        if not extraction.is_usable:
            reason = "no question stem" if not extraction.question else (
                f"{len(extraction.options)} option(s)"
            )
            logger.debug(f"Dropping Q{block.number}: {reason}")
            continue

        entry = answer_key.get(block.number)
        questions.append(
            ParsedQuestion(
                number=block.number,
                question=extraction.question,
                options=extraction.options,
                answer_key=entry.letter if entry else "",
                explanation=entry.explanation if entry else "",
            )
        )
    return questions
