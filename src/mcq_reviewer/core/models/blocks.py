"""
Module: blocks

Purpose:
    Intermediate records produced while cutting a document apart:
    the main-body / answer-key split and the per-question text blocks.

Key Classes:
    - DocumentHalves: Main question body and trailing answer-key text
    - QuestionBlock: One numbered question's raw text

Dependencies:
    - dataclasses (std)

Used By:
    - parsing.splitter
    - parsing.detection.numerals
    - parsing.detection.options
    - parsing.assembler
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentHalves:
    """
    A normalized document split at its answer-key heading.

    Attributes:
        main_text: Text before the heading (the questions).
        answer_key_text: Heading line onwards, or "" when no heading exists.

    Example:
        >>> halves = DocumentHalves(main_text="1. Q\\nA) x", answer_key_text="")
        >>> halves.has_answer_key
        False
    """

    main_text: str
    answer_key_text: str = ""

    @property
    def has_answer_key(self) -> bool:
        """True when an answer-key section was found."""
        return bool(self.answer_key_text)


@dataclass(frozen=True)
class QuestionBlock:
    """
    Text belonging to one detected question.

    The number is whatever the source wrote in front of the block; it is
    not guaranteed to be unique, sequential or sorted.

    Attributes:
        number: Numeral captured at the block's start marker.
        body: Stem and option lines, trimmed.

    Invariants:
        - number >= 0
    """

    number: int
    body: str

    def __post_init__(self) -> None:
        """Validate block on construction."""
        if self.number < 0:
            raise ValueError(f"Question number cannot be negative: {self.number}")
