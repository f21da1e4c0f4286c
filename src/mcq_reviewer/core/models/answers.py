"""
Module: answers

Purpose:
    Provides AnswerKeyEntry - the correct letter and explanation read from
    a document's answer-key section - and the AnswerKeyMap alias keyed by
    question number.

Dependencies:
    - dataclasses (std)

Used By:
    - parsing.answer_key.extractor
    - parsing.assembler
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

OPTION_LETTERS = ("A", "B", "C", "D")


@dataclass(frozen=True)
class AnswerKeyEntry:
    """
    Correct option for one question number.

    Attributes:
        letter: One of "A".."D".
        explanation: Free text following the letter, possibly empty.

    Example:
        >>> AnswerKeyEntry("B", "Because 2+2=4.").letter
        'B'
    """

    letter: str
    explanation: str = ""

    def __post_init__(self) -> None:
        """Validate entry on construction."""
        if self.letter not in OPTION_LETTERS:
            raise ValueError(f"Answer letter must be A-D: {self.letter!r}")


# Question number -> entry. Later entries for the same number replace earlier ones.
AnswerKeyMap = Dict[int, AnswerKeyEntry]
