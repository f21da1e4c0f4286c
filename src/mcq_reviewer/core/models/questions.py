"""
Module: questions

Purpose:
    Provides the ParsedQuestion dataclass - the terminal record of the
    parser and the shape exported to / imported from JSON. Also holds
    Option and the Option Extractor's result type.

Key Functions:
    - ParsedQuestion.to_dict() / ParsedQuestion.from_dict(): Interchange shape
    - ParsedQuestion.option_keys: Keys in display order
    - ParsedQuestion.get_option(key): Find an option by key

Dependencies:
    - dataclasses (std)

Used By:
    - parsing.assembler
    - core.utils.serialization
    - quiz.session

Interchange Shape:
    {"number": 3, "question": "...", "options": [{"key": "A", "text": "..."}],
     "answerKey": "B", "explanation": "..."}
    The camelCase "answerKey" is kept so files exported by the original
    browser app (parsed-mcqs.json) re-import unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .answers import OPTION_LETTERS

OPTION_KEYS = OPTION_LETTERS
MIN_OPTIONS = 3


@dataclass(frozen=True)
class Option:
    """
    One answer choice.

    Attributes:
        key: Option letter "A".."D" (uppercase).
        text: Choice text, never empty.
    """

    key: str
    text: str

    def __post_init__(self) -> None:
        """Validate option on construction."""
        if self.key not in OPTION_KEYS:
            raise ValueError(f"Option key must be A-D: {self.key!r}")
        if not self.text:
            raise ValueError(f"Option {self.key} has empty text")

    def to_dict(self) -> dict:
        return {"key": self.key, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Option:
        return cls(key=str(data["key"]).upper(), text=str(data["text"]).strip())


@dataclass(frozen=True)
class OptionExtraction:
    """
    Result of scanning one question block for option markers.

    An empty ``options`` tuple means the block had fewer than two markers
    and is not a usable question.
    """

    question: str
    options: tuple[Option, ...] = ()

    @property
    def is_usable(self) -> bool:
        return bool(self.question) and len(self.options) >= MIN_OPTIONS


@dataclass(frozen=True)
class ParsedQuestion:
    """
    A complete multiple-choice question (immutable).

    Attributes:
        number: Numeral the source document gave the question.
        question: Stem text, never empty.
        options: Choices in document order, at least three.
        answer_key: Correct letter, or "" when the answer key had no entry.
        explanation: Explanation text, or "".

    Invariants:
        - question is non-empty
        - len(options) >= 3
        - answer_key is "" or one of A-D

    Example:
        >>> q = ParsedQuestion(
        ...     number=1,
        ...     question="What is 2+2?",
        ...     options=(Option("A", "3"), Option("B", "4"), Option("C", "5")),
        ... )
        >>> q.option_keys
        ('A', 'B', 'C')
    """

    number: int
    question: str
    options: tuple[Option, ...]
    answer_key: str = ""
    explanation: str = ""

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.question:
            raise ValueError(f"Question {self.number} has an empty stem")
        if len(self.options) < MIN_OPTIONS:
            raise ValueError(
                f"Question {self.number} needs at least {MIN_OPTIONS} options, "
                f"got {len(self.options)}"
            )
        if self.answer_key and self.answer_key not in OPTION_KEYS:
            raise ValueError(f"Invalid answer key for question {self.number}: {self.answer_key!r}")

    @property
    def option_keys(self) -> tuple[str, ...]:
        return tuple(o.key for o in self.options)

    @property
    def has_answer(self) -> bool:
        return bool(self.answer_key)

    def get_option(self, key: str) -> Optional[Option]:
        """
        Find the first option with the given key.

        Args:
            key: Option letter, any case.

        Returns:
            Matching Option or None
        """
        key = key.upper()
        for option in self.options:
            if option.key == key:
                return option
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to the JSON interchange shape.

        Returns:
            Dict with keys number, question, options, answerKey, explanation
        """
        return {
            "number": self.number,
            "question": self.question,
            "options": [o.to_dict() for o in self.options],
            "answerKey": self.answer_key,
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParsedQuestion:
        """
        Deserialize from the JSON interchange shape.

        Option keys are uppercased and texts trimmed, as the quiz did when
        loading a saved export.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the record breaks an invariant.
        """
        return cls(
            number=int(data["number"]),
            question=str(data["question"]),
            options=tuple(Option.from_dict(o) for o in data["options"]),
            answer_key=str(data.get("answerKey") or "").upper(),
            explanation=str(data.get("explanation") or ""),
        )
