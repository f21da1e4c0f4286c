"""
Module: quiz.config

Purpose:
    Settings for preparing a quiz from parsed questions.

Key Classes:
    - QuizSettings: Shuffle flags and random seed

Used By:
    - quiz.session: start_quiz
    - quiz.storage: persisted alongside the session
    - mcq_reviewer.cli: quiz command flags
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class QuizSettings:
    """
    Configuration for a quiz run (immutable).

    Attributes:
        shuffle_questions: Present questions in random order.
        shuffle_options: Shuffle options within each question.
        seed: Random seed for reproducible shuffles. None draws a fresh
            order every time.

    Example:
        >>> QuizSettings(shuffle_options=True, seed=7).to_dict()
        {'shuffleQ': False, 'shuffleO': True, 'seed': 7}
    """
    shuffle_questions: bool = False
    shuffle_options: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate settings on construction."""
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ValueError(f"seed must be an integer or None: {self.seed!r}")

    def to_dict(self) -> dict:
        return {
            "shuffleQ": self.shuffle_questions,
            "shuffleO": self.shuffle_options,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizSettings:
        seed = data.get("seed")
        return cls(
            shuffle_questions=bool(data.get("shuffleQ", False)),
            shuffle_options=bool(data.get("shuffleO", False)),
            seed=seed if isinstance(seed, int) and not isinstance(seed, bool) else None,
        )
