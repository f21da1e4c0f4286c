"""
Module: quiz.session

Purpose:
    Quiz progress as explicit, immutable state. Every operation takes a
    QuizState and returns a new one; nothing is held between calls, so a
    front end can persist, restore or discard state freely.

Key Functions:
    - start_quiz(): Copy (and optionally shuffle) parsed questions
    - submit_answer(): Record the answer for the current question
    - next_question(): Advance to the next question
    - feedback_for(): Per-answer feedback text
    - summarize(): Final score and per-question review

Key Classes:
    - QuizState: Questions, position, score and answers
    - AnswerRecord: One recorded answer
    - Feedback / ReviewItem / QuizSummary: Display-ready results
    - SessionError: Invalid quiz operation

Dependencies:
    - random (std): Seeded shuffles

Used By:
    - quiz.storage
    - mcq_reviewer.cli: quiz command
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional

from mcq_reviewer.core.models.questions import ParsedQuestion
from .config import QuizSettings

logger = logging.getLogger(__name__)

# Placeholders shown where the answer key had nothing for a question
MISSING_ANSWER = "(missing)"
UNANSWERED = "(none)"
NO_EXPLANATION = "No explanation provided."
NO_EXPLANATION_FEEDBACK = "No explanation found in Answer Explanations."


class SessionError(Exception):
    """Raised for an operation the current quiz state does not allow."""


@dataclass(frozen=True)
class AnswerRecord:
    """
    The user's answer to one question.

    Attributes:
        chosen_key: Option letter chosen (uppercase).
        is_correct: True only when the question had an answer key and it matched.
    """
    chosen_key: str
    is_correct: bool

    def to_dict(self) -> dict:
        return {"chosenKey": self.chosen_key, "isCorrect": self.is_correct}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnswerRecord:
        return cls(
            chosen_key=str(data["chosenKey"]).upper(),
            is_correct=bool(data.get("isCorrect", False)),
        )


@dataclass(frozen=True)
class QuizState:
    """
    Immutable quiz progress.

    Attributes:
        questions: Questions in presentation order.
        index: Position of the current question; equals ``total`` when finished.
        score: Number of correct answers.
        answers: One entry per question, None until answered.

    Invariants:
        - len(answers) == len(questions)
        - 0 <= index <= len(questions)
        - score >= 0
    """
    questions: tuple[ParsedQuestion, ...] = ()
    index: int = 0
    score: int = 0
    answers: tuple[Optional[AnswerRecord], ...] = ()

    def __post_init__(self) -> None:
        """Validate state on construction."""
        if len(self.answers) != len(self.questions):
            raise ValueError(
                f"answers ({len(self.answers)}) must match questions ({len(self.questions)})"
            )
        if not (0 <= self.index <= len(self.questions)):
            raise ValueError(f"index out of range: {self.index}")
        if self.score < 0:
            raise ValueError(f"score cannot be negative: {self.score}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.index >= self.total

    @property
    def current_question(self) -> Optional[ParsedQuestion]:
        if self.is_finished:
            return None
        return self.questions[self.index]

    @property
    def current_answer(self) -> Optional[AnswerRecord]:
        if self.is_finished:
            return None
        return self.answers[self.index]

    @property
    def is_locked(self) -> bool:
        """True when the current question has already been answered."""
        return self.current_answer is not None

    @property
    def progress_label(self) -> str:
        """Position like "3/10" (clamped), or "0/0" for an empty quiz."""
        if not self.total:
            return "0/0"
        return f"{min(max(self.index + 1, 1), self.total)}/{self.total}"

    @property
    def progress_percent(self) -> float:
        if not self.total:
            return 0.0
        return min(max(self.index / self.total * 100, 0.0), 100.0)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "quizQuestions": [q.to_dict() for q in self.questions],
            "idx": self.index,
            "score": self.score,
            "answered": [a.to_dict() if a else None for a in self.answers],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizState:
        """
        Rebuild state from a saved dict.

        The index is clamped into range, missing answers are padded with
        None, and the score is recalculated from the answers.
        """
        questions = tuple(ParsedQuestion.from_dict(q) for q in data.get("quizQuestions", []))
        raw_answers = list(data.get("answered", []))[:len(questions)]
        raw_answers += [None] * (len(questions) - len(raw_answers))
        answers = tuple(AnswerRecord.from_dict(a) if a else None for a in raw_answers)

        index = data.get("idx", 0)
        if not isinstance(index, int) or isinstance(index, bool):
            index = 0
        index = min(max(index, 0), len(questions))

        return cls(
            questions=questions,
            index=index,
            score=sum(1 for a in answers if a and a.is_correct),
            answers=answers,
        )


@dataclass(frozen=True)
class Feedback:
    """Feedback shown after answering one question."""
    is_correct: bool
    tag: str
    answer_line: str
    explanation: str


@dataclass(frozen=True)
class ReviewItem:
    """One row of the end-of-quiz review."""
    number: int
    question: str
    chosen_key: str
    correct_key: str
    is_correct: bool
    explanation: str


@dataclass(frozen=True)
class QuizSummary:
    """Final result of a quiz."""
    score: int
    total: int
    percent: int
    items: tuple[ReviewItem, ...]


# ─────────────────────────────────────────────────────────────────────────────
# State Transitions
# ─────────────────────────────────────────────────────────────────────────────

def start_quiz(
    questions: Iterable[ParsedQuestion],
    settings: Optional[QuizSettings] = None,
) -> QuizState:
    """
    Prepare a fresh quiz.

    The parsed questions are copied, never reordered in place: options
    are shuffled first (per question), then the question order.

    Args:
        questions: Parsed questions, in document order.
        settings: Shuffle flags and seed.

    Returns:
        QuizState at the first question with no answers.

    Example:
        >>> state = start_quiz(parsed, QuizSettings(shuffle_questions=True, seed=1))
        >>> state.progress_label
        '1/12'
    """
    settings = settings or QuizSettings()
    rng = random.Random(settings.seed)

    prepared = []
    for question in questions:
        options = list(question.options)
        if settings.shuffle_options:
            rng.shuffle(options)
        prepared.append(replace(question, options=tuple(options)))
    if settings.shuffle_questions:
        rng.shuffle(prepared)

    logger.debug(f"Started quiz with {len(prepared)} question(s)")
    return QuizState(
        questions=tuple(prepared),
        index=0,
        score=0,
        answers=(None,) * len(prepared),
    )


def submit_answer(state: QuizState, chosen_key: str) -> QuizState:
    """
    Record an answer for the current question.

    An already answered question is locked: the state is returned
    unchanged.

    Args:
        state: Current quiz state.
        chosen_key: Option letter chosen, any case.

    Returns:
        New state with the answer recorded and the score updated.

    Raises:
        SessionError: If the quiz is finished or the current question
            has no option with that key.
    """
    question = state.current_question
    if question is None:
        raise SessionError("Quiz is finished; no question to answer")

    key = chosen_key.strip().upper()
    if question.get_option(key) is None:
        raise SessionError(
            f"Question {question.number} has no option {key!r} "
            f"(choose from {', '.join(question.option_keys)})"
        )

    if state.is_locked:
        return state

    is_correct = bool(question.answer_key) and key == question.answer_key
    answers = list(state.answers)
    answers[state.index] = AnswerRecord(chosen_key=key, is_correct=is_correct)
    return replace(
        state,
        answers=tuple(answers),
        score=state.score + (1 if is_correct else 0),
    )


def next_question(state: QuizState) -> QuizState:
    """Advance to the next question; a finished quiz is returned unchanged."""
    if state.is_finished:
        return state
    return replace(state, index=state.index + 1)


# ─────────────────────────────────────────────────────────────────────────────
# Presentation Helpers
# ─────────────────────────────────────────────────────────────────────────────

def feedback_for(question: ParsedQuestion, answer: AnswerRecord) -> Feedback:
    """Build the feedback shown right after answering a question."""
    if question.answer_key:
        answer_line = f"Correct answer: {question.answer_key}"
    else:
        answer_line = f"Correct answer: {MISSING_ANSWER}"
    return Feedback(
        is_correct=answer.is_correct,
        tag="Correct" if answer.is_correct else "Incorrect",
        answer_line=answer_line,
        explanation=question.explanation or NO_EXPLANATION_FEEDBACK,
    )


def summarize(state: QuizState) -> QuizSummary:
    """
    Score and per-question review.

    Placeholders fill in a missing answer key, explanation, or answer.
    The percentage is rounded half up.
    """
    items = []
    for question, answer in zip(state.questions, state.answers):
        items.append(
            ReviewItem(
                number=question.number,
                question=question.question,
                chosen_key=answer.chosen_key if answer else UNANSWERED,
                correct_key=question.answer_key or MISSING_ANSWER,
                is_correct=bool(answer and answer.is_correct),
                explanation=question.explanation or NO_EXPLANATION,
            )
        )

    total = state.total
    percent = math.floor(state.score / total * 100 + 0.5) if total else 0
    return QuizSummary(score=state.score, total=total, percent=percent, items=tuple(items))
