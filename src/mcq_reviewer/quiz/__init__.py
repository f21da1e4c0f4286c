"""
Module: quiz

Purpose:
    Headless quiz model over parsed questions: explicit immutable state,
    pure transitions, and JSON session persistence.

Key Functions:
    - start_quiz() / submit_answer() / next_question(): State transitions
    - summarize(): Score and review with placeholders
    - save_session() / load_session() / clear_session(): Persistence

Used By:
    - mcq_reviewer.cli: quiz command
"""

from .config import QuizSettings
from .session import (
    AnswerRecord,
    Feedback,
    QuizState,
    QuizSummary,
    ReviewItem,
    SessionError,
    feedback_for,
    next_question,
    start_quiz,
    submit_answer,
    summarize,
)
from .storage import QuizSession, clear_session, load_session, save_session

__all__ = [
    "QuizSettings",
    "AnswerRecord",
    "Feedback",
    "QuizState",
    "QuizSummary",
    "ReviewItem",
    "SessionError",
    "feedback_for",
    "next_question",
    "start_quiz",
    "submit_answer",
    "summarize",
    "QuizSession",
    "clear_session",
    "load_session",
    "save_session",
]
