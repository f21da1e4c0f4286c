"""
Session persistence for the quiz.

Saves parsed questions, quiz progress and settings as one JSON file so a
quiz can be resumed later. Any malformed or unreadable file results in a
logged warning and ``None`` (start fresh), never a crash.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from mcq_reviewer.core.models.questions import ParsedQuestion
from mcq_reviewer.core.schemas.validator import ValidationError
from mcq_reviewer.core.utils.serialization import deserialize_questions, serialize_questions
from .config import QuizSettings
from .session import QuizState

logger = logging.getLogger(__name__)

SESSION_VERSION = 1


@dataclass(frozen=True)
class QuizSession:
    """Everything needed to resume a quiz."""
    parsed_questions: tuple[ParsedQuestion, ...]
    state: QuizState
    settings: QuizSettings = field(default_factory=QuizSettings)

    def to_dict(self) -> dict:
        return {
            "version": SESSION_VERSION,
            "parsedQuestions": serialize_questions(self.parsed_questions),
            **self.state.to_dict(),
            "settings": self.settings.to_dict(),
        }


def save_session(path: Path, session: QuizSession) -> None:
    """
    Write a session file, replacing any previous one.

    Raises:
        OSError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(session.to_dict(), ensure_ascii=False), encoding="utf-8")
    tmp_path.replace(path)


def load_session(path: Path) -> Optional[QuizSession]:
    """
    Load a saved session.

    Returns:
        QuizSession, or None if the file is missing, unreadable, from a
        different version, or malformed.
    """
    if not path.exists():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable session file {path}: {e}")
        return None

    if not isinstance(data, dict) or data.get("version") != SESSION_VERSION:
        logger.warning(f"Ignoring session file {path}: unsupported format")
        return None

    try:
        parsed = deserialize_questions(data.get("parsedQuestions", []))
        state = QuizState.from_dict(data)
        settings = QuizSettings.from_dict(data.get("settings") or {})
    except (ValidationError, KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Ignoring malformed session file {path}: {e}")
        return None

    return QuizSession(parsed_questions=tuple(parsed), state=state, settings=settings)


def clear_session(path: Path) -> None:
    """Delete a saved session if present."""
    path.unlink(missing_ok=True)
