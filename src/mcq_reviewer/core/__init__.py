"""
MCQ Reviewer Core Package

Shared data models, schema validation and serialization used by the
parser, the quiz session and the command line.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Every record is a frozen dataclass; stages create new instances
     instead of editing old ones.

2. **Plain Interchange Shape**
   - `ParsedQuestion.to_dict()` is field-for-field with no derived values,
     so an export can be re-imported and reproduce the same quiz.
"""

from .models import (
    AnswerKeyEntry,
    DocumentHalves,
    Option,
    OptionExtraction,
    ParsedQuestion,
    QuestionBlock,
)

__all__ = [
    "AnswerKeyEntry",
    "DocumentHalves",
    "Option",
    "OptionExtraction",
    "ParsedQuestion",
    "QuestionBlock",
]
