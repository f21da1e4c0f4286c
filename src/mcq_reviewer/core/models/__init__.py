"""
Core Models Package

Immutable, validated data models passed between parsing stages.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation between pipeline stages
2. Safe to share across threads
3. The parsed result can be handed to a caller by value

| Stage | Produces |
|-------|----------|
| Document Splitter | `DocumentHalves` |
| Question Segmenter | `QuestionBlock` |
| Answer-Key Extractor | `AnswerKeyEntry` (keyed by number) |
| Option Extractor | `OptionExtraction` of `Option` |
| Record Assembler | `ParsedQuestion` |
"""

from .blocks import DocumentHalves, QuestionBlock
from .answers import AnswerKeyEntry, AnswerKeyMap
from .questions import Option, OptionExtraction, ParsedQuestion, OPTION_KEYS

__all__ = [
    "DocumentHalves",
    "QuestionBlock",
    "AnswerKeyEntry",
    "AnswerKeyMap",
    "Option",
    "OptionExtraction",
    "ParsedQuestion",
    "OPTION_KEYS",
]
