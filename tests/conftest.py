import pytest
import sys
from pathlib import Path

import fitz

# Add src to sys.path so we can import mcq_reviewer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_reviewer.core.models.questions import Option, ParsedQuestion


SAMPLE_PAPER = """Practice Paper 3
1. What is 2+2?
A) 3
B) 4
C) 5
D) 22
2) Which planet is known as the Red Planet?
A. Venus
B. Mars
C. Jupiter
3 - Water boils at sea level at
A: 90 °C
B: 100 °C
C: 110 °C
D: 120 °C
Answer Explanations
1. Correct answer: B
Two plus two is four.
2. Correct answer: B
Iron oxide gives Mars its colour.
"""


# Common test fixtures
@pytest.fixture
def sample_paper() -> str:
    """Return a three-question paper with a structured answer key for Q1-Q2."""
    return SAMPLE_PAPER


@pytest.fixture
def sample_questions() -> list[ParsedQuestion]:
    """Create three parsed questions, the last without an answer key."""
    return [
        ParsedQuestion(
            number=1,
            question="What is 2+2?",
            options=(Option("A", "3"), Option("B", "4"), Option("C", "5")),
            answer_key="B",
            explanation="Two plus two is four.",
        ),
        ParsedQuestion(
            number=2,
            question="Which planet is known as the Red Planet?",
            options=(Option("A", "Venus"), Option("B", "Mars"), Option("C", "Jupiter")),
            answer_key="B",
            explanation="",
        ),
        ParsedQuestion(
            number=3,
            question="Largest ocean?",
            options=(
                Option("A", "Atlantic"),
                Option("B", "Pacific"),
                Option("C", "Indian"),
                Option("D", "Arctic"),
            ),
        ),
    ]


@pytest.fixture
def make_pdf(tmp_path: Path):
    """Return a factory writing a PDF with one text line per entry."""
    def _make(name: str, pages: list[list[str]], *, line_height: float = 18) -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for lines in pages:
            page = doc.new_page()
            y = 72.0
            for line in lines:
                page.insert_text((72, y), line, fontsize=11)
                y += line_height
        doc.save(path)
        doc.close()
        return path
    return _make
