"""
Command line front end.

Usage:
    mcq-reviewer parse paper.pdf -o parsed-mcqs.json
    mcq-reviewer parse pasted.txt
    cat pasted.txt | mcq-reviewer parse -
    mcq-reviewer quiz parsed-mcqs.json --shuffle-options --session quiz.json

Inputs ending in .pdf are run through the PDF extractor, .json files are
treated as an earlier export, anything else is read as text.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from mcq_reviewer import __version__
from mcq_reviewer.common.logging_utils import attach_console_handler, detach_handler
from mcq_reviewer.core.models.questions import ParsedQuestion
from mcq_reviewer.core.schemas.validator import ValidationError
from mcq_reviewer.core.utils.serialization import (
    dumps_questions,
    load_questions_json,
    save_questions_json,
)
from mcq_reviewer.extraction import ExtractionError, extract_pdf_text
from mcq_reviewer.parsing import parse_mcq_text
from mcq_reviewer.quiz import (
    QuizSession,
    QuizSettings,
    QuizState,
    SessionError,
    feedback_for,
    load_session,
    next_question,
    save_session,
    start_quiz,
    submit_answer,
    summarize,
)

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def load_input_questions(source: str) -> List[ParsedQuestion]:
    """
    Load questions from a PDF, a JSON export, a text file, or stdin ("-").

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ExtractionError: If a PDF can't be read.
        ValidationError: If a JSON export is invalid.
    """
    if source == "-":
        return parse_mcq_text(sys.stdin.read())

    path = Path(source)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_questions_json(path)
    if suffix == ".pdf":
        return parse_mcq_text(extract_pdf_text(path))

    if not path.exists():
        raise FileNotFoundError(f"Input not found: {path}")
    return parse_mcq_text(path.read_text(encoding="utf-8", errors="replace"))


def cmd_parse(args: argparse.Namespace) -> int:
    questions = load_input_questions(args.input)
    if not questions:
        logger.warning("Parsed 0 questions. Check the numbering and A-D option markers.")

    if args.output:
        save_questions_json(questions, args.output)
        logger.info(f"Wrote {len(questions)} question(s) to {args.output}")
    else:
        print(dumps_questions(questions))
    return 0


def _print_question(state: QuizState, out: Callable[[str], None]) -> None:
    question = state.current_question
    out("")
    out(f"[{state.progress_label}] {question.question}")
    for option in question.options:
        out(f"  {option.key}) {option.text}")


def run_quiz(
    questions: Sequence[ParsedQuestion],
    settings: QuizSettings,
    *,
    session_path: Optional[Path] = None,
    input_fn: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> QuizState:
    """
    Run an interactive quiz in the terminal.

    Resumes from ``session_path`` when it holds an unfinished quiz over the
    same questions, and saves progress there after every answer.

    Returns:
        Final state (finished, or where the user quit).
    """
    parsed = tuple(questions)
    state: Optional[QuizState] = None

    if session_path:
        saved = load_session(session_path)
        if saved and saved.parsed_questions == parsed and not saved.state.is_finished:
            state = saved.state
            settings = saved.settings
            logger.info(f"Resuming quiz at {state.progress_label}")

    if state is None:
        state = start_quiz(parsed, settings)

    def _save() -> None:
        if session_path:
            save_session(session_path, QuizSession(parsed, state, settings))

    while not state.is_finished:
        _print_question(state, out)
        if not state.is_locked:
            try:
                reply = input_fn("Answer (A-D, q to quit): ").strip()
            except EOFError:
                reply = "q"
            if reply.lower() in QUIT_COMMANDS:
                _save()
                out("Progress saved." if session_path else "Quiz stopped.")
                return state
            try:
                state = submit_answer(state, reply)
            except SessionError as e:
                out(str(e))
                continue

            feedback = feedback_for(state.current_question, state.current_answer)
            out(f"{feedback.tag}. {feedback.answer_line}")
            out(feedback.explanation)
            _save()

        state = next_question(state)

    summary = summarize(state)
    out("")
    out(f"You scored {summary.score}/{summary.total} ({summary.percent}%).")
    for item in summary.items:
        mark = "Correct" if item.is_correct else "Wrong"
        out(f"- Q{item.number}: {mark}. Your: {item.chosen_key}. Correct: {item.correct_key}")
    _save()
    return state


def cmd_quiz(args: argparse.Namespace) -> int:
    questions = load_input_questions(args.input)
    if not questions:
        logger.error("No questions to quiz on.")
        return 1

    settings = QuizSettings(
        shuffle_questions=args.shuffle_questions,
        shuffle_options=args.shuffle_options,
        seed=args.seed,
    )
    run_quiz(questions, settings, session_path=args.session)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcq-reviewer",
        description="Parse multiple-choice question papers and review them as a quiz",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse a PDF or text file into JSON")
    p_parse.add_argument("input", help="PDF, text file, or - for stdin")
    p_parse.add_argument("--output", "-o", type=Path, help="Write JSON here instead of stdout")
    p_parse.set_defaults(func=cmd_parse)

    p_quiz = sub.add_parser("quiz", help="Take a quiz in the terminal")
    p_quiz.add_argument("input", help="JSON export, PDF, text file, or - for stdin")
    p_quiz.add_argument("--shuffle-questions", action="store_true", help="Randomize question order")
    p_quiz.add_argument("--shuffle-options", action="store_true", help="Randomize option order")
    p_quiz.add_argument("--seed", type=int, help="Seed for reproducible shuffles")
    p_quiz.add_argument("--session", type=Path, help="Save progress here and resume from it")
    p_quiz.set_defaults(func=cmd_quiz)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    handler = attach_console_handler(verbose=args.verbose)
    try:
        return args.func(args)
    except (FileNotFoundError, ExtractionError, ValidationError) as e:
        logger.error(str(e))
        return 1
    finally:
        detach_handler(handler)


if __name__ == "__main__":
    raise SystemExit(main())
