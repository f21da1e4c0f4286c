"""
End-to-end tests for parse_mcq_text() and parse_document().
"""

import logging

import pytest

from mcq_reviewer.core.models.questions import Option
from mcq_reviewer.parsing import parse_document, parse_mcq_text
from mcq_reviewer.parsing.detection.numerals import segment_questions

SCENARIO_A = "1. What is 2+2?\nA) 3\nB) 4\nC) 5\n"


class TestScenarios:
    """Worked examples of the whole pipeline."""

    def test_single_question_without_answer_key(self):
        questions = parse_mcq_text(SCENARIO_A)

        assert len(questions) == 1
        q = questions[0]
        assert q.number == 1
        assert q.question == "What is 2+2?"
        assert q.options == (Option("A", "3"), Option("B", "4"), Option("C", "5"))
        assert q.answer_key == ""
        assert q.explanation == ""

    def test_structured_answer_explanations_correlated(self):
        text = SCENARIO_A + "\nAnswer Explanations\n1. Correct answer: B\nBecause 2+2=4.\n"

        questions = parse_mcq_text(text)

        assert len(questions) == 1
        assert questions[0].question == "What is 2+2?"
        assert questions[0].answer_key == "B"
        assert questions[0].explanation == "Because 2+2=4."

    def test_block_with_one_option_yields_no_record(self):
        questions = parse_mcq_text(SCENARIO_A + "2. Pick one\nA) only\n")

        assert [q.number for q in questions] == [1]

    def test_line_answer_key_fallback(self):
        text = "3) Pick\nA) x\nB) y\nC) z\nAnswers\n3) C - short reason\n"

        questions = parse_mcq_text(text)

        assert questions[0].answer_key == "C"
        assert questions[0].explanation == "short reason"

    def test_unnumbered_text_is_one_question(self):
        text = "What colour is the sky?\nA) Blue\nB) Green\nC) Red"

        assert [b.number for b in segment_questions(text)] == [1]
        questions = parse_mcq_text(text)
        assert len(questions) == 1
        assert questions[0].number == 1
        assert questions[0].question == "What colour is the sky?"

    def test_explanation_glued_to_answer_letter(self):
        text = SCENARIO_A + "Answer Explanations\n1. Correct answer: BBecause 2+2=4.\n"

        questions = parse_mcq_text(text)

        assert questions[0].answer_key == "B"
        assert questions[0].explanation == "Because 2+2=4."

    def test_duplicate_answer_entry_later_wins(self):
        text = SCENARIO_A + "Answers\n1. B - first\n1. C - later\n"

        questions = parse_mcq_text(text)

        assert questions[0].answer_key == "C"
        assert questions[0].explanation == "later"


class TestSamplePaper:
    """Mixed marker styles with a partial answer key."""

    def test_all_questions_parsed(self, sample_paper):
        questions = parse_mcq_text(sample_paper)

        assert [q.number for q in questions] == [1, 2, 3]
        assert [len(q.options) for q in questions] == [4, 3, 4]
        assert questions[2].options[1] == Option("B", "100 °C")

    def test_answer_key_partially_correlated(self, sample_paper):
        questions = parse_mcq_text(sample_paper)

        assert [q.answer_key for q in questions] == ["B", "B", ""]
        assert questions[0].explanation == "Two plus two is four."
        assert questions[1].explanation == "Iron oxide gives Mars its colour."
        assert questions[2].explanation == ""

    def test_preamble_not_part_of_first_question(self, sample_paper):
        questions = parse_mcq_text(sample_paper)

        assert questions[0].question == "What is 2+2?"

    def test_windows_line_endings_and_indentation(self, sample_paper):
        messy = "\r\n".join("   " + line for line in sample_paper.split("\n"))

        assert parse_mcq_text(messy) == parse_mcq_text(sample_paper)

    def test_parse_document_reports_counts(self, sample_paper):
        paper = sample_paper.replace("Answer Explanations", "4. Orphan\nA) one\nAnswer Explanations")

        result = parse_document(paper)

        assert result.block_count == 4
        assert len(result.questions) == 3
        assert result.dropped_count == 1
        assert result.has_answer_key
        assert result.answer_key_count == 2
        assert result.answered_count == 2


class TestPipelineContract:
    """Properties that hold for any input."""

    @pytest.mark.parametrize(
        "text",
        [None, "", "   ", "Answers", "\nAnswers\n1. A", "1.", "A) B) C)", "1. \n2. \n3. ", "x" * 5000],
    )
    def test_never_raises_and_returns_list(self, text):
        assert isinstance(parse_mcq_text(text), list)

    def test_every_record_is_complete(self, sample_paper):
        for q in parse_mcq_text(sample_paper):
            assert q.question
            assert len(q.options) >= 3
            assert q.answer_key in ("", "A", "B", "C", "D")

    def test_each_call_returns_new_list(self, sample_paper):
        first = parse_mcq_text(sample_paper)
        first.clear()

        assert len(parse_mcq_text(sample_paper)) == 3

    def test_output_deterministic(self, sample_paper):
        assert parse_mcq_text(sample_paper) == parse_mcq_text(sample_paper)

    def test_logs_summary(self, sample_paper, caplog):
        with caplog.at_level(logging.INFO, logger="mcq_reviewer.parsing"):
            parse_mcq_text(sample_paper)

        assert "Parsed 3 question(s) from 3 block(s)" in caplog.text
