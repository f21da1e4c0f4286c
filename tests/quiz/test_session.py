"""
Tests for quiz state transitions and scoring.
"""

import pytest

from mcq_reviewer.quiz import (
    AnswerRecord,
    QuizSettings,
    QuizState,
    SessionError,
    feedback_for,
    next_question,
    start_quiz,
    submit_answer,
    summarize,
)
from mcq_reviewer.quiz.session import MISSING_ANSWER, NO_EXPLANATION, UNANSWERED


def _play(state: QuizState, keys: list[str]) -> QuizState:
    for key in keys:
        state = next_question(submit_answer(state, key))
    return state


class TestStartQuiz:
    """Tests for start_quiz()."""

    def test_default_settings_keep_order(self, sample_questions):
        state = start_quiz(sample_questions)

        assert state.questions == tuple(sample_questions)
        assert state.index == 0
        assert state.score == 0
        assert state.answers == (None, None, None)
        assert state.progress_label == "1/3"

    def test_same_seed_gives_same_order(self, sample_questions):
        settings = QuizSettings(shuffle_questions=True, shuffle_options=True, seed=42)

        assert start_quiz(sample_questions, settings) == start_quiz(sample_questions, settings)

    def test_shuffle_keeps_questions_and_options(self, sample_questions):
        settings = QuizSettings(shuffle_questions=True, shuffle_options=True, seed=3)

        state = start_quiz(sample_questions, settings)

        assert sorted(q.number for q in state.questions) == [1, 2, 3]
        for q in state.questions:
            original = next(o for o in sample_questions if o.number == q.number)
            assert sorted(q.options, key=lambda o: o.key) == list(original.options)
            assert q.answer_key == original.answer_key

    def test_input_not_mutated(self, sample_questions):
        before = list(sample_questions)

        start_quiz(sample_questions, QuizSettings(shuffle_questions=True, shuffle_options=True, seed=1))

        assert sample_questions == before

    def test_empty_quiz_is_finished(self):
        state = start_quiz([])

        assert state.is_finished
        assert state.progress_label == "0/0"
        assert state.progress_percent == 0.0


class TestSubmitAnswer:
    """Tests for submit_answer()."""

    def test_correct_answer_scores(self, sample_questions):
        state = submit_answer(start_quiz(sample_questions), "b")

        assert state.score == 1
        assert state.current_answer == AnswerRecord("B", True)
        assert state.is_locked

    def test_wrong_answer_does_not_score(self, sample_questions):
        state = submit_answer(start_quiz(sample_questions), "A")

        assert state.score == 0
        assert state.current_answer == AnswerRecord("A", False)

    def test_no_answer_key_never_correct(self, sample_questions):
        state = start_quiz(sample_questions)
        state = next_question(next_question(state))

        state = submit_answer(state, "B")

        assert state.current_answer == AnswerRecord("B", False)
        assert state.score == 0

    def test_locked_question_ignores_second_answer(self, sample_questions):
        first = submit_answer(start_quiz(sample_questions), "A")

        second = submit_answer(first, "B")

        assert second is first

    def test_unknown_option_raises(self, sample_questions):
        state = start_quiz(sample_questions)

        with pytest.raises(SessionError, match="no option 'D'"):
            submit_answer(state, "D")

    def test_finished_quiz_raises(self, sample_questions):
        state = _play(start_quiz(sample_questions), ["B", "B", "B"])

        with pytest.raises(SessionError, match="finished"):
            submit_answer(state, "A")

    def test_previous_state_unchanged(self, sample_questions):
        start = start_quiz(sample_questions)

        submit_answer(start, "B")

        assert start.answers == (None, None, None)
        assert start.score == 0


class TestNextQuestion:
    """Tests for next_question()."""

    def test_advances_without_answer(self, sample_questions):
        state = next_question(start_quiz(sample_questions))

        assert state.index == 1
        assert state.answers[0] is None

    def test_finished_quiz_unchanged(self, sample_questions):
        state = _play(start_quiz(sample_questions), ["A", "A", "A"])

        assert next_question(state) is state
        assert state.progress_label == "3/3"
        assert state.progress_percent == 100.0


class TestFeedbackAndSummary:
    """Tests for feedback_for() and summarize()."""

    def test_feedback_correct(self, sample_questions):
        feedback = feedback_for(sample_questions[0], AnswerRecord("B", True))

        assert feedback.tag == "Correct"
        assert feedback.answer_line == "Correct answer: B"
        assert feedback.explanation == "Two plus two is four."

    def test_feedback_placeholders(self, sample_questions):
        feedback = feedback_for(sample_questions[2], AnswerRecord("A", False))

        assert feedback.tag == "Incorrect"
        assert feedback.answer_line == f"Correct answer: {MISSING_ANSWER}"
        assert feedback.explanation == "No explanation found in Answer Explanations."

    def test_summary_scores_and_items(self, sample_questions):
        state = start_quiz(sample_questions)
        state = next_question(submit_answer(state, "B"))
        state = next_question(submit_answer(state, "A"))
        state = next_question(state)

        summary = summarize(state)

        assert (summary.score, summary.total, summary.percent) == (1, 3, 33)
        assert [i.is_correct for i in summary.items] == [True, False, False]
        assert summary.items[1].chosen_key == "A"
        assert summary.items[1].correct_key == "B"
        assert summary.items[1].explanation == NO_EXPLANATION
        assert summary.items[2].chosen_key == UNANSWERED
        assert summary.items[2].correct_key == MISSING_ANSWER

    def test_percent_rounded_to_nearest(self, sample_questions):
        state = _play(start_quiz(sample_questions), ["B", "B", "A"])

        assert summarize(state).percent == 67

    def test_empty_quiz_summary(self):
        summary = summarize(start_quiz([]))

        assert (summary.score, summary.total, summary.percent) == (0, 0, 0)


class TestQuizStateSerialization:
    """Tests for QuizState.to_dict() / from_dict()."""

    def test_roundtrip(self, sample_questions):
        state = submit_answer(start_quiz(sample_questions), "B")

        assert QuizState.from_dict(state.to_dict()) == state

    def test_saved_keys(self, sample_questions):
        data = submit_answer(start_quiz(sample_questions), "B").to_dict()

        assert set(data) == {"quizQuestions", "idx", "score", "answered"}
        assert data["answered"][0] == {"chosenKey": "B", "isCorrect": True}
        assert data["answered"][1] is None

    def test_from_dict_repairs_bad_values(self, sample_questions):
        data = submit_answer(start_quiz(sample_questions), "B").to_dict()
        data["idx"] = 99
        data["score"] = 7
        data["answered"] = data["answered"][:1]

        state = QuizState.from_dict(data)

        assert state.index == 3
        assert state.score == 1
        assert state.answers[1:] == (None, None)

    def test_invalid_state_rejected(self, sample_questions):
        with pytest.raises(ValueError):
            QuizState(questions=tuple(sample_questions), answers=())


class TestQuizSettings:
    """Tests for QuizSettings."""

    def test_to_dict_uses_saved_keys(self):
        assert QuizSettings(shuffle_questions=True, seed=2).to_dict() == {
            "shuffleQ": True, "shuffleO": False, "seed": 2,
        }

    def test_from_dict_drops_non_integer_seed(self):
        settings = QuizSettings.from_dict({"shuffleO": 1, "seed": "7"})

        assert settings == QuizSettings(shuffle_options=True, seed=None)

    @pytest.mark.parametrize("seed", ["7", 1.5, True])
    def test_invalid_seed_rejected(self, seed):
        with pytest.raises(ValueError, match="seed"):
            QuizSettings(seed=seed)
