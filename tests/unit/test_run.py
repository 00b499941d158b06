"""
Unit tests for the Gradio handlers and the --dump entrypoint.

Handlers are plain functions, so they are called directly without a server.
"""

import pytest

pytest.importorskip("gradio")

from src import run
from src.models.quiz_session import QuizSession
from src.quiz_store import get_quiz_store


@pytest.fixture
def labels():
    return run.question_choices()


class TestHandlers:
    """Test suite for the UI handlers."""

    def test_start_creates_session(self, labels):
        """Test that starting returns a fresh session and the first question."""
        session, status, _, question_md, _ = run.start_quiz_ui()
        assert isinstance(session, QuizSession)
        assert session.answers == {}
        assert "Quiz started" in status
        assert get_quiz_store().load()[0].prompt in question_md

    def test_readers_keep_separate_sessions(self, labels):
        """Test that a second reader starting does not touch the first reader's sheet."""
        reader_a = run.start_quiz_ui()[0]
        reader_a, _ = run.submit_answer_ui(reader_a, labels[0], [1, 4])

        reader_b = run.start_quiz_ui()[0]
        assert reader_b is not reader_a
        assert reader_b.answers == {}

        # B can answer the question A already answered
        reader_b, feedback = run.submit_answer_ui(reader_b, labels[0], [0, 2])
        assert "Incorrect" in feedback
        assert reader_a.results[1].correct
        assert not reader_b.results[1].correct

    def test_start_submit_complete(self, labels):
        """Test a full reader flow through the handlers."""
        session = run.start_quiz_ui()[0]

        session, feedback = run.submit_answer_ui(session, labels[0], [4, 1])
        assert "Correct" in feedback
        assert "question(s) left" in feedback

        session, feedback = run.submit_answer_ui(session, labels[0], [1, 4])
        assert "already answered" in feedback

        session, summary_md, json_update = run.complete_quiz_ui(session)
        assert session.status == "completed"
        assert "**Score**: 100.0%" in summary_md
        assert "Passed" in summary_md
        assert json_update["visible"] is True
        assert session.session_id in json_update["value"]

    def test_submit_without_session(self, labels):
        """Test that submitting before starting is reported."""
        session, feedback = run.submit_answer_ui(None, labels[0], [1])
        assert session is None
        assert "Start the quiz first" in feedback

    def test_submit_without_selection(self, labels):
        """Test that an empty selection is reported, not recorded."""
        session = run.start_quiz_ui()[0]
        session, feedback = run.submit_answer_ui(session, labels[0], [])
        assert "cannot be empty" in feedback
        assert session.answers == {}

    def test_show_question(self, labels):
        """Test rendering the question picked in the dropdown."""
        question_md, _ = run.show_question_ui(labels[1])
        assert get_quiz_store().load()[1].prompt in question_md
        assert run.show_question_ui("")[0] == "No question selected"

    def test_choice_labels_are_single_line(self):
        """Test checkbox labels for code choices."""
        question = get_quiz_store().load()[1]
        choice_labels = run._choice_labels(question)
        assert len(choice_labels) == len(question.choices)
        assert all("\n" not in label for label in choice_labels)
        assert choice_labels[0].startswith("A. def sum")


class TestMain:
    """Test suite for the entrypoint."""

    def test_dump_prints_listing(self, capsys):
        """Test that --dump prints every question and answer."""
        assert run.main(["--dump"]) == 0
        output = capsys.readouterr().out
        for question in get_quiz_store():
            assert question.prompt in output
        assert "**Answer**: B, E" in output
