"""
Unit tests for text rendering.
"""

import pytest

from src.models.question import AnswerResult, Question
from src.utils.formatting import (
    choice_label,
    format_listing,
    format_question,
    format_result,
)


@pytest.fixture
def question():
    return Question(
        id=1,
        prompt="Which types are recursive?",
        choices=("Person", "Order", "Color", "Json"),
        correct_choices=frozenset({1, 3}),
        explanation="Order and Json refer to themselves.",
    )


@pytest.fixture
def code_question():
    return Question(
        id=2,
        prompt="Which is tail recursive?",
        choices=("def a = 1", "def go(n: Int): Int =\n  if (n == 0) 0 else go(n - 1)"),
        correct_choices=frozenset({1}),
        explanation="go calls itself last.",
    )


class TestFormatting:
    """Test suite for markdown rendering."""

    def test_choice_label(self):
        """Test letter labels."""
        assert choice_label(0) == "A"
        assert choice_label(4) == "E"

    def test_format_question(self, question):
        """Test rendering a multiple-answer question."""
        text = format_question(question, 2, 8)
        assert "Question 2/8" in text
        assert question.prompt in text
        assert "**A**. Person" in text
        assert "**D**. Json" in text
        assert "Tick every correct answer" in text

    def test_format_question_without_position(self, code_question):
        """Test rendering a single-answer question with code."""
        text = format_question(code_question)
        assert "Question" not in text.splitlines()[0]
        assert "```scala" in text
        assert "go(n - 1)" in text
        assert "Tick one answer" in text

    def test_format_result_correct(self, question):
        """Test rendering a correct result."""
        result = AnswerResult(1, frozenset({1, 3}), True, frozenset({1, 3}), question.explanation)
        text = format_result(result, question)
        assert "Correct" in text
        assert question.explanation in text

    def test_format_result_incorrect(self, question):
        """Test rendering an incorrect result."""
        result = AnswerResult(1, frozenset({0}), False, frozenset({1, 3}), question.explanation)
        text = format_result(result, question, show_explanation=False)
        assert "Incorrect" in text
        assert "You selected **A**" in text
        assert "**B, D**" in text
        assert question.explanation not in text

    def test_format_listing(self, question, code_question):
        """Test the full content listing."""
        text = format_listing([question, code_question], title="Recursion")
        assert text.startswith("# Recursion")
        assert "## 1. Which types are recursive?" in text
        assert "## 2. Which is tail recursive?" in text
        assert "**Answer**: B, D" in text
        assert "**Answer**: B" in text
        assert text.count("**Explanation**") == 2
        assert text.count("---") == 1
