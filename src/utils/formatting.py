"""
Text rendering for questions, results and the full content listing.

Choices are labelled with letters (A, B, C, ...) in display order.
"""

from __future__ import annotations

from string import ascii_uppercase
from typing import Iterable, Optional

try:
    from ..models.question import AnswerResult, Question
except ImportError:
    from src.models.question import AnswerResult, Question


def choice_label(index: int) -> str:
    """Letter label for a choice index (0 -> 'A')."""
    return ascii_uppercase[index]


def _format_choice(index: int, text: str) -> str:
    # Code snippets keep their line breaks inside a fenced block
    if "\n" in text:
        return f"- **{choice_label(index)}**.\n\n```scala\n{text}\n```\n"
    return f"- **{choice_label(index)}**. {text}\n"


def format_question(question: Question, number: Optional[int] = None, total: Optional[int] = None) -> str:
    """
    Format a question for display.

    Args:
        question: Question to render
        number: 1-based position of the question (optional)
        total: Total number of questions (optional)

    Returns:
        Markdown text
    """
    output = ""
    if number is not None and total is not None:
        output += f"## Question {number}/{total}\n\n"

    output += f"**{question.prompt}**\n\n"
    for index, text in enumerate(question.choices):
        output += _format_choice(index, text)

    if len(question.correct_choices) > 1:
        output += "\n*Tick every correct answer*"
    else:
        output += "\n*Tick one answer*"
    return output


def format_result(result: AnswerResult, question: Question, show_explanation: bool = True) -> str:
    """Format the verdict for an answered question."""
    correct_letters = ", ".join(choice_label(i) for i in sorted(result.correct_choices))
    if result.correct:
        output = "### ✅ Correct!\n\n"
    else:
        selected = ", ".join(
            choice_label(i) if 0 <= i < len(question.choices) else str(i)
            for i in sorted(result.selected)
        ) or "nothing"
        output = (
            "### ❌ Incorrect\n\n"
            f"You selected **{selected}**; the correct answer is **{correct_letters}**.\n\n"
        )

    if show_explanation:
        output += f"**Explanation**: {result.explanation}\n"
    return output


def format_listing(questions: Iterable[Question], title: Optional[str] = None) -> str:
    """
    Render the full read-only content listing: questions, choices, answers and explanations.
    """
    questions = list(questions)
    output = f"# {title}\n\n" if title else ""

    for number, question in enumerate(questions, start=1):
        output += f"## {number}. {question.prompt}\n\n"
        for index, text in enumerate(question.choices):
            output += _format_choice(index, text)
        letters = ", ".join(choice_label(i) for i in sorted(question.correct_choices))
        output += f"\n**Answer**: {letters}\n\n"
        output += f"**Explanation**: {question.explanation}\n\n"
        if number < len(questions):
            output += "---\n\n"

    return output
