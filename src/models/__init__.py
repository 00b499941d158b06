"""
Data models for the recursion quiz.

This module contains core data models:
- Question: Immutable quiz question loaded from the question bank
- AnswerResult: Outcome of checking a selection
- QuizSession: One reader's answer sheet
"""

from .question import AnswerResult, Question
from .quiz_session import QuizSession

__all__ = [
    "Question",
    "AnswerResult",
    "QuizSession",
]
