"""
Quiz Session - one reader's answer sheet for the question bank.

A session lives for one reader interaction and is discarded afterwards.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, List, Optional

try:
    from ..config import config
    from .question import AnswerResult
except ImportError:
    from src.config import config
    from src.models.question import AnswerResult

if TYPE_CHECKING:
    from src.quiz_store import QuizStore

logger = logging.getLogger(__name__)


class QuizSession:
    """
    Answer sheet for a single reader.

    Features:
    - One answer per question, checked against the store on submission
    - Running score over answered questions
    - Summary with the questions to review on completion
    """

    def __init__(
        self,
        store: "QuizStore",
        session_id: Optional[str] = None,
        passing_score: Optional[float] = None,
    ):
        """
        Initialize quiz session.

        Args:
            store: Question store to answer against
            session_id: Session ID (auto-generated if None)
            passing_score: Score required to pass, 0-100 (default: config.quiz.passing_score)
        """
        self.store = store
        self.session_id = session_id or f"qs-{uuid.uuid4()}"
        self.passing_score = (
            config.quiz.passing_score if passing_score is None else passing_score
        )
        if not 0 <= self.passing_score <= 100:
            raise ValueError(f"Passing score must be between 0 and 100, got {self.passing_score}")

        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.completed_at: Optional[str] = None
        self.status = "in_progress"

        self.answers: Dict[int, FrozenSet[int]] = {}
        self.results: Dict[int, AnswerResult] = {}

    def submit_answer(self, question_id: int, selected_indices: Iterable[int]) -> AnswerResult:
        """
        Record and check a reader's selection for a question.

        Args:
            question_id: Question identifier
            selected_indices: Indices of the selected choices

        Returns:
            AnswerResult with correctness and explanation

        Raises:
            QuestionNotFoundError: If the question is not in the bank
            ValueError: If the selection is invalid, the question was already
                answered, or the session is completed
        """
        if self.status == "completed":
            raise ValueError(f"Session {self.session_id} is already completed")

        question = self.store.get_question(question_id)
        selected = frozenset(selected_indices)

        if not selected:
            raise ValueError("Selection cannot be empty")

        invalid = sorted(i for i in selected if not 0 <= i < len(question.choices))
        if invalid:
            raise ValueError(
                f"Choice indices {invalid} out of range for question {question_id} "
                f"({len(question.choices)} choices)"
            )

        if question_id in self.answers:
            raise ValueError(f"Question {question_id} already answered")

        result = self.store.check_answer(question_id, selected)
        self.answers[question_id] = selected
        self.results[question_id] = result
        return result

    def unanswered(self) -> List[int]:
        """Ids of questions without an answer, in bank order."""
        return [qid for qid in self.store.question_ids() if qid not in self.answers]

    def score(self) -> Optional[float]:
        """Percentage of correct answers over answered questions (None if none answered)."""
        if not self.results:
            return None
        correct = sum(1 for result in self.results.values() if result.correct)
        return 100 * correct / len(self.results)

    def complete_quiz(self) -> Dict[str, Any]:
        """
        Complete the session and summarize the results.

        Returns:
            Dictionary with score, pass/fail and questions to review
        """
        self.status = "completed"
        self.completed_at = datetime.now(timezone.utc).isoformat()

        score = self.score()
        passed = score >= self.passing_score if score is not None else False
        review = [
            qid for qid in self.store.question_ids()
            if qid in self.results and not self.results[qid].correct
        ]

        logger.info(
            "Session %s completed: %d/%d answered, score=%s",
            self.session_id,
            len(self.results),
            len(self.store),
            f"{score:.1f}" if score is not None else "n/a",
        )

        return {
            "session_id": self.session_id,
            "score": score,
            "passed": passed,
            "total_questions": len(self.store),
            "answered_questions": len(self.results),
            "correct_answers": sum(1 for r in self.results.values() if r.correct),
            "review": review,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert session to a plain dictionary."""
        return {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "completed_at": self.completed_at,
            "status": self.status,
            "passing_score": self.passing_score,
            "answers": {qid: sorted(selected) for qid, selected in self.answers.items()},
            "results": [self.results[qid].to_dict() for qid in self.answers],
            "score": self.score(),
        }
