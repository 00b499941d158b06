"""
Question store - serves the fixed question bank and checks answers.

Every operation is a read of immutable data, so one store can be shared by any
number of readers without locking.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

try:
    from .config import config
    from .models.question import AnswerResult, Question
    from .utils.validation import QuestionBankValidator
except ImportError:
    from src.config import config
    from src.models.question import AnswerResult, Question
    from src.utils.validation import QuestionBankValidator

logger = logging.getLogger(__name__)


def _is_question_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class QuestionNotFoundError(KeyError):
    """Raised when a question id is not part of the bank."""

    def __init__(self, question_id: Any):
        super().__init__(question_id)
        self.question_id = question_id

    def __str__(self) -> str:
        return f"Question {self.question_id!r} not found"


class QuizContentError(ValueError):
    """Raised when the question bank cannot be loaded or is malformed."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []

    def __str__(self) -> str:
        message = super().__str__()
        if not self.errors:
            return message
        return message + "\n" + "\n".join(f"  - {error}" for error in self.errors)


class QuizStore:
    """
    Holds the ordered question bank and answers lookups against it.

    The bank is read from disk and validated on first use. Malformed content
    raises QuizContentError from that first call; there are no other failure
    modes apart from unknown question ids.

    Usage:
        store = QuizStore()
        for question in store.load():
            print(question.prompt)
        store.check(1, {1, 4})  # True
    """

    def __init__(
        self,
        path: Optional[Path | str] = None,
        validate: bool = True,
        auto_repair: Optional[bool] = None,
    ):
        """
        Initialize the store.

        Args:
            path: Question bank file (default: config.paths.question_bank)
            validate: Whether to validate the document before building questions
            auto_repair: Repair trivial content issues (default: config.quiz.auto_repair)
        """
        self.path = Path(path) if path else config.paths.question_bank
        self.validate = validate
        self.auto_repair = config.quiz.auto_repair if auto_repair is None else auto_repair

        self.meta: Dict[str, Any] = {}
        self._document: Optional[Dict[str, Any]] = None
        self._questions: Optional[Tuple[Question, ...]] = None
        self._by_id: Dict[int, Question] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_dict(
        cls, document: Dict[str, Any], validate: bool = True, auto_repair: bool = False
    ) -> "QuizStore":
        """Create a store from an in-memory question bank document."""
        store = cls(path=Path("<memory>"), validate=validate, auto_repair=auto_repair)
        store._document = document
        return store

    def load(self) -> Tuple[Question, ...]:
        """
        Return the ordered question bank, loading it on first call.

        Raises:
            QuizContentError: If the bank is missing or malformed
        """
        if self._questions is None:
            with self._lock:
                if self._questions is None:
                    self._build(self._read_document())
        return self._questions

    def get_question(self, question_id: int) -> Question:
        """
        Look up a question by id.

        Raises:
            QuestionNotFoundError: If the id is not in the bank
        """
        self.load()
        # 1.0 and True hash like 1; only real ints name a question
        if not _is_question_id(question_id) or question_id not in self._by_id:
            raise QuestionNotFoundError(question_id)
        return self._by_id[question_id]

    def check(self, question_id: int, selected_indices: Iterable[int]) -> bool:
        """
        Check a selection against the recorded correct choices.

        Order and duplicates in the selection are irrelevant. Indices outside
        the choice range make the answer wrong; they are not an error.
        """
        return self.get_question(question_id).is_correct(selected_indices)

    def explain(self, question_id: int) -> str:
        """Return the explanation text of a question verbatim."""
        return self.get_question(question_id).explanation

    def check_answer(self, question_id: int, selected_indices: Iterable[int]) -> AnswerResult:
        """Check a selection and return correctness together with the explanation."""
        question = self.get_question(question_id)
        selected = frozenset(selected_indices)
        return AnswerResult(
            question_id=question.id,
            selected=selected,
            correct=question.is_correct(selected),
            correct_choices=question.correct_choices,
            explanation=question.explanation,
        )

    def question_ids(self) -> List[int]:
        """Question ids in bank order."""
        return [question.id for question in self.load()]

    def __iter__(self) -> Iterator[Question]:
        return iter(self.load())

    def __len__(self) -> int:
        return len(self.load())

    def __contains__(self, question_id: object) -> bool:
        self.load()
        return _is_question_id(question_id) and question_id in self._by_id

    def _read_document(self) -> Dict[str, Any]:
        """Read the raw bank document from memory or disk."""
        if self._document is not None:
            return self._document

        if not self.path.exists():
            raise QuizContentError(f"Question bank not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise QuizContentError(f"Question bank is not valid JSON: {self.path}", [str(e)]) from e

    def _build(self, document: Dict[str, Any]):
        """Validate the document and build the immutable question records."""
        if self.validate:
            result = QuestionBankValidator().validate(document, auto_repair=self.auto_repair)
            for repair in result.repairs:
                logger.warning("Question bank repair (%s): %s", self.path, repair)
            if not result.valid:
                logger.error("Invalid question bank %s: %d error(s)", self.path, len(result.errors))
                raise QuizContentError(f"Invalid question bank: {self.path}", result.errors)
            document = result.data

        try:
            questions = tuple(Question.from_dict(item) for item in document["questions"])
        except (KeyError, TypeError, ValueError) as e:
            raise QuizContentError(f"Malformed question in {self.path}", [str(e)]) from e

        by_id = {question.id: question for question in questions}
        if len(by_id) != len(questions):
            raise QuizContentError(f"Duplicate question ids in {self.path}")

        self.meta = dict(document.get("meta", {}))
        self._by_id = by_id
        self._questions = questions
        logger.info(
            "Loaded %d questions from %s (%s)",
            len(questions),
            self.path,
            self.meta.get("title", "untitled"),
        )


# Global store instance
_quiz_store: Optional[QuizStore] = None
_quiz_store_lock = threading.Lock()


def get_quiz_store() -> QuizStore:
    """Get or create the global quiz store."""
    global _quiz_store
    if _quiz_store is None:
        with _quiz_store_lock:
            if _quiz_store is None:
                _quiz_store = QuizStore()
    return _quiz_store
