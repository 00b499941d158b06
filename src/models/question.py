"""
Question records and answer-check results.

Questions are created once when the question bank is loaded and never change
afterwards, so they are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Question:
    """
    A single quiz question.

    Attributes:
        id: Question identifier (unique within a bank)
        prompt: The question text
        choices: Choice texts, in display order
        correct_choices: Indices of the correct choices
        explanation: Rationale shown after answering
        topic: Optional topic tag (e.g. "tail-recursion")
    """
    id: int
    prompt: str
    choices: Tuple[str, ...]
    correct_choices: FrozenSet[int]
    explanation: str
    topic: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValueError(f"Question id must be an integer, got {self.id!r}")
        if not self.choices:
            raise ValueError(f"Question {self.id} must have at least one choice")
        invalid = sorted(i for i in self.correct_choices if not 0 <= i < len(self.choices))
        if invalid:
            raise ValueError(
                f"Question {self.id} has correct choice indices {invalid} outside "
                f"[0, {len(self.choices)})"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """Build a Question from its question bank representation."""
        return cls(
            id=data["id"],
            prompt=data["prompt"],
            choices=tuple(data["choices"]),
            correct_choices=frozenset(data["correct_choices"]),
            explanation=data["explanation"],
            topic=data.get("topic"),
        )

    def is_correct(self, selected: Iterable[int]) -> bool:
        """Set comparison between a selection and the correct choices."""
        return frozenset(selected) == self.correct_choices

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (question bank representation)."""
        data = {
            "id": self.id,
            "prompt": self.prompt,
            "choices": list(self.choices),
            "correct_choices": sorted(self.correct_choices),
            "explanation": self.explanation,
        }
        if self.topic is not None:
            data["topic"] = self.topic
        return data


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of checking one selection against a question."""
    question_id: int
    selected: FrozenSet[int]
    correct: bool
    correct_choices: FrozenSet[int]
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "question_id": self.question_id,
            "selected": sorted(self.selected),
            "correct": self.correct,
            "correct_choices": sorted(self.correct_choices),
            "explanation": self.explanation,
        }
