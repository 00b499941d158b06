"""
Configuration management for the recursion quiz.

This module centralizes all configuration settings following 12-factor app principles:
- Settings loaded from environment variables (and an optional .env file)
- Sensible defaults for development
- Single source of truth for content, schema and log settings
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _project_root() -> Path:
    return Path(__file__).parent.parent


@dataclass
class PathConfig:
    """File system paths - single source of truth for content and schemas."""

    project_root: Path = field(default_factory=_project_root)

    # Computed from project_root
    content_dir: Path = field(init=False)
    schemas_dir: Path = field(init=False)
    question_bank_schema: Path = field(init=False)

    # Overridable through QUIZ_BANK_PATH
    question_bank: Optional[Path] = None

    def __post_init__(self):
        """Initialize computed paths."""
        self.content_dir = self.project_root / "content"
        self.schemas_dir = self.project_root / "schemas"
        self.question_bank_schema = self.schemas_dir / "question_bank.schema.json"

        if self.question_bank is None:
            env_path = os.getenv("QUIZ_BANK_PATH")
            self.question_bank = (
                Path(env_path) if env_path else self.content_dir / "recursion_quiz.json"
            )
        self.question_bank = Path(self.question_bank).resolve()


@dataclass
class QuizConfig:
    """Quiz session settings."""

    passing_score: float = field(
        default_factory=lambda: float(os.getenv("QUIZ_PASSING_SCORE", "70.0"))
    )
    show_explanations: bool = True

    # Repair trivial content issues (duplicate indices, unknown keys) at load time
    auto_repair: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s | %(levelname)s | %(message)s"

    def level(self) -> int:
        """Numeric logging level (falls back to INFO for unknown names)."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.INFO


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from src.config import config

        bank_path = config.paths.question_bank
        passing = config.quiz.passing_score
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.quiz = QuizConfig()
            cls._instance.logging = LoggingConfig()
        return cls._instance

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not (0 <= self.quiz.passing_score <= 100):
            errors.append(
                f"passing_score must be in [0, 100], got {self.quiz.passing_score}"
            )

        if not isinstance(logging.getLevelName(self.logging.log_level.upper()), int):
            errors.append(f"Unknown log level: {self.logging.log_level}")

        if not self.paths.question_bank.exists():
            errors.append(f"Question bank not found: {self.paths.question_bank}")

        if not self.paths.question_bank_schema.exists():
            errors.append(
                f"Question bank schema not found: {self.paths.question_bank_schema}"
            )

        return errors


# Global config instance
config = Config()
