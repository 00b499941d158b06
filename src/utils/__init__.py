"""
Utility modules for the recursion quiz.

This module contains utility functions:
- validation: JSON Schema validation of the question bank
- formatting: Text rendering of questions, results and the listing
- logging_utils: Logger setup from configuration
"""

from .validation import (
    QuestionBankValidator,
    SchemaValidator,
    ValidationResult,
    validate_question_bank,
)
from .formatting import (
    choice_label,
    format_listing,
    format_question,
    format_result,
)
from .logging_utils import setup_logger

__all__ = [
    # Validation
    "SchemaValidator",
    "QuestionBankValidator",
    "ValidationResult",
    "validate_question_bank",
    # Formatting
    "choice_label",
    "format_question",
    "format_result",
    "format_listing",
    # Logging
    "setup_logger",
]
