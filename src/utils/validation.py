"""
Question bank validation.

JSON Schema covers the document shape; QuestionBankValidator adds what a schema
cannot express (unique ids, index ranges, duplicates). With auto_repair the
validator fixes trivial issues on a copy and reports what it changed.
"""

from __future__ import annotations

import json
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator, ValidationError


@dataclass
class ValidationResult:
    """Outcome of validating a document (data is the repaired copy when repairs ran)."""
    valid: bool
    errors: list[str]
    data: Any = None
    repairs: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        lines = ["valid" if self.valid else f"invalid ({len(self.errors)} error(s))"]
        lines += [f"  error: {error}" for error in self.errors]
        lines += [f"  repaired: {repair}" for repair in self.repairs]
        return "\n".join(lines)


class SchemaValidator:
    """Draft 7 validation against a schema file."""

    def __init__(self, schema_path: Path | str):
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r", encoding="utf-8") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema)

    def validate(self, data: Any, auto_repair: bool = False) -> ValidationResult:
        """
        Validate data against the schema.

        With auto_repair, keys the schema forbids are dropped from a copy of
        the data and the copy is validated instead.
        """
        repairs: list[str] = []
        if auto_repair:
            data = deepcopy(data)
            self._drop_unknown_keys(data, self.schema, "", repairs)

        errors = sorted(
            self.validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]
        )
        return ValidationResult(
            valid=not errors,
            errors=[self._describe(error) for error in errors],
            data=data,
            repairs=repairs,
        )

    @staticmethod
    def _describe(error: ValidationError) -> str:
        location = "/".join(str(part) for part in error.absolute_path) or "<document>"
        return f"{location}: {error.message} [{error.validator}]"

    def _drop_unknown_keys(self, node: Any, schema: Any, location: str, repairs: list[str]):
        if not isinstance(schema, dict):
            return

        if isinstance(node, list):
            for index, item in enumerate(node):
                self._drop_unknown_keys(item, schema.get("items"), f"{location}/{index}", repairs)
            return

        if not isinstance(node, dict):
            return

        properties = schema.get("properties", {})
        if schema.get("additionalProperties") is False:
            for key in [k for k in node if k not in properties]:
                del node[key]
                repairs.append(f"dropped unknown key {location or '<document>'}/{key}")

        for key, subschema in properties.items():
            if key in node:
                self._drop_unknown_keys(node[key], subschema, f"{location}/{key}", repairs)


class QuestionBankValidator(SchemaValidator):
    """
    Specialized validator for question bank documents.

    Adds content checks beyond JSON Schema:
    - Question ID uniqueness
    - Correct choice indices inside [0, len(choices))
    - Duplicate correct indices and duplicate choice texts
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Initialize question bank validator.

        Args:
            schema_path: Path to schema (uses config default if None)
        """
        if schema_path is None:
            try:
                from ..config import config
            except ImportError:
                from src.config import config
            schema_path = config.paths.question_bank_schema

        super().__init__(schema_path)

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """
        Validate a question bank with content checks.

        Args:
            data: Question bank document
            auto_repair: Whether to attempt automatic repairs

        Returns:
            ValidationResult
        """
        repairs: list[str] = []
        if auto_repair and isinstance(data, dict):
            data = deepcopy(data)
            self._normalize_correct_choices(data, repairs)

        result = super().validate(data, auto_repair=auto_repair)
        result.repairs = repairs + result.repairs
        if not result.valid:
            return result

        questions = result.data.get("questions", [])
        errors = []

        duplicate_ids = self._find_duplicate_ids(questions)
        if duplicate_ids:
            dups_str = ", ".join(str(i) for i in sorted(duplicate_ids))
            errors.append(f"Duplicate question IDs found: {dups_str} (IDs must be unique)")

        for question in questions:
            errors.extend(self._check_question(question))

        if errors:
            return ValidationResult(
                valid=False, errors=errors, data=result.data, repairs=result.repairs
            )
        return result

    def _check_question(self, question: dict) -> list[str]:
        """Content checks for a single schema-valid question."""
        errors = []
        qid = question["id"]
        num_choices = len(question["choices"])
        correct = question["correct_choices"]

        out_of_range = sorted(i for i in set(correct) if i >= num_choices)
        if out_of_range:
            errors.append(
                f"Question {qid}: correct choice indices {out_of_range} are outside "
                f"[0, {num_choices})"
            )

        if len(set(correct)) != len(correct):
            errors.append(f"Question {qid}: correct_choices contains duplicates")

        if len(set(question["choices"])) != num_choices:
            errors.append(f"Question {qid}: choices contain duplicate texts")

        return errors

    def _find_duplicate_ids(self, questions: list[dict]) -> set[int]:
        """Return question IDs that appear more than once."""
        seen: set[int] = set()
        duplicates: set[int] = set()
        for question in questions:
            qid = question.get("id")
            if qid in seen:
                duplicates.add(qid)
            seen.add(qid)
        return duplicates

    def _normalize_correct_choices(self, data: dict, repairs: list[str]):
        """De-duplicate and sort correct_choices in place."""
        for question in data.get("questions", []) or []:
            correct = question.get("correct_choices") if isinstance(question, dict) else None
            if not isinstance(correct, list):
                continue
            if not all(isinstance(i, int) and not isinstance(i, bool) for i in correct):
                continue
            normalized = sorted(set(correct))
            if normalized != correct:
                question["correct_choices"] = normalized
                repairs.append(
                    f"Normalized correct_choices of question {question.get('id')}: "
                    f"{correct} → {normalized}"
                )


def validate_question_bank(data: dict, auto_repair: bool = False) -> ValidationResult:
    """
    Convenience function to validate a question bank.

    Args:
        data: Question bank document
        auto_repair: Whether to attempt automatic repairs

    Returns:
        ValidationResult

    Example:
        >>> result = validate_question_bank(document)
        >>> if not result:
        ...     print(result)
    """
    validator = QuestionBankValidator()
    return validator.validate(data, auto_repair=auto_repair)
