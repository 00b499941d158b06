"""
Shared pytest fixtures and configuration for the quiz tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_bank():
    """
    Fixture providing a small valid question bank.

    Returns:
        dict: A question bank document that passes all validation
    """
    return {
        "meta": {
            "schema_version": 1,
            "title": "Sample",
            "language": "Scala",
        },
        "questions": [
            {
                "id": 10,
                "topic": "list-operations",
                "prompt": "Which operation is O(1) on a List?",
                "choices": ["x :: xs", "xs :+ x", "xs.reverse"],
                "correct_choices": [0],
                "explanation": "Prepending shares the existing list.",
            },
            {
                "id": 20,
                "prompt": "Which types are recursive?",
                "choices": ["Int", "Tree", "String", "Json"],
                "correct_choices": [1, 3],
                "explanation": "Tree and Json refer to themselves.",
            },
        ],
    }


@pytest.fixture
def bank_file(tmp_path, sample_bank):
    """
    Fixture writing the sample bank to a temporary file.

    Returns:
        Path: Path to the question bank file
    """
    path = tmp_path / "bank.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sample_bank, f)
    return path


@pytest.fixture
def sample_store(sample_bank):
    """Fixture providing a QuizStore over the sample bank."""
    from src.quiz_store import QuizStore

    return QuizStore.from_dict(sample_bank)


@pytest.fixture
def recursion_store():
    """Fixture providing a QuizStore over the shipped recursion quiz."""
    from src.config import config
    from src.quiz_store import QuizStore

    return QuizStore(config.paths.content_dir / "recursion_quiz.json")


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "content: mark test as checking the shipped question bank")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
