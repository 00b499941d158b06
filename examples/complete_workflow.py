"""
Complete workflow example: Load → Answer → Explain → Summarize

Demonstrates the quiz end to end from a script:
1. Load and list the question bank
2. Check answers directly against the store
3. Run a reader session over every question
4. Complete the session and print the summary
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.models.quiz_session import QuizSession
from src.quiz_store import QuestionNotFoundError, QuizStore
from src.utils.formatting import choice_label, format_question, format_result
from src.utils.logging_utils import setup_logger


def main():
    setup_logger()

    # ==================== Step 1: Load Question Bank ====================
    print("=" * 60)
    print("STEP 1: Loading Question Bank")
    print("=" * 60)

    store = QuizStore()
    questions = store.load()
    print(f"✅ {len(questions)} questions in '{store.meta.get('title')}'")
    for question in questions:
        print(f"  [{question.id}] {question.prompt}")

    # ==================== Step 2: Direct Checks ====================
    print("\n" + "=" * 60)
    print("STEP 2: Checking Answers")
    print("=" * 60)

    first = questions[0]
    print(format_question(first, 1, len(questions)))
    print(f"\nSubmitting the recorded answer: {store.check(first.id, first.correct_choices)}")
    print(f"Submitting nothing: {store.check(first.id, set())}")
    print(f"\nExplanation: {store.explain(first.id)}")

    try:
        store.explain(999)
    except QuestionNotFoundError as e:
        print(f"\nUnknown id: {e}")

    # ==================== Step 3: Reader Session ====================
    print("\n" + "=" * 60)
    print("STEP 3: Reader Session")
    print("=" * 60)

    session = QuizSession(store)
    for number, question in enumerate(questions, start=1):
        # Answer every other question with the first choice only
        selected = question.correct_choices if number % 2 else {0}
        result = session.submit_answer(question.id, selected)
        letters = ", ".join(choice_label(i) for i in sorted(selected))
        print(f"\nQ{number} → {letters}")
        print(format_result(result, question, show_explanation=False))

    # ==================== Step 4: Summary ====================
    print("=" * 60)
    print("STEP 4: Summary")
    print("=" * 60)

    summary = session.complete_quiz()
    print(f"Score: {summary['score']:.1f}%")
    print(f"Passed: {summary['passed']}")
    print(f"Review: {summary['review']}")


if __name__ == "__main__":
    main()
