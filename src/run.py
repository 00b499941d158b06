"""
Recursion Quiz: Gradio interface.

Run with `python -m src.run` to launch the UI, or `python -m src.run --dump`
to print every question with its answer and explanation.

Each browser client keeps its own QuizSession in a gr.State, so readers never
share an answer sheet.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import gradio as gr

from src.config import config
from src.models.quiz_session import QuizSession
from src.quiz_store import QuestionNotFoundError, QuizContentError, get_quiz_store
from src.utils.formatting import choice_label, format_listing, format_question, format_result
from src.utils.logging_utils import setup_logger

logger = setup_logger()


# ==================== UI Helper Functions ====================

def _question_label(number: int, prompt: str) -> str:
    return f"{number}. {prompt}"


def _question_id_from_label(label: str) -> Optional[int]:
    """Map a dropdown label back to its question id."""
    if not label:
        return None
    for number, question in enumerate(get_quiz_store(), start=1):
        if _question_label(number, question.prompt) == label:
            return question.id
    return None


def _choice_labels(question) -> List[str]:
    # Checkbox labels are one line; multi-line code keeps only its first line
    labels = []
    for index, text in enumerate(question.choices):
        lines = text.splitlines()
        suffix = " …" if len(lines) > 1 else ""
        labels.append(f"{choice_label(index)}. {lines[0]}{suffix}")
    return labels


def question_choices() -> List[str]:
    """Dropdown labels for every question, in bank order."""
    return [_question_label(n, q.prompt) for n, q in enumerate(get_quiz_store(), start=1)]


def start_quiz_ui():
    """Start a new session for this reader and show the first question."""
    store = get_quiz_store()
    session = QuizSession(store)
    labels = question_choices()
    first = store.load()[0]

    status = f"✅ Quiz started ({len(store)} questions, pass mark {session.passing_score:.0f}%)"
    return (
        session,
        status,
        gr.update(choices=labels, value=labels[0]),
        format_question(first, 1, len(store)),
        gr.update(choices=_choice_labels(first), value=[]),
    )


def show_question_ui(label: str):
    """Render the question selected in the dropdown and its choice boxes."""
    question_id = _question_id_from_label(label)
    if question_id is None:
        return "No question selected", gr.update(choices=[], value=[])

    store = get_quiz_store()
    question = store.get_question(question_id)
    number = store.question_ids().index(question_id) + 1
    return (
        format_question(question, number, len(store)),
        gr.update(choices=_choice_labels(question), value=[]),
    )


def submit_answer_ui(session: Optional[QuizSession], label: str, selected: Optional[List[int]]):
    """Check the ticked choices against the selected question."""
    if session is None:
        return session, "❌ Start the quiz first"

    question_id = _question_id_from_label(label)
    if question_id is None:
        return session, "❌ Select a question first"

    try:
        result = session.submit_answer(question_id, selected or [])
    except (ValueError, QuestionNotFoundError) as e:
        return session, f"❌ {e}"

    question = session.store.get_question(question_id)
    feedback = format_result(result, question, show_explanation=config.quiz.show_explanations)
    feedback += f"\n*{len(session.unanswered())} question(s) left*"
    return session, feedback


def complete_quiz_ui(session: Optional[QuizSession]):
    """Complete this reader's session and show the summary."""
    if session is None:
        return session, "❌ Start the quiz first", gr.update(visible=False)

    summary = session.complete_quiz()
    score = summary["score"]
    score_text = f"{score:.1f}%" if score is not None else "n/a"

    output = "## 📊 Results\n\n"
    output += f"**Score**: {score_text}\n\n"
    output += f"**Answered**: {summary['answered_questions']}/{summary['total_questions']}\n\n"
    output += f"**Result**: {'✅ Passed' if summary['passed'] else '❌ Not passed'}\n\n"
    if summary["review"]:
        output += "### Review these questions\n\n"
        for question_id in summary["review"]:
            output += f"- {session.store.get_question(question_id).prompt}\n"

    session_json = json.dumps(session.to_dict(), indent=2)
    return session, output, gr.update(value=session_json, visible=True)


def create_interface():
    """Build the Gradio interface."""
    store = get_quiz_store()
    store.load()
    title = store.meta.get("title", "Quiz")

    with gr.Blocks(title=f"{title} Quiz") as demo:
        gr.Markdown(f"# 🔁 {title} Quiz")
        session_state = gr.State(None)

        with gr.Tab("1️⃣ Quiz"):
            start_btn = gr.Button("🚀 Start Quiz", variant="primary", size="lg")
            status_output = gr.Markdown()

            question_dropdown = gr.Dropdown(choices=question_choices(), label="Question")
            question_output = gr.Markdown()

            gr.Markdown("---")

            choice_boxes = gr.CheckboxGroup(choices=[], type="index", label="Your Answer")
            submit_btn = gr.Button("Check Answer", variant="primary")
            feedback_output = gr.Markdown()

            gr.Markdown("---")

            complete_btn = gr.Button("✅ Complete Quiz & View Results", variant="secondary")
            complete_output = gr.Markdown()
            complete_json = gr.Code(language="json", label="Session", visible=False)

            start_btn.click(
                start_quiz_ui,
                outputs=[session_state, status_output, question_dropdown, question_output, choice_boxes],
            )
            question_dropdown.change(
                show_question_ui,
                inputs=[question_dropdown],
                outputs=[question_output, choice_boxes],
            )
            submit_btn.click(
                submit_answer_ui,
                inputs=[session_state, question_dropdown, choice_boxes],
                outputs=[session_state, feedback_output],
            )
            complete_btn.click(
                complete_quiz_ui,
                inputs=[session_state],
                outputs=[session_state, complete_output, complete_json],
            )

        with gr.Tab("2️⃣ All Questions"):
            gr.Markdown(format_listing(store, title=title))

    return demo


def main(argv: Optional[List[str]] = None) -> int:
    """Validate config and content, then dump the listing or launch the UI."""
    argv = sys.argv[1:] if argv is None else argv

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    try:
        store = get_quiz_store()
        store.load()
    except QuizContentError as e:
        logger.error("%s", e)
        return 1

    if "--dump" in argv:
        print(format_listing(store, title=store.meta.get("title")))
        return 0

    demo = create_interface()
    demo.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=False,
        show_error=True
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
