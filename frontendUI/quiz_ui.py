"""
Quiz tab UI components and logic.
"""
import gradio as gr

import quiz_session
from frontendUI.config import QUIZ_DIFFICULTY, QUIZ_TOPIC
from quiz_service import fetch_questions
from states import SessionStatus


def quiz_view(session):
    """Component updates for the quiz tab:
    (session, progress, question, choices, explanation, next button, result)
    """
    progress = quiz_session.progress_label(session)

    if session.status is SessionStatus.LOADING:
        return (session, progress, "", gr.update(choices=[], value=None, visible=False),
                "", gr.update(visible=False), gr.update(visible=False))

    if session.status is SessionStatus.FINISHED:
        result = (f"## Quiz Complete!\nYou scored **{session.score}** out of "
                  f"**{len(session.questions)}**")
        return (session, progress, "", gr.update(choices=[], value=None, visible=False),
                "", gr.update(visible=False), gr.update(value=result, visible=True))

    question = session.current_question
    answered = session.selected_option is not None
    choices = [(option, idx) for idx, option in enumerate(question.options)]

    explanation = ""
    if answered:
        verdict = "✅ Correct!" if session.selected_option == question.correct_answer else (
            f"❌ Not quite. The answer is: **{question.options[question.correct_answer]}**")
        explanation = f"{verdict}\n\n**Explanation:** {question.explanation}"

    last = session.current_index == len(session.questions) - 1
    return (
        session,
        f"{progress} · {session.topic}",
        f"### {question.question}",
        gr.update(choices=choices, value=session.selected_option, interactive=not answered, visible=True),
        explanation,
        gr.update(value="Finish Quiz" if last else "Next Question", visible=answered),
        gr.update(visible=False),
    )


async def load_quiz(session, topic=QUIZ_TOPIC):
    """Fetch questions when the session is still loading; otherwise leave it alone."""
    if session is not None and session.status is not SessionStatus.LOADING:
        return quiz_view(session)
    questions = await fetch_questions(topic, QUIZ_DIFFICULTY)
    return quiz_view(quiz_session.start_session(questions, topic=topic))


def start_new_quiz(session):
    """Drop the current session; `load_quiz` then fills the loading one."""
    return quiz_view(quiz_session.loading_session(QUIZ_TOPIC))


def record_answer(session, option_index):
    if option_index is None:
        return quiz_view(session)
    return quiz_view(quiz_session.answer(session, int(option_index)))


def next_question(session):
    return quiz_view(quiz_session.advance(session))
