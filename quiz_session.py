"""Sequential multiple-choice quiz: one answer per question, running score."""

from typing import Sequence

from states import QuizQuestion, QuizSession, SessionStatus


def loading_session(topic: str = "Proteins") -> QuizSession:
    """Session shown while questions are being fetched; accepts no actions."""
    return QuizSession(status=SessionStatus.LOADING, topic=topic)


def start_session(questions: Sequence[QuizQuestion], topic: str = "Proteins") -> QuizSession:
    if not questions:
        raise ValueError("a quiz session needs at least one question")
    return QuizSession(status=SessionStatus.READY, topic=topic, questions=tuple(questions))


def answer(session: QuizSession, index: int) -> QuizSession:
    """Lock in `index` for the current question; answers cannot be changed."""
    if session.status is not SessionStatus.READY or session.selected_option is not None:
        return session
    question = session.questions[session.current_index]
    if not 0 <= index < len(question.options):
        return session
    score = session.score + (1 if index == question.correct_answer else 0)
    return session.model_copy(update={"selected_option": index, "score": score})


def advance(session: QuizSession) -> QuizSession:
    if session.status is not SessionStatus.READY or session.selected_option is None:
        return session
    if session.current_index >= len(session.questions) - 1:
        return session.model_copy(update={"status": SessionStatus.FINISHED})
    return session.model_copy(update={
        "current_index": session.current_index + 1,
        "selected_option": None,
    })


def is_finished(session: QuizSession) -> bool:
    return session.status is SessionStatus.FINISHED


def progress_label(session: QuizSession) -> str:
    if session.status is SessionStatus.LOADING:
        return "Generating smart questions..."
    if session.status is SessionStatus.FINISHED:
        return f"You scored {session.score} out of {len(session.questions)}"
    return f"Question {session.current_index + 1}/{len(session.questions)}"
