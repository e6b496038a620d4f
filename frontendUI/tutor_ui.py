"""
AI Biology Tutor panel.
"""
from quiz_service import get_tutor_explanation

TUTOR_PLACEHOLDER = "Ask me anything about amino acids, translation, or protein structures!"


async def ask_tutor(question, history):
    """Append the learner's question and the tutor's reply to the chat history."""
    history = list(history or [])
    if not question or not question.strip():
        return "", history
    answer = await get_tutor_explanation(question.strip())
    history.append({"role": "user", "content": question.strip()})
    history.append({"role": "assistant", "content": answer})
    return "", history
