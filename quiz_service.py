"""
Quiz question generation and AI tutor answers.

Both features call the text-generation service through `llm.LLMClient` and
never fail from the caller's point of view: missing credentials, network or
provider errors and malformed output all degrade to built-in content.
"""
import json
import re
from typing import Any, List, Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from errors import LLMResponseError, MissingCredentialError, ProteinMasterError
from llm import LLMClient
from logging_config import get_logger, log_with_context
from states import QuizQuestion

logger = get_logger(__name__)

QUESTION_COUNT = 3
QUIZ_USE_CASE = "quiz_generation"
TUTOR_USE_CASE = "tutor_explanation"

QUIZ_PROMPT = """
Create {count} multiple-choice questions for {difficulty} Biology students about the topic: "{topic}" related to Proteins.
The questions should test deep understanding, not just memorization.
Each question has exactly 4 options. Return strictly JSON format.
"""

TUTOR_PROMPT = 'Answer this student\'s question about proteins clearly and concisely (max 3 sentences): "{question}"'

NO_KEY_REPLY = "I need an API key to function as your tutor! Please check the configuration."
EMPTY_REPLY = "I couldn't generate an answer at this time."
ERROR_REPLY = "Sorry, I'm having trouble connecting to the biology database right now."

FALLBACK_QUESTIONS: List[QuizQuestion] = [
    QuizQuestion(
        question="Which bond is formed between two amino acids during translation?",
        options=["Ionic bond", "Peptide bond", "Hydrogen bond", "Disulfide bridge"],
        correct_answer=1,
        explanation=("A peptide bond is a covalent chemical bond linking two consecutive amino acid "
                     "monomers along a peptide or protein chain."),
    ),
    QuizQuestion(
        question="What determines the primary structure of a protein?",
        options=["Hydrogen bonding", "The sequence of amino acids", "Interaction between R groups",
                 "The pH of the environment"],
        correct_answer=1,
        explanation=("The primary structure is simply the sequence of amino acids in the polypeptide "
                     "chain, determined by the gene."),
    ),
    QuizQuestion(
        question="Denaturation implies the loss of which structures?",
        options=["Primary only", "Secondary and Tertiary", "Primary and Secondary", "All structures"],
        correct_answer=1,
        explanation=("Denaturation disrupts the secondary and tertiary structures (shape) but typically "
                     "leaves the primary structure (peptide bonds) intact."),
    ),
]

_QUESTIONS_ADAPTER = TypeAdapter(List[QuizQuestion])

_client: Optional[LLMClient] = None


class Success(BaseModel):
    data: Any


class Failure(BaseModel):
    reason: str


GenerationResult = Union[Success, Failure]


def get_client() -> LLMClient:
    global _client
    if _client is None:
        _client = LLMClient()
    return _client


def fallback_questions() -> List[QuizQuestion]:
    return list(FALLBACK_QUESTIONS)


def parse_questions(output_str: str, limit: int = QUESTION_COUNT) -> List[QuizQuestion]:
    """Validate generated JSON into question records.

    Accepts either a bare list or an object with a "questions" list, with or
    without markdown code fences.

    Raises:
        LLMResponseError: if the text is not JSON of the expected shape
    """
    json_str = (output_str or "").strip()
    json_str = re.sub(r"^```(?:json)?\s*|\s*```$", "", json_str).strip()
    if not json_str:
        raise LLMResponseError("Empty response", raw_response=output_str)

    try:
        payload = json.loads(json_str)
    except (ValueError, RecursionError) as e:
        raise LLMResponseError(f"Response is not JSON: {e}", raw_response=output_str) from e

    if isinstance(payload, dict):
        payload = payload.get("questions")
    if not isinstance(payload, list) or not payload:
        raise LLMResponseError("Response has no question list", raw_response=output_str)

    try:
        questions = _QUESTIONS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise LLMResponseError(f"Malformed question records: {e.error_count()} errors",
                               raw_response=output_str) from e
    return questions[:limit]


async def request_questions(topic: str, difficulty: str = "IB", client: Optional[LLMClient] = None,
                            count: int = QUESTION_COUNT) -> GenerationResult:
    """Ask the text-generation service for quiz questions.

    Returns:
        Success(data=list of QuizQuestion) or Failure(reason=...)
    """
    client = client or get_client()
    prompt = QUIZ_PROMPT.format(count=count, difficulty=difficulty, topic=topic)
    try:
        output_str = await client.call(prompt=prompt, use_case=QUIZ_USE_CASE)
        return Success(data=parse_questions(output_str, limit=count))
    except ProteinMasterError as e:
        return Failure(reason=f"{type(e).__name__}: {e}")


async def fetch_questions(topic: str, difficulty: str = "IB",
                          client: Optional[LLMClient] = None) -> List[QuizQuestion]:
    """Generated questions for `topic`, or the built-in set when generation fails."""
    result = await request_questions(topic, difficulty, client=client)
    if isinstance(result, Success):
        log_with_context(logger, "info", "Generated quiz questions", topic=topic, count=len(result.data))
        return result.data
    log_with_context(logger, "warning", "Quiz generation failed, using built-in questions",
                     topic=topic, reason=result.reason)
    return fallback_questions()


async def get_tutor_explanation(question: str, client: Optional[LLMClient] = None) -> str:
    """Short answer to a learner's question; fixed replies when the service is unavailable."""
    client = client or get_client()
    try:
        answer = await client.call(prompt=TUTOR_PROMPT.format(question=question), use_case=TUTOR_USE_CASE)
    except MissingCredentialError:
        logger.warning("Tutor unavailable: no API key configured")
        return NO_KEY_REPLY
    except LLMResponseError:
        return EMPTY_REPLY
    except ProteinMasterError as e:
        log_with_context(logger, "error", "Tutor call failed", error=e)
        return ERROR_REPLY
    return answer.strip() or EMPTY_REPLY
