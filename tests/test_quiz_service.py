"""
Tests for quiz generation and tutor answers.

The LLM client is replaced with an AsyncMock; no network calls are made.
"""
import json

import pytest
from unittest.mock import AsyncMock, Mock

import quiz_service
from errors import ConfigurationError, LLMAPIError, LLMResponseError, MissingCredentialError
from quiz_service import Failure, Success


def _client(return_value=None, side_effect=None):
    client = Mock()
    client.call = AsyncMock(return_value=return_value, side_effect=side_effect)
    return client


def test_fallback_questions():
    questions = quiz_service.fallback_questions()

    assert len(questions) == 3
    assert questions[0].question == "Which bond is formed between two amino acids during translation?"
    assert questions[0].correct_answer == 1
    assert all(len(q.options) == 4 for q in questions)


def test_fallback_returns_a_copy():
    quiz_service.fallback_questions().clear()

    assert len(quiz_service.fallback_questions()) == 3


def test_parse_object_form(sample_questions_json):
    questions = quiz_service.parse_questions(sample_questions_json)

    assert [q.question for q in questions] == ["Question 1?", "Question 2?", "Question 3?"]
    assert questions[0].correct_answer == 1


def test_parse_bare_list_in_code_fence(sample_questions):
    text = "```json\n" + json.dumps(sample_questions[:2]) + "\n```"

    questions = quiz_service.parse_questions(text)

    assert len(questions) == 2


def test_parse_truncates_extra_questions(sample_questions):
    questions = quiz_service.parse_questions(json.dumps(sample_questions))

    assert len(questions) == 3


@pytest.mark.parametrize("text", [
    "",
    "not json at all",
    "{}",
    '{"questions": []}',
    '[{"question": "Q?", "options": ["A", "B"], "correctAnswer": 0, "explanation": "E"}]',
    '[{"question": "Q?", "options": ["A", "B", "C", "D"], "correctAnswer": 4, "explanation": "E"}]',
    '[{"options": ["A", "B", "C", "D"], "correctAnswer": 0, "explanation": "E"}]',
])
def test_parse_rejects_malformed(text):
    with pytest.raises(LLMResponseError):
        quiz_service.parse_questions(text)


@pytest.mark.asyncio
async def test_request_questions_success(sample_questions_json):
    client = _client(return_value=sample_questions_json)

    result = await quiz_service.request_questions("Enzymes", client=client)

    assert isinstance(result, Success)
    assert len(result.data) == 3
    kwargs = client.call.call_args.kwargs
    assert kwargs["use_case"] == quiz_service.QUIZ_USE_CASE
    assert "Enzymes" in kwargs["prompt"]


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    MissingCredentialError("no key", env_var="API_KEY"),
    LLMAPIError("503", provider="gemini", status_code=503),
    ConfigurationError("bad config"),
])
async def test_request_questions_failure(error):
    result = await quiz_service.request_questions("Proteins", client=_client(side_effect=error))

    assert isinstance(result, Failure)
    assert type(error).__name__ in result.reason


@pytest.mark.asyncio
async def test_fetch_questions_uses_generated(sample_questions_json):
    questions = await quiz_service.fetch_questions("Proteins", client=_client(return_value=sample_questions_json))

    assert questions[0].question == "Question 1?"


@pytest.mark.asyncio
async def test_fetch_questions_falls_back_on_bad_output():
    questions = await quiz_service.fetch_questions("Proteins", client=_client(return_value="I cannot help"))

    assert questions == quiz_service.fallback_questions()


def test_parse_rejects_deeply_nested_reply():
    with pytest.raises(LLMResponseError):
        quiz_service.parse_questions("[" * 100000)


@pytest.mark.asyncio
async def test_fetch_questions_falls_back_on_deeply_nested_reply():
    questions = await quiz_service.fetch_questions("Proteins", client=_client(return_value="[" * 100000))

    assert questions == quiz_service.fallback_questions()


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [
    "providers:\nuse_cases:\n",
    "providers:\n  gemini: gemini-2.5-flash\nuse_cases: {}\n",
    "providers: {}\nuse_cases:\n  quiz_generation:\n",
    "defaults: [gemini]\nproviders: {}\nuse_cases: {}\n",
])
async def test_fetch_questions_falls_back_on_malformed_config(mock_env_vars, monkeypatch, tmp_path, text):
    path = tmp_path / "llm_config.yaml"
    path.write_text(text)
    monkeypatch.setenv("LLM_CONFIG_PATH", str(path))

    questions = await quiz_service.fetch_questions("Proteins")

    assert questions == quiz_service.fallback_questions()


@pytest.mark.asyncio
async def test_fetch_questions_without_key(no_api_key):
    """The real client with no credential still yields the built-in quiz."""
    questions = await quiz_service.fetch_questions("Proteins")

    assert len(questions) == 3
    assert questions[0].correct_answer == 1


@pytest.mark.asyncio
async def test_tutor_answer():
    client = _client(return_value="  A peptide bond links amino acids.  ")

    answer = await quiz_service.get_tutor_explanation("What is a peptide bond?", client=client)

    assert answer == "A peptide bond links amino acids."
    assert "What is a peptide bond?" in client.call.call_args.kwargs["prompt"]
    assert client.call.call_args.kwargs["use_case"] == quiz_service.TUTOR_USE_CASE


@pytest.mark.asyncio
@pytest.mark.parametrize("error,reply", [
    (MissingCredentialError("no key", env_var="API_KEY"), quiz_service.NO_KEY_REPLY),
    (LLMResponseError("Empty response"), quiz_service.EMPTY_REPLY),
    (LLMAPIError("timeout", provider="gemini"), quiz_service.ERROR_REPLY),
])
async def test_tutor_fixed_replies(error, reply):
    answer = await quiz_service.get_tutor_explanation("Why?", client=_client(side_effect=error))

    assert answer == reply


@pytest.mark.asyncio
async def test_tutor_blank_answer():
    answer = await quiz_service.get_tutor_explanation("Why?", client=_client(return_value="   "))

    assert answer == quiz_service.EMPTY_REPLY


@pytest.mark.asyncio
async def test_tutor_without_key(no_api_key):
    answer = await quiz_service.get_tutor_explanation("What is denaturation?")

    assert answer == quiz_service.NO_KEY_REPLY
