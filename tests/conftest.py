"""
Pytest configuration and fixtures for ProteinMaster tests.
"""
import json

import pytest

import llm.config
import quiz_service
from llm.config import clear_api_key_cache
from states import QuizQuestion


@pytest.fixture(autouse=True)
def reset_llm_caches(monkeypatch):
    """Every test starts with no cached config, API keys or shared client."""
    monkeypatch.setattr(llm.config, "_CONFIG_CACHE", None)
    monkeypatch.setattr(quiz_service, "_client", None)
    clear_api_key_cache()
    yield
    clear_api_key_cache()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv("API_KEY", "test-gemini-key")
    monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
    for name in ("LLM_CONFIG_PATH", "LLM_DEFAULT_PROVIDER",
                 "LLM_QUIZ_GENERATION_MODEL", "LLM_TUTOR_EXPLANATION_MODEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def no_api_key(monkeypatch):
    """No credential for any provider."""
    for name in ("API_KEY", "GEMINI_API_KEY", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_questions():
    return [
        {
            "question": f"Question {n}?",
            "options": ["A", "B", "C", "D"],
            "correctAnswer": n % 4,
            "explanation": f"Because {n}.",
        }
        for n in range(1, 5)
    ]


@pytest.fixture
def sample_questions_json(sample_questions):
    """Generated output as the quiz_generation use case returns it."""
    return json.dumps({"questions": sample_questions[:3]})


@pytest.fixture
def quiz_questions(sample_questions):
    return [QuizQuestion.model_validate(q) for q in sample_questions[:3]]
