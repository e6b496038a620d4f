"""
Tests for custom error classes and error handling.
"""
import pytest
from errors import (
    ConfigurationError,
    LLMAPIError,
    LLMError,
    LLMResponseError,
    MissingCredentialError,
    ProteinMasterError,
    get_user_friendly_message
)


def test_llm_api_error():
    """Test LLMAPIError creation and attributes."""
    error = LLMAPIError("API call failed", provider="gemini", status_code=500)

    assert str(error) == "API call failed"
    assert error.provider == "gemini"
    assert error.status_code == 500


def test_llm_response_error_keeps_raw_text():
    error = LLMResponseError("Response is not JSON", raw_response="not json")

    assert error.raw_response == "not json"


def test_missing_credential_error():
    error = MissingCredentialError("API key not found", env_var="API_KEY")

    assert error.env_var == "API_KEY"


@pytest.mark.parametrize("error_class", [LLMAPIError, LLMResponseError, MissingCredentialError])
def test_llm_errors_share_base(error_class):
    """The quiz and tutor services catch everything through the base classes."""
    assert issubclass(error_class, LLMError)
    assert issubclass(error_class, ProteinMasterError)


def test_configuration_error_is_not_an_llm_error():
    assert issubclass(ConfigurationError, ProteinMasterError)
    assert not issubclass(ConfigurationError, LLMError)


def test_get_user_friendly_message_llm_error():
    """Test user-friendly message for LLM errors."""
    error = LLMAPIError("Connection timeout", provider="gemini")
    message = get_user_friendly_message(error)

    assert "AI Service Issue" in message
    assert "temporarily unavailable" in message.lower()
    assert "Connection timeout" in message


def test_get_user_friendly_message_missing_key():
    error = MissingCredentialError("API key not found", env_var="API_KEY")
    message = get_user_friendly_message(error)

    assert "AI Features Disabled" in message
    assert "API_KEY" in message


def test_get_user_friendly_message_missing_key_without_name():
    message = get_user_friendly_message(MissingCredentialError("no key"))

    assert "the environment" in message


def test_get_user_friendly_message_config_error():
    message = get_user_friendly_message(ConfigurationError("Config must have 'providers' section"))

    assert "Configuration Problem" in message
    assert "providers" in message


def test_get_user_friendly_message_generic_error():
    """Test user-friendly message for generic errors."""
    error = ValueError("Some random error")
    message = get_user_friendly_message(error)

    assert "An Error Occurred" in message
    assert "Some random error" in message
