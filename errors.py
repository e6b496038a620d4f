"""
Custom exception classes for ProteinMaster.

Only the AI-backed features raise these; every raise site is caught by the
quiz/tutor service and turned into static fallback content, so none of them
reaches the learner as a hard failure.
"""


class ProteinMasterError(Exception):
    """Base exception for all ProteinMaster errors."""
    pass


class LLMError(ProteinMasterError):
    """Base exception for LLM-related errors."""
    pass


class LLMAPIError(LLMError):
    """Raised when LLM API call fails."""
    def __init__(self, message, provider=None, status_code=None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(message)


class LLMResponseError(LLMError):
    """Raised when LLM response is empty or cannot be parsed."""
    def __init__(self, message, raw_response=None):
        self.raw_response = raw_response
        super().__init__(message)


class MissingCredentialError(LLMError):
    """Raised when the API key for a provider is not configured."""
    def __init__(self, message, env_var=None):
        self.env_var = env_var
        super().__init__(message)


class ConfigurationError(ProteinMasterError):
    """Raised when configuration is invalid or missing."""
    pass


# User-friendly error messages mapping
USER_FRIENDLY_MESSAGES = {
    LLMAPIError: (
        "⚠️  AI Service Issue\n"
        "The AI tutor is temporarily unavailable, so built-in content is shown instead.\n\n"
        "Technical details: {error}"
    ),
    LLMResponseError: (
        "🧪 Unexpected AI Response\n"
        "The generated content could not be understood, so built-in questions are used.\n\n"
        "Technical details: {error}"
    ),
    MissingCredentialError: (
        "🔑 AI Features Disabled\n"
        "No API key was found in {env_var}. The simulations work normally; "
        "quiz and tutor use built-in content."
    ),
    ConfigurationError: (
        "⚙️  Configuration Problem\n"
        "Please check llm_config.yaml.\n\n"
        "Technical details: {error}"
    ),
}


def get_user_friendly_message(error: Exception) -> str:
    """
    Get a user-friendly error message for an exception.

    Args:
        error: Exception instance

    Returns:
        str: User-friendly error message
    """
    error_type = type(error)
    template = USER_FRIENDLY_MESSAGES.get(error_type)

    if not template:
        # Generic message for unknown errors
        return (
            f"❌ An Error Occurred\n"
            f"{str(error)}\n\n"
            f"Please try again or reload the page."
        )

    # Format template with error attributes
    try:
        return template.format(
            error=str(error),
            **{k: v for k, v in vars(error).items() if isinstance(v, (str, int, float))}
        )
    except (KeyError, AttributeError):
        return template.format(error=str(error), env_var="the environment")
