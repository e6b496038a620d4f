"""Google Gemini provider (OpenAI-compatible endpoint)."""

from .openai import OpenAIProvider

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class GeminiProvider(OpenAIProvider):
    """Provider for Gemini models through Google's OpenAI-compatible API."""

    default_api_key_env = "API_KEY"

    def __init__(self, config: dict):
        config = {"base_url": GEMINI_OPENAI_BASE_URL, **config}
        super().__init__(config)
