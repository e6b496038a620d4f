"""OpenAI provider (and base for OpenAI-compatible endpoints)."""

from typing import List, Dict

from openai import AsyncOpenAI, APIStatusError, OpenAIError

from errors import LLMAPIError, LLMResponseError, MissingCredentialError
from .base import LLMProvider
from ..config import get_api_key


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI's API."""

    default_api_key_env = "OPENAI_API_KEY"

    def __init__(self, config: dict):
        """Initialize OpenAI provider.

        Args:
            config: Provider configuration with api_key_env, base_url, models

        Raises:
            MissingCredentialError: If no API key is configured
        """
        super().__init__(config)

        api_key_name = config.get("api_key_env", self.default_api_key_env)
        api_key = get_api_key(api_key_name, config.get("api_key_fallback_env", []))

        if not api_key:
            raise MissingCredentialError(
                f"API key not found in environment: {api_key_name}",
                env_var=api_key_name,
            )

        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=config.get("base_url"),
            timeout=config.get("timeout", 30),
            max_retries=0,
        )

    async def call(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float,
        **kwargs
    ) -> str:
        """Make completion call to the chat completions API."""
        params = {}
        if kwargs.get("response_format"):
            params["response_format"] = kwargs["response_format"]

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                stream=False,
                **params
            )
        except APIStatusError as e:
            raise LLMAPIError(
                f"{self.__class__.__name__} call failed: {e}",
                provider=self.config.get("type"),
                status_code=e.status_code,
            ) from e
        except OpenAIError as e:
            raise LLMAPIError(
                f"{self.__class__.__name__} call failed: {e}",
                provider=self.config.get("type"),
            ) from e

        if not response.choices or not response.choices[0].message.content:
            raise LLMResponseError("Empty response", raw_response=str(response))
        return response.choices[0].message.content
