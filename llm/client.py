"""Entry point for text generation: one client, named use cases."""

import time
from typing import Dict, Any

from logging_config import get_logger, log_with_context
from .factory import create_handler
from .handlers import LLMUseCaseHandler

logger = get_logger(__name__)


class LLMClient:
    """Dispatches prompts to the handler configured for each use case.

    Handlers (and with them the provider SDK clients) are built on first use
    and reused afterwards. Credentials are therefore checked lazily: a client
    can be created without any API key, and the first call raises
    `MissingCredentialError` instead.

    Example:
        >>> llm = LLMClient()
        >>> answer = await llm.call(
        ...     prompt="What is a peptide bond?",
        ...     use_case="tutor_explanation"
        ... )
    """

    def __init__(self):
        self._handlers: Dict[str, LLMUseCaseHandler] = {}

    def _get_handler(self, use_case: str) -> LLMUseCaseHandler:
        handler = self._handlers.get(use_case)
        if handler is None:
            handler = create_handler(use_case)
            self._handlers[use_case] = handler
        return handler

    async def call(self, prompt: str, use_case: str, **kwargs) -> str:
        """Generate a completion for `prompt` using `use_case` settings.

        Keyword overrides: max_tokens, temperature, system_prompt,
        response_format.

        Raises:
            ConfigurationError, MissingCredentialError, LLMAPIError,
            LLMResponseError
        """
        handler = self._get_handler(use_case)
        started = time.monotonic()
        output = await handler.call(prompt, **kwargs)
        log_with_context(logger, "debug", "LLM call finished", use_case=use_case,
                         seconds=f"{time.monotonic() - started:.2f}", chars=len(output))
        return output

    def get_use_case_info(self, use_case: str) -> Dict[str, Any]:
        """Provider, model and endpoint behind `use_case`."""
        return self._get_handler(use_case).get_metadata()

    def clear_cache(self):
        """Drop cached handlers so the next call re-reads configuration and keys."""
        self._handlers.clear()


def create_client() -> LLMClient:
    return LLMClient()
