"""Provider interface."""

from abc import ABC, abstractmethod
from typing import Dict, Any, List


class LLMProvider(ABC):
    """A chat-completion backend configured from one `providers` entry.

    Implementations translate SDK failures into `errors.LLMError`
    subclasses so callers only ever handle the project's own exceptions.
    """

    def __init__(self, config: dict):
        self.config = config
        self.model = config.get("models", {}).get("default", "")

    @abstractmethod
    async def call(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float,
        **kwargs
    ) -> str:
        """Return the full completion text for `messages`.

        Args:
            messages: chat messages, each with 'role' and 'content'
            max_tokens: generation limit
            temperature: sampling temperature
            **kwargs: provider options such as response_format
        """

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "provider": self.__class__.__name__,
            "model": self.model,
            "base_url": self.config.get("base_url"),
        }
