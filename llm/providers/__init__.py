"""Provider classes, looked up by the `type` field of a provider entry."""

from typing import Dict, Type

from errors import ConfigurationError
from .base import LLMProvider
from .openai import OpenAIProvider
from .gemini import GeminiProvider

PROVIDER_REGISTRY: Dict[str, Type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
}


def register_provider(name: str, provider_class: Type[LLMProvider]):
    """Make `provider_class` available as `type: <name>` in llm_config.yaml."""
    if not issubclass(provider_class, LLMProvider):
        raise TypeError(f"{provider_class} must inherit from LLMProvider")
    PROVIDER_REGISTRY[name] = provider_class


def get_provider_class(provider_type: str) -> Type[LLMProvider]:
    """
    Raises:
        ConfigurationError: if no provider is registered under `provider_type`
    """
    try:
        return PROVIDER_REGISTRY[provider_type]
    except KeyError:
        raise ConfigurationError(
            f"Unknown provider type: '{provider_type}'. "
            f"Available providers: {sorted(PROVIDER_REGISTRY)}"
        ) from None


__all__ = [
    "LLMProvider",
    "OpenAIProvider",
    "GeminiProvider",
    "PROVIDER_REGISTRY",
    "register_provider",
    "get_provider_class",
]
