"""Per-use-case request settings layered over a provider."""

from typing import Dict, Any, List, Optional

from .providers import get_provider_class
from .providers.base import LLMProvider

DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.7

# `response_format` values accepted in llm_config.yaml
RESPONSE_FORMATS = {
    "json": {"type": "json_object"},
    "text": None,
}


class LLMUseCaseHandler:
    """Binds one use case (prompt defaults, output mode) to its provider.

    Args:
        use_case_config: the use case's entry under `use_cases`
        provider_config: the referenced entry under `providers`
    """

    def __init__(self, use_case_config: dict, provider_config: dict):
        self.use_case_config = use_case_config
        self.provider_config = provider_config

        provider_class = get_provider_class(provider_config["type"])
        self.provider: LLMProvider = provider_class(provider_config)
        self.provider.model = self._resolve_model()

    def _resolve_model(self) -> str:
        # A use case names a key of the provider's `models`, or a literal model id
        model_key = self.use_case_config.get("model")
        if not model_key:
            return self.provider.model
        return self.provider_config["models"].get(model_key, model_key)

    def _response_format(self) -> Optional[dict]:
        return RESPONSE_FORMATS.get(self.use_case_config.get("response_format", "text"))

    async def call(self, prompt: str, **kwargs) -> str:
        messages = self._format_messages(prompt, kwargs.pop("system_prompt", None))
        max_tokens = kwargs.pop("max_tokens", self.use_case_config.get("max_tokens", DEFAULT_MAX_TOKENS))
        temperature = kwargs.pop("temperature", self.use_case_config.get("temperature", DEFAULT_TEMPERATURE))
        kwargs.setdefault("response_format", self._response_format())
        return await self.provider.call(messages, max_tokens, temperature, **kwargs)

    def _format_messages(self, prompt: str, system_prompt: str = None) -> List[Dict[str, str]]:
        """System message (override, else the configured one) followed by the prompt."""
        if system_prompt is None:
            system_prompt = self.use_case_config.get("system_prompt")
        messages = [{"role": "system", "content": system_prompt}] if system_prompt else []
        messages.append({"role": "user", "content": prompt})
        return messages

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "use_case": self.use_case_config.get("description", ""),
            "response_format": self.use_case_config.get("response_format", "text"),
            **self.provider.get_metadata(),
        }
