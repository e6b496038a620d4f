"""Text generation for the quiz and the AI tutor.

    >>> from llm import LLMClient
    >>> answer = await LLMClient().call(
    ...     prompt="Why does heat denature hemoglobin?",
    ...     use_case="tutor_explanation"
    ... )

Providers and use cases live in llm_config.yaml (or $LLM_CONFIG_PATH); API
keys come from the environment, with a .env file loaded first. Additional
backends can be plugged in with `register_provider(name, cls)`.
"""

from .client import LLMClient, create_client
from .config import (
    load_config,
    get_use_case_config,
    get_provider_config,
    get_api_key,
    clear_api_key_cache,
)
from .providers import (
    LLMProvider,
    register_provider,
    get_provider_class,
    PROVIDER_REGISTRY,
)

__version__ = "1.0.0"

__all__ = [
    "LLMClient",
    "create_client",
    "load_config",
    "get_use_case_config",
    "get_provider_config",
    "get_api_key",
    "clear_api_key_cache",
    "LLMProvider",
    "register_provider",
    "get_provider_class",
    "PROVIDER_REGISTRY",
]
