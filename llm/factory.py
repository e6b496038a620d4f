"""Factory for creating use case handlers."""

from .handlers import LLMUseCaseHandler
from .config import get_provider_config, get_use_case_config


def create_handler(use_case_name: str) -> LLMUseCaseHandler:
    """Create the handler for a use case.

    This factory function:
    1. Loads configuration
    2. Looks up the use case and the provider it references
    3. Creates and returns the handler

    Args:
        use_case_name: Name of the use case from config

    Returns:
        LLMUseCaseHandler instance

    Raises:
        ConfigurationError: If use case or provider doesn't exist
        MissingCredentialError: If the provider's API key is not set
    """
    use_case_config = get_use_case_config(use_case_name)
    provider_config = get_provider_config(use_case_config["provider"])
    return LLMUseCaseHandler(use_case_config, provider_config)
