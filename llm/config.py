"""Configuration loader for LLM module."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Iterable, Optional
from dotenv import load_dotenv

from errors import ConfigurationError

# Load environment variables once when module is imported
load_dotenv()

_CONFIG_CACHE = None
_API_KEY_CACHE: Dict[str, Optional[str]] = {}


def load_config(config_path: str = None, force_reload: bool = False) -> Dict[str, Any]:
    """Load LLM configuration from YAML file.

    Args:
        config_path: Path to config file (defaults to $LLM_CONFIG_PATH, then
            llm_config.yaml in the project root)
        force_reload: Force reload config even if cached

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If config file is missing, not valid YAML or
            structurally invalid
    """
    global _CONFIG_CACHE

    # Return cached config if available
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    # Determine config file path
    if config_path is None:
        config_path = os.getenv("LLM_CONFIG_PATH") or Path(__file__).parent.parent / "llm_config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(
            f"Config file not found: {config_path}\n"
            f"Create llm_config.yaml in the project root or set LLM_CONFIG_PATH"
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    _check_shape(config)

    # Apply environment variable overrides
    config = _apply_env_overrides(config)

    # Validate config structure
    _validate_config(config)

    # Cache and return
    _CONFIG_CACHE = config
    return config


def _check_shape(config: Dict[str, Any]):
    """Sections and their entries must be mappings before anything reads them.

    Raises:
        ConfigurationError: If a section or entry is null or not a mapping
    """
    for section in ("providers", "use_cases"):
        if section not in config:
            raise ConfigurationError(f"Config must have '{section}' section")
        entries = config[section]
        if not isinstance(entries, dict):
            raise ConfigurationError(f"'{section}' must be a mapping, got {type(entries).__name__}")
        for name, entry in entries.items():
            if not isinstance(entry, dict):
                raise ConfigurationError(f"'{section}.{name}' must be a mapping, got {type(entry).__name__}")

    for name, provider_config in config["providers"].items():
        models = provider_config.get("models")
        if models is not None and not isinstance(models, dict):
            raise ConfigurationError(f"'providers.{name}.models' must be a mapping")

    defaults = config.get("defaults")
    if defaults is None:
        config["defaults"] = {}
    elif not isinstance(defaults, dict):
        raise ConfigurationError(f"'defaults' must be a mapping, got {type(defaults).__name__}")


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to config.

    Environment variables:
        LLM_DEFAULT_PROVIDER: Provider for use cases that don't name one
        LLM_<USE_CASE>_MODEL: Override model for a specific use case

    Args:
        config: Base configuration

    Returns:
        Configuration with environment overrides applied
    """
    default_provider = os.getenv("LLM_DEFAULT_PROVIDER")
    if default_provider:
        config.setdefault("defaults", {})["provider"] = default_provider

    default = config["defaults"].get("provider")
    for use_case_name, use_case_config in config["use_cases"].items():
        if "provider" not in use_case_config and default:
            use_case_config["provider"] = default

        override = os.getenv(f"LLM_{use_case_name.upper()}_MODEL")
        if override:
            use_case_config["model"] = override

    return config


def _validate_config(config: Dict[str, Any]):
    """Validate configuration structure.

    Args:
        config: Configuration to validate

    Raises:
        ConfigurationError: If configuration is invalid
    """
    for provider_name, provider_config in config["providers"].items():
        if "type" not in provider_config:
            raise ConfigurationError(f"Provider '{provider_name}' must have 'type' field")
        if "models" not in provider_config:
            raise ConfigurationError(f"Provider '{provider_name}' must have 'models' section")

    for use_case_name, use_case_config in config["use_cases"].items():
        if "provider" not in use_case_config:
            raise ConfigurationError(f"Use case '{use_case_name}' must have 'provider' field")
        provider = use_case_config["provider"]
        if provider not in config["providers"]:
            raise ConfigurationError(
                f"Use case '{use_case_name}' references unknown provider '{provider}'"
            )


def _lookup(section: str, name: str, kind: str) -> Dict[str, Any]:
    entries = load_config()[section]
    if name not in entries:
        raise ConfigurationError(
            f"Unknown {kind}: '{name}'. Available: {sorted(entries)}"
        )
    return entries[name]


def get_use_case_config(use_case_name: str) -> Dict[str, Any]:
    """Settings of one entry under `use_cases`.

    Raises:
        ConfigurationError: If the use case doesn't exist
    """
    return _lookup("use_cases", use_case_name, "use case")


def get_provider_config(provider_name: str) -> Dict[str, Any]:
    """Settings of one entry under `providers`.

    Raises:
        ConfigurationError: If the provider doesn't exist
    """
    return _lookup("providers", provider_name, "provider")


def get_api_key(env_var: str, fallbacks: Iterable[str] = ()) -> Optional[str]:
    """Read an API key from the environment, once per name.

    The first non-empty value among `env_var` and `fallbacks` wins. A missing
    key is remembered as None; callers degrade to static content.
    """
    if env_var not in _API_KEY_CACHE:
        value = None
        for name in (env_var, *fallbacks):
            value = os.getenv(name) or None
            if value:
                break
        _API_KEY_CACHE[env_var] = value
    return _API_KEY_CACHE[env_var]


def clear_api_key_cache():
    """Forget cached API keys (tests, or after editing .env)."""
    _API_KEY_CACHE.clear()
