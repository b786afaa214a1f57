"""Configuration management for the DeepSeek adapter."""

import os
from typing import Any

import yaml
from dotenv import load_dotenv

from .http_client import HttpConfig, create_http_config_from_dict
from .llm.client import DeepSeekSettings

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


class Configuration:
    """Manages configuration and environment variables for the adapter."""

    def __init__(self, config_path: str | None = None) -> None:
        """Initialize configuration from YAML and environment variables."""
        self.load_env()  # Load .env for API keys
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._config = self._load_yaml_config()

    @staticmethod
    def load_env() -> None:
        """Load environment variables from .env file."""
        load_dotenv()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load configuration from YAML file."""
        with open(self.config_path) as file:
            return yaml.safe_load(file) or {}

    @property
    def active_provider(self) -> str:
        return self._config.get("llm", {}).get("active", "deepseek")

    @property
    def llm_api_key(self) -> str:
        """Get the API key for the active LLM provider.

        Returns:
            The API key as a string.

        Raises:
            ValueError: If the API key is not found in environment variables.
        """
        active_provider = self.active_provider

        provider_key_map = {
            "deepseek": "DEEPSEEK_API_KEY",
        }

        env_key = provider_key_map.get(active_provider)
        if not env_key:
            raise ValueError(
                f"Unknown provider '{active_provider}' - no API key mapping found"
            )

        api_key = os.getenv(env_key)
        if not api_key:
            raise ValueError(
                f"API key '{env_key}' not found in environment variables "
                f"for provider '{active_provider}'"
            )

        return api_key

    def get_config_dict(self) -> dict[str, Any]:
        """Get the full configuration dictionary."""
        return self._config

    def get_llm_config(self) -> dict[str, Any]:
        """Get active LLM provider configuration from YAML.

        Returns:
            Active LLM provider configuration dictionary.
        """
        providers = self._config.get("llm", {}).get("providers", {})

        if self.active_provider not in providers:
            raise ValueError(
                f"Active provider '{self.active_provider}' not found in "
                "providers config"
            )

        return providers[self.active_provider]

    def get_http_config(self) -> HttpConfig:
        """Get HTTP client settings from the ``http`` section."""
        return create_http_config_from_dict(self._config)

    def get_logging_config(self) -> dict[str, Any]:
        """Get logging configuration from YAML.

        Returns:
            Logging configuration dictionary.
        """
        return self._config.get("logging", {})

    def deepseek_settings(self) -> DeepSeekSettings:
        """Build validated client settings for the active provider."""
        return DeepSeekSettings.from_dict(
            self.get_llm_config(),
            api_key=self.llm_api_key,
            http=self.get_http_config(),
        )
