"""Centralized configuration using Pydantic Settings.

Every setting has a default except the API key, and all of them can be
overridden via environment variables:
- W3W_API_KEY=...
- W3W_API_BASE_URL=https://enterprise.example.com
- W3W_API_HEADERS='{"X-Correlation-Id": "abc"}'
- W3W_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.what3words.com"


class ApiConfig(BaseSettings):
    """Remote API configuration.

    Environment variables prefixed with W3W_API_.
    """

    model_config = SettingsConfigDict(env_prefix="W3W_API_")

    key: str = ""
    base_url: str = DEFAULT_BASE_URL
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout_seconds: float = 10.0
    max_retries: int = 2
    backoff_factor: float = 0.5


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with W3W_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="W3W_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.api.base_url)
    """

    model_config = SettingsConfigDict(env_prefix="W3W_")

    api: ApiConfig = Field(default_factory=ApiConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging level and format to the root logger."""
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.WARNING),
        format=config.format,
    )
