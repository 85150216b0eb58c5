"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for endpoint URLs,
localization defaults and presentation limits.

Configuration can be overridden via environment variables:
- CF_API_TIMEOUT_SECONDS=5
- CF_L10N_DEFAULT_LANGUAGE=ru
- CF_PRESENTATION_MAX_RESULTS=3
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiConfig(BaseSettings):
    """Third-party endpoint configuration.

    Environment variables prefixed with CF_API_.
    """

    model_config = SettingsConfigDict(env_prefix="CF_API_")

    airport_suggest_url: str = "https://www.travelpayouts.com/widgets_suggest_params"
    fare_calendar_url: str = "http://min-prices.aviasales.ru/calendar_preload"
    currency_url: str = "http://free.currencyconverterapi.com/api/v5/convert"
    currency_pair: str = "RUB_EUR"
    sparql_url: str = "https://query.wikidata.org/sparql"
    translate_url: str = "https://translate.googleapis.com/translate_a/single"
    deep_link_prefix: str = "aviasales.ru/search/"
    default_link: str = "aviasales.ru"
    user_agent: str = "cheap-flights-bot"
    timeout_seconds: float = 10.0


class LocalizationConfig(BaseSettings):
    """Language detection and translation configuration.

    Environment variables prefixed with CF_L10N_.
    """

    model_config = SettingsConfigDict(env_prefix="CF_L10N_")

    supported_languages: List[str] = Field(default_factory=lambda: ["en", "ru"])
    default_language: str = "en"
    min_confidence: float = 0.5
    # Language the airport suggestion endpoint understands best
    suggest_language: str = "ru"
    translate_cities: bool = True


class PresentationConfig(BaseSettings):
    """Reply formatting configuration.

    Environment variables prefixed with CF_PRESENTATION_.
    """

    model_config = SettingsConfigDict(env_prefix="CF_PRESENTATION_")

    max_results: int = 5


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.api.fare_calendar_url)
        print(config.presentation.max_results)

    Environment variables prefixed with CF_.
    """

    model_config = SettingsConfigDict(env_prefix="CF_")

    api: ApiConfig = Field(default_factory=ApiConfig)
    localization: LocalizationConfig = Field(default_factory=LocalizationConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
