"""
Application configuration using Pydantic Settings.
Loads from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Drip Agent"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # API
    api_v1_prefix: str = "/api/v1"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # LLM Providers
    fireworks_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Default LLM Provider: "fireworks", "openai", or "anthropic"
    default_llm_provider: str = "fireworks"

    # Fireworks speaks the OpenAI wire format
    fireworks_base_url: str = "https://api.fireworks.ai/inference/v1"
    fireworks_model_primary: str = "accounts/fireworks/models/llama-v3p3-70b-instruct"
    openai_model_primary: str = "gpt-4o"
    anthropic_model_primary: str = "claude-3-5-sonnet-20241022"

    # LLM Settings
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000
    llm_timeout: int = 60
    llm_max_retries: int = 3

    # Job / Lookbook storage: "memory" or "redis"
    store_backend: Literal["memory", "redis"] = "memory"
    redis_url: RedisDsn = Field(default="redis://localhost:6379/0")
    redis_job_ttl: int = 86400  # 1 day
    redis_lookbook_ttl: int = 30 * 86400  # 30 days

    # Profile scraping (Apify Twitter scraper actor)
    apify_api_token: str = ""
    apify_base_url: str = "https://api.apify.com/v2"
    apify_actor: str = "quacker~twitter-scraper"
    apify_tweets_desired: int = 30
    apify_timeout: int = 60

    # Weather (OpenWeather)
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org"
    weather_timeout: float = 10.0

    # Product matching
    free_tier_size: int = 3
    max_candidates: int = 10

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
