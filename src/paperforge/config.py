"""Application configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """paperforge settings.

    Loaded from environment variables or a .env file.
    """

    # --- Provider ---
    PROVIDER: str = "gemini"
    MODEL: str = ""  # empty means the provider's default model
    MAX_TOKENS: int = 8192

    # --- Retry ---
    MAX_ATTEMPTS: int = Field(5, ge=1)
    RETRY_BASE_DELAY: float = 2.0  # seconds, doubled after each retry

    # --- Pipeline ---
    CHAPTER_PAUSE: float = 1.0
    WORDS_PER_PAGE: int = 450

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton."""
    return Settings()
