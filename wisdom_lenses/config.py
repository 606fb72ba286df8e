"""
Wisdom Lenses — Application Configuration

Loads all configuration from environment variables (and an optional .env file)
using Pydantic Settings.  A cached ``get_settings()`` helper is provided so that
FastAPI dependency-injection (and any other call-site) always receives the same
validated instance without re-parsing the environment on every request.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Wisdom Lenses service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Gemini LLM
    # ------------------------------------------------------------------ #
    GEMINI_API_KEY: str
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # Perspective generation defaults
    GEMINI_TEMPERATURE: float = 0.9
    GEMINI_TOP_K: int = 1
    GEMINI_TOP_P: float = 1.0
    GEMINI_MAX_OUTPUT_TOKENS: int = 2048

    # Hexagram recommendation (/analyze) defaults
    ANALYSIS_TEMPERATURE: float = 0.7
    ANALYSIS_MAX_OUTPUT_TOKENS: int = 500

    # Applied to every harm category; passed through to the SDK untouched.
    GEMINI_SAFETY_THRESHOLD: str = "BLOCK_MEDIUM_AND_ABOVE"

    # ------------------------------------------------------------------ #
    # Database
    # ------------------------------------------------------------------ #
    DATABASE_URL: str
    DB_ECHO: bool = False

    # ------------------------------------------------------------------ #
    # Security
    # ------------------------------------------------------------------ #
    MEMO_TOKEN_KEY: str  # Fernet key; memo edit tokens are encrypted at rest

    # ------------------------------------------------------------------ #
    # Request policy
    # ------------------------------------------------------------------ #
    MIN_SITUATION_LENGTH: int = 10
    PERSPECTIVE_DELAY_SECONDS: float = 0.5

    # ------------------------------------------------------------------ #
    # Runtime environment
    # ------------------------------------------------------------------ #
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # ------------------------------------------------------------------ #
    # CORS
    # ------------------------------------------------------------------ #
    ALLOWED_ORIGINS: str = "*"

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list split on commas."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @field_validator("GEMINI_TEMPERATURE", "ANALYSIS_TEMPERATURE")
    @classmethod
    def _temperature_in_range(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError(f"Temperature must be between 0 and 2, got {v}")
        return v

    @field_validator("GEMINI_MAX_OUTPUT_TOKENS", "ANALYSIS_MAX_OUTPUT_TOKENS")
    @classmethod
    def _token_cap_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Token cap must be positive, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime::

        from wisdom_lenses.config import get_settings
        settings = get_settings()
    """
    return Settings()  # type: ignore[call-arg]
