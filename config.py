"""
Configuration settings for the BCA study assistant.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # AI Integration (Gemini)
    # ========================================
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
        description="Google Generative AI (Gemini) API key",
    )
    ai_model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model used for every request kind",
    )

    # ========================================
    # Generation Batches
    # ========================================
    flashcard_count: int = Field(
        default=10,
        ge=1,
        description="Flashcards requested per batch",
    )
    quiz_question_count: int = Field(
        default=5,
        ge=1,
        description="Questions requested per quiz",
    )
    notes_prefix_limit: int = Field(
        default=5000,
        ge=0,
        description="Maximum characters of notes sent with a flashcard request",
    )

    # ========================================
    # Session Defaults
    # ========================================
    default_online: bool = Field(
        default=False,
        description="Start sessions with web search enabled",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # API Server
    # ========================================
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    api_port: int = Field(
        default=8100,
        description="API server port",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def has_ai_configured(self) -> bool:
        """Check if the Gemini credential is present."""
        return bool(self.gemini_api_key)

    def get_generation_config(self) -> dict[str, int | str]:
        """Get generation settings as a dictionary."""
        return {
            "model": self.ai_model,
            "flashcard_count": self.flashcard_count,
            "quiz_question_count": self.quiz_question_count,
            "notes_prefix_limit": self.notes_prefix_limit,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
