"""
Application configuration via environment variables.

Uses Pydantic BaseSettings to load and validate all config from env vars
or a .env.local file. Every setting has a sensible default for local
development, so the deterministic engine works with no configuration at all
and the LLM collaborator only switches on once an API key is present.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment selector."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Central configuration for the ARMi NLU package.

    Values are loaded from environment variables first, falling back
    to a `.env.local` file in the project root. Secrets should NEVER
    be committed.
    """

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Environment ──────────────────────────────────────────────
    environment: Environment = Environment.DEVELOPMENT

    # ── LLM Collaborator ─────────────────────────────────────────
    openai_api_key: str = Field(default="", description="OpenAI API key for the LLM collaborator")
    openai_model: str = Field(default="gpt-4o", description="Chat model used for intent understanding")
    openai_base_url: str = Field(default="https://api.openai.com/v1", description="OpenAI-compatible API root")
    llm_timeout_seconds: float = Field(default=30.0, ge=1.0, le=120.0, description="HTTP timeout per LLM call")
    llm_temperature: float = Field(default=0.1, ge=0.0, le=2.0, description="Sampling temperature")

    # ── Feature Flags ────────────────────────────────────────────
    feature_llm_enabled: bool = Field(default=True, description="Try the LLM before the rule-based fallback")

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Root log level")

    # ── Derived helpers ──────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def llm_configured(self) -> bool:
        """True when the LLM is enabled and the key looks like a real OpenAI key."""
        return self.feature_llm_enabled and self.openai_api_key.startswith("sk-")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return cached Settings instance.

    Using lru_cache ensures we read env vars exactly once, and every
    module that calls ``get_settings()`` gets the same object.
    """
    return Settings()
