"""Application configuration."""

import os

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_tracker.domain.errors import ConfigurationError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4.1-mini"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    log_level: str = "INFO"
    estimation_timeout_seconds: float = Field(default=15.0, gt=0)
    estimation_retry_attempts: int = Field(default=1, ge=0)
    estimation_retry_delay_seconds: float = Field(default=0.3, ge=0)
    daily_calorie_goal: int = Field(default=2000, ge=0)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("openai_api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned


def load_settings() -> Settings:
    """Load settings from the environment, failing fast on missing values."""
    try:
        return Settings()
    except ValidationError as exc:
        names = sorted(
            {str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]}
        )
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(names) or 'unknown'}. "
            "Set these variables in the environment or a .env file."
        ) from exc
