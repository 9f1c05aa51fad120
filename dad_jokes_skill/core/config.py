"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    REDDIT_CLIENT_ID: str = Field(...)
    REDDIT_CLIENT_SECRET: str = Field(...)
    REDDIT_REFRESH_TOKEN: str = Field(...)
    REDDIT_USER_AGENT: str = Field(default="App for /r/dadjokes Alexa skill.")
    REDDIT_SUBREDDIT: str = Field(default="dadjokes")
    REDDIT_LISTING_LIMIT: int = Field(default=25)
    REDDIT_TIMEOUT_SECONDS: float = Field(default=10.0)

    SKILL_NAME: str = Field(default="Reddit Dad Jokes")
    JOKE_REPROMPT_ENABLED: bool = Field(default=False)
    # Matched literally. The platform built-in help intent is AMAZON.HelpIntent.
    HELP_INTENT_NAME: str = Field(default="AMAZON.HelpHandler")
    ALEXA_SKILL_ID: str | None = Field(default=None)
    ALEXA_VERIFY_SIGNATURE: bool = Field(default=True)
    ALEXA_VERIFY_TIMESTAMP: bool = Field(default=True)

    DAD_JOKES_LOG_LEVEL: str = Field(default="info")
    DAD_JOKES_LOG_DIR: Path | None = Field(default=None)
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_HEALTHCHECK_AUTH: bool = Field(default=False)


settings = Settings()  # type: ignore[call-arg]
config = settings  # Alias matching the rest of the codebase


__all__ = ["Settings", "settings", "config"]
