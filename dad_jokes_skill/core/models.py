"""Core data transfer objects shared across layers.

Request and response envelopes are the voice platform's own models
(``ask_sdk_model``); only the skill's domain values live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from dad_jokes_skill.core.config import Settings


@dataclass(frozen=True, slots=True)
class ContentItem:
    """A single post taken from the content feed."""

    title: str
    body: str


@dataclass(frozen=True, slots=True)
class FeedCredentials:
    """Long-lived feed credentials, built once at startup."""

    client_id: str
    client_secret: str = field(repr=False)
    refresh_token: str = field(repr=False)
    user_agent: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeedCredentials":
        """Build credentials from the process configuration."""
        return cls(
            client_id=settings.REDDIT_CLIENT_ID,
            client_secret=settings.REDDIT_CLIENT_SECRET,
            refresh_token=settings.REDDIT_REFRESH_TOKEN,
            user_agent=settings.REDDIT_USER_AGENT,
        )


@dataclass(frozen=True, slots=True)
class SkillOptions:
    """Read-only skill behaviour switches resolved at startup."""

    skill_name: str = "Reddit Dad Jokes"
    category: str = "dadjokes"
    reprompt_enabled: bool = False
    help_intent_name: str = "AMAZON.HelpHandler"
    skill_id: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SkillOptions":
        return cls(
            skill_name=settings.SKILL_NAME,
            category=settings.REDDIT_SUBREDDIT,
            reprompt_enabled=settings.JOKE_REPROMPT_ENABLED,
            help_intent_name=settings.HELP_INTENT_NAME,
            skill_id=settings.ALEXA_SKILL_ID,
        )


__all__ = ["ContentItem", "FeedCredentials", "SkillOptions"]
