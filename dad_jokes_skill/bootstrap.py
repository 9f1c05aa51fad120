"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from dad_jokes_skill.adapters.reddit import RedditFeedAdapter
from dad_jokes_skill.core.config import Settings, settings
from dad_jokes_skill.core.models import FeedCredentials, SkillOptions
from dad_jokes_skill.services import ServiceContainer, build_default_services


def build_default_service_container(config: Settings = settings) -> ServiceContainer:
    """Return the default service container wired to the Reddit feed."""

    feed = RedditFeedAdapter(
        FeedCredentials.from_settings(config),
        limit=config.REDDIT_LISTING_LIMIT,
        timeout=config.REDDIT_TIMEOUT_SECONDS,
    )
    return build_default_services(
        feed_port=feed,
        options=SkillOptions.from_settings(config),
    )


__all__ = ["build_default_service_container"]
