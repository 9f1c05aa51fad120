"""Joke fetching: pick one post from the feed and shape it for speech."""

from __future__ import annotations

import math
import random
import re
from typing import Optional, Sequence

from dad_jokes_skill.core.exceptions import EmptyListingError
from dad_jokes_skill.core.logging import get_logger
from dad_jokes_skill.core.models import ContentItem
from dad_jokes_skill.core.ports import FeedPort

logger = get_logger(__name__)

_TERMINAL_PUNCTUATION = re.compile(r"[.!?,;:]$")


def pick_index(length: int, rng: Optional[random.Random] = None) -> int:
    """Return an index drawn uniformly from ``[0, length)``.

    Uses ``floor(random() * length)``; rounding instead of flooring would
    under-weight both ends of the range.
    """
    if length <= 0:
        raise EmptyListingError("Cannot select an item from an empty listing")
    source = rng if rng is not None else random
    return math.floor(source.random() * length)


def format_joke(item: ContentItem) -> str:
    """Join title and body into one spoken line, punctuating the title if needed."""
    title = item.title.strip()
    if not _TERMINAL_PUNCTUATION.search(title):
        title += "."
    body = item.body.strip()
    if not body:
        return title
    return f"{title} {body}"


class JokeService:
    """Fetch a fresh joke from one category of the content feed."""

    def __init__(
        self,
        feed: FeedPort,
        *,
        category: str,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._feed = feed
        self._category = category
        self._rng = rng

    @property
    def category(self) -> str:
        return self._category

    async def fetch_joke(self) -> str:
        """Return one formatted joke; raises ``FeedUnavailableError`` or ``EmptyListingError``."""
        listing: Sequence[ContentItem] = await self._feed.get_hot_listing(self._category)
        index = pick_index(len(listing), self._rng)
        logger.debug("Selected item %d of %d from %s", index, len(listing), self._category)
        return format_joke(listing[index])


__all__ = ["JokeService", "pick_index", "format_joke"]
