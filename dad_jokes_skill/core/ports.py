"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol, Sequence

from dad_jokes_skill.core.models import ContentItem


class FeedPort(Protocol):
    """Port exposing read access to the content feed."""

    async def get_hot_listing(self, category: str) -> Sequence[ContentItem]:
        """Return the currently popular items for ``category``, in feed order."""
        ...


__all__ = ["FeedPort"]
