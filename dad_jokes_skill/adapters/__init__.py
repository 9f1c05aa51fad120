"""Infrastructure adapter exports."""

from .reddit import RedditFeedAdapter

__all__ = ["RedditFeedAdapter"]
