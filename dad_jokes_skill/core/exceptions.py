"""Core exception types shared across layers."""


class SkillError(Exception):
    """Base error for failures raised while answering a skill request."""


class FeedUnavailableError(SkillError):
    """Raised when the content feed cannot be reached or rejects our credentials."""


class EmptyListingError(SkillError):
    """Raised when the content feed returns a listing with no items."""


class UnroutableRequestError(SkillError):
    """Raised when no handler entry matches an inbound request."""


__all__ = [
    "SkillError",
    "FeedUnavailableError",
    "EmptyListingError",
    "UnroutableRequestError",
]
