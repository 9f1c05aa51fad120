"""Application service layer for answering skill requests."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from dad_jokes_skill.core.models import SkillOptions
from dad_jokes_skill.core.ports import FeedPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .jokes import JokeService
    from .request_router import RequestRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    options: SkillOptions = field(default_factory=SkillOptions)
    jokes: Optional["JokeService"] = None
    request_router: Optional["RequestRouter"] = None


def build_default_services(
    *,
    feed_port: Optional[FeedPort] = None,
    options: Optional[SkillOptions] = None,
    rng: Optional[random.Random] = None,
) -> ServiceContainer:
    """Return a service container with the default request handlers wired in."""

    # pylint: disable=import-outside-toplevel
    from .handlers import build_request_handlers
    from .jokes import JokeService
    from .request_router import RequestRouter

    resolved = options or SkillOptions()
    jokes = (
        JokeService(feed_port, category=resolved.category, rng=rng)
        if feed_port is not None
        else None
    )
    return ServiceContainer(
        options=resolved,
        jokes=jokes,
        request_router=RequestRouter(build_request_handlers(resolved, jokes)),
    )


__all__ = ["ServiceContainer", "build_default_services"]
