"""API factory entrypoint wiring the Reddit feed to the FastAPI app."""

from __future__ import annotations

from dad_jokes_skill.apps.api.app import create_app as _create_app
from dad_jokes_skill.bootstrap import build_default_service_container


def create_app():  # noqa: D401 - FastAPI factory signature
    """Return a FastAPI app configured with the default service container."""

    return _create_app(build_default_service_container())


__all__ = ["create_app"]
