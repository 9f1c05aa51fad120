"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from dad_jokes_skill.apps.api.middleware import CorrelationIdMiddleware
from dad_jokes_skill.core.config import config
from dad_jokes_skill.core.logging import get_logger
from dad_jokes_skill.services import ServiceContainer, runtime
from dad_jokes_skill.services.skill import build_webservice_handler

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the app's service container for non-HTTP callers at startup."""
    logger.info("Initializing dad jokes skill...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
    logger.info("skill ready.")
    yield


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan)
    app.state.services = services
    app.state.skill_handler = build_webservice_handler(
        services,
        verify_signature=config.ALEXA_VERIFY_SIGNATURE,
        verify_timestamp=config.ALEXA_VERIFY_TIMESTAMP,
    )
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import alexa, health  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(alexa.router)
    return app


__all__ = ["create_app", "lifespan"]
