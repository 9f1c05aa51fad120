"""Skill assembly: handlers, routing, and error handling on the SDK builder."""

from __future__ import annotations

from ask_sdk_core.skill_builder import SkillBuilder
from ask_sdk_webservice_support.webservice_handler import WebserviceSkillHandler

from dad_jokes_skill.core.logging import get_logger

from . import ServiceContainer
from .handlers import ErrorHandler
from .request_router import RoutingInterceptor

logger = get_logger(__name__)


def build_skill_builder(services: ServiceContainer) -> SkillBuilder:
    """Register the container's handlers, in order, on a fresh skill builder.

    Any exception raised while routing or running a handler is answered by
    :class:`ErrorHandler`.
    """
    router = services.request_router
    if router is None:
        raise RuntimeError("RequestRouter has not been configured.")

    sb = SkillBuilder()
    sb.skill_id = services.options.skill_id
    # Registration order is precedence order.
    for handler in router.handlers():
        sb.add_request_handler(handler)
    sb.add_global_request_interceptor(RoutingInterceptor(router))
    sb.add_exception_handler(ErrorHandler())
    return sb


def build_webservice_handler(
    services: ServiceContainer,
    *,
    verify_signature: bool = True,
    verify_timestamp: bool = True,
) -> WebserviceSkillHandler:
    """Wrap the skill for HTTPS hosting with request verification."""
    if not (verify_signature and verify_timestamp):
        logger.warning(
            "Skill request verification relaxed (signature=%s, timestamp=%s)",
            verify_signature,
            verify_timestamp,
        )
    return WebserviceSkillHandler(
        skill=build_skill_builder(services).create(),
        verify_signature=verify_signature,
        verify_timestamp=verify_timestamp,
    )


__all__ = ["build_skill_builder", "build_webservice_handler"]
