"""Ordered view over the registered request handlers."""

from __future__ import annotations

from typing import Iterable, Optional

from ask_sdk_core.dispatch_components import AbstractRequestHandler, AbstractRequestInterceptor
from ask_sdk_core.handler_input import HandlerInput
from ask_sdk_core.utils import get_request_type

from dad_jokes_skill.core.exceptions import UnroutableRequestError
from dad_jokes_skill.core.intents import RequestType
from dad_jokes_skill.core.logging import get_logger

logger = get_logger(__name__)


def _intent_name(handler_input: HandlerInput) -> Optional[str]:
    if get_request_type(handler_input) != RequestType.INTENT.value:
        return None
    return handler_input.request_envelope.request.intent.name


class RequestRouter:
    """Select the first handler, in declared order, that can handle a request.

    The skill builder registers :meth:`handlers` in the same order, so
    :meth:`route` names the handler the dispatcher will run.
    """

    def __init__(self, handlers: Iterable[AbstractRequestHandler] = ()) -> None:
        self._handlers: tuple[AbstractRequestHandler, ...] = tuple(handlers)

    def route(self, handler_input: HandlerInput) -> AbstractRequestHandler:
        """Return the first matching handler or raise ``UnroutableRequestError``."""

        for handler in self._handlers:
            if handler.can_handle(handler_input):
                return handler
        raise UnroutableRequestError(
            f"No handler registered for request type={get_request_type(handler_input)} "
            f"intent={_intent_name(handler_input)}"
        )

    def handlers(self) -> tuple[AbstractRequestHandler, ...]:
        """Return the declared handlers in precedence order."""

        return self._handlers


class RoutingInterceptor(AbstractRequestInterceptor):
    """Log where each request is routed; unroutable requests fail here."""

    def __init__(self, router: RequestRouter) -> None:
        self._router = router

    def process(self, handler_input: HandlerInput) -> None:
        handler = self._router.route(handler_input)
        session = handler_input.request_envelope.session
        logger.info(
            "Routing %s to %s (session=%s)",
            get_request_type(handler_input),
            type(handler).__name__,
            session.session_id if session is not None else "-",
        )


__all__ = ["RequestRouter", "RoutingInterceptor"]
