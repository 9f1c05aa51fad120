"""Request handlers and the catch-all exception handler.

Handlers are declared in precedence order:

1. :class:`GetJokeHandler`: launch requests, ``GetJokeIntent``, and
   ``AMAZON.YesIntent`` when the reprompt variant is enabled.
2. :class:`HelpHandler`: the configured help intent name.
3. :class:`CancelOrStopHandler`: cancel, stop, and no intents; answered silently.
4. :class:`SessionEndedHandler`: logs the termination reason; answered silently.

Anything else is unroutable and ends up with :class:`ErrorHandler`, which
accepts every exception.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

from ask_sdk_core.dispatch_components import AbstractExceptionHandler, AbstractRequestHandler
from ask_sdk_core.handler_input import HandlerInput
from ask_sdk_core.utils import is_intent_name, is_request_type
from ask_sdk_model import Response
from ask_sdk_model.ui import SimpleCard

from dad_jokes_skill.core.intents import CANCEL_INTENTS, IntentName, RequestType
from dad_jokes_skill.core.logging import get_logger
from dad_jokes_skill.core.models import SkillOptions
from dad_jokes_skill.services.speech import pause, to_ssml_text

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .jokes import JokeService

logger = get_logger(__name__)

HELP_TEXT = "To hear a joke, ask reddit Dad Jokes for a joke."
REPROMPT_TEXT = "Would you like to hear another joke?"
ERROR_JOKE = "I applied to be a server years ago. To this day, I'm still waiting."


class GetJokeHandler(AbstractRequestHandler):
    """Fetch a joke, speak it, and show it on a card."""

    def __init__(self, jokes: Optional["JokeService"], options: SkillOptions) -> None:
        self._jokes = jokes
        self._options = options
        self._intent_names = [IntentName.GET_JOKE.value]
        if options.reprompt_enabled:
            self._intent_names.append(IntentName.YES.value)

    def can_handle(self, handler_input: HandlerInput) -> bool:
        if is_request_type(RequestType.LAUNCH.value)(handler_input):
            return True
        return any(is_intent_name(name)(handler_input) for name in self._intent_names)

    def handle(self, handler_input: HandlerInput) -> Response:
        if self._jokes is None:
            raise RuntimeError("JokeService has not been configured.")
        # Handlers run synchronously, outside any event loop.
        joke = asyncio.run(self._jokes.fetch_joke())

        builder = handler_input.response_builder
        builder.set_card(SimpleCard(title=self._options.skill_name, content=joke))
        speech = to_ssml_text(joke)
        if self._options.reprompt_enabled:
            speech = f"{speech} {pause(1)} {REPROMPT_TEXT}"
            return builder.speak(speech).ask(REPROMPT_TEXT).response
        return builder.speak(speech).set_should_end_session(True).response


class HelpHandler(AbstractRequestHandler):
    def __init__(self, options: SkillOptions) -> None:
        self._intent_name = options.help_intent_name

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return is_intent_name(self._intent_name)(handler_input)

    def handle(self, handler_input: HandlerInput) -> Response:
        return handler_input.response_builder.speak(HELP_TEXT).response


class CancelOrStopHandler(AbstractRequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return any(is_intent_name(name)(handler_input) for name in sorted(CANCEL_INTENTS))

    def handle(self, handler_input: HandlerInput) -> Response:
        return handler_input.response_builder.response


class SessionEndedHandler(AbstractRequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return is_request_type(RequestType.SESSION_ENDED.value)(handler_input)

    def handle(self, handler_input: HandlerInput) -> Response:
        reason = handler_input.request_envelope.request.reason
        logger.info("Session ended with reason: %s", getattr(reason, "value", reason))
        return handler_input.response_builder.response


def build_request_handlers(
    options: SkillOptions, jokes: Optional["JokeService"] = None
) -> tuple[AbstractRequestHandler, ...]:
    """Return the request handlers in precedence order."""
    return (
        GetJokeHandler(jokes, options),
        HelpHandler(options),
        CancelOrStopHandler(),
        SessionEndedHandler(),
    )


class ErrorHandler(AbstractExceptionHandler):
    """Final fallback: answers any failure with a fixed joke and keeps the session open."""

    def can_handle(self, handler_input: HandlerInput, exception: Exception) -> bool:
        return True

    def handle(self, handler_input: HandlerInput, exception: Exception) -> Response:
        logger.error("Error handled: %s", exception, exc_info=exception)
        return handler_input.response_builder.speak(ERROR_JOKE).ask(ERROR_JOKE).response


__all__ = [
    "ERROR_JOKE",
    "HELP_TEXT",
    "REPROMPT_TEXT",
    "CancelOrStopHandler",
    "ErrorHandler",
    "GetJokeHandler",
    "HelpHandler",
    "SessionEndedHandler",
    "build_request_handlers",
]
