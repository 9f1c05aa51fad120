"""Request types and intent names understood by the skill."""

from enum import Enum


class RequestType(str, Enum):
    """Voice platform request types the router distinguishes."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class IntentName(str, Enum):
    """Intent names declared by the skill's interaction model."""

    GET_JOKE = "GetJokeIntent"
    YES = "AMAZON.YesIntent"
    NO = "AMAZON.NoIntent"
    CANCEL = "AMAZON.CancelIntent"
    STOP = "AMAZON.StopIntent"


CANCEL_INTENTS = frozenset({IntentName.CANCEL.value, IntentName.STOP.value, IntentName.NO.value})


__all__ = ["RequestType", "IntentName", "CANCEL_INTENTS"]
