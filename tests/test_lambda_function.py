"""Tests for the Lambda entry point."""

from __future__ import annotations

import importlib
from types import SimpleNamespace

from dad_jokes_skill import lambda_function
from dad_jokes_skill.services import runtime
from dad_jokes_skill.services.handlers import HELP_TEXT


def test_handler_answers_without_touching_the_feed() -> None:
    help_ = lambda_function.handler(
        {
            "version": "1.0",
            "request": {"type": "IntentRequest", "intent": {"name": "AMAZON.HelpHandler"}},
        },
        SimpleNamespace(aws_request_id="lambda-req-1"),
    )
    ended = lambda_function.handler(
        {"version": "1.0", "request": {"type": "SessionEndedRequest", "reason": "ERROR"}}, None
    )

    assert help_["response"]["outputSpeech"]["ssml"] == f"<speak>{HELP_TEXT}</speak>"
    assert ended["response"] == {}


def test_module_reuses_registered_services(fake_feed, make_services) -> None:
    services = make_services(fake_feed)
    runtime.set_services(services)

    module = importlib.reload(lambda_function)
    envelope = module.handler({"version": "1.0", "request": {"type": "LaunchRequest"}}, None)

    assert runtime.get_services() is services
    assert envelope["response"]["card"]["title"] == "Reddit Dad Jokes"
    assert fake_feed.calls == ["dadjokes"]


def test_module_builds_services_when_none_registered() -> None:
    runtime.clear_services()

    importlib.reload(lambda_function)

    assert runtime.get_services().jokes is not None
