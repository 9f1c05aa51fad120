"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real credentials are used when present.
"""
from __future__ import annotations

import json
import os
import random
import sys
from pathlib import Path
from typing import Any, Sequence

import pytest
from ask_sdk_core.handler_input import HandlerInput
from ask_sdk_core.serialize import DefaultSerializer
from ask_sdk_model import RequestEnvelope
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Ensure required env vars exist for config import in app (fallbacks only)
os.environ.setdefault("REDDIT_CLIENT_ID", "test-client")
os.environ.setdefault("REDDIT_CLIENT_SECRET", "test-secret")
os.environ.setdefault("REDDIT_REFRESH_TOKEN", "test-refresh")

# pylint: disable=wrong-import-position
from dad_jokes_skill.core.models import ContentItem, SkillOptions  # noqa: E402
from dad_jokes_skill.services import ServiceContainer, build_default_services  # noqa: E402
from dad_jokes_skill.services import runtime  # noqa: E402
from dad_jokes_skill.services.skill import build_skill_builder  # noqa: E402


class FakeFeed:
    """In-memory feed returning a fixed listing or raising a fixed error."""

    def __init__(
        self,
        items: Sequence[ContentItem] = (),
        error: Exception | None = None,
    ) -> None:
        self.items = list(items)
        self.error = error
        self.calls: list[str] = []

    async def get_hot_listing(self, category: str) -> Sequence[ContentItem]:
        self.calls.append(category)
        if self.error is not None:
            raise self.error
        return list(self.items)


@pytest.fixture
def feed_factory():
    """Expose the fake feed class so tests can build custom listings."""
    return FakeFeed


@pytest.fixture
def fake_feed() -> FakeFeed:
    return FakeFeed(
        [
            ContentItem(
                title="  Why did the scarecrow win an award  ",
                body=" He was outstanding in his field. ",
            )
        ]
    )


@pytest.fixture
def make_services():
    """Factory for service containers wired to a fake feed."""

    def _make(
        feed: FakeFeed,
        *,
        options: SkillOptions | None = None,
        seed: int = 7,
    ) -> ServiceContainer:
        return build_default_services(
            feed_port=feed, options=options or SkillOptions(), rng=random.Random(seed)
        )

    return _make


@pytest.fixture(autouse=True)
def _clear_runtime_services():
    yield
    runtime.clear_services()


@pytest.fixture
def handler_input_for():
    """Deserialize an event dict into the SDK's handler input."""

    def _build(event: dict[str, Any]) -> HandlerInput:
        envelope = DefaultSerializer().deserialize(
            payload=json.dumps(event), obj_type=RequestEnvelope
        )
        return HandlerInput(request_envelope=envelope)

    return _build


@pytest.fixture
def invoke_skill():
    """Run an event dict through the assembled skill, as the Lambda runtime does."""

    def _invoke(services: ServiceContainer, event: dict[str, Any]) -> dict[str, Any]:
        return build_skill_builder(services).lambda_handler()(event, None)

    return _invoke
