"""Tests for the Reddit feed adapter using an in-memory HTTP transport."""

# pylint: disable=missing-function-docstring

from __future__ import annotations

import asyncio

import httpx
import pytest

from dad_jokes_skill.adapters.reddit import RedditFeedAdapter, parse_listing
from dad_jokes_skill.core.exceptions import FeedUnavailableError
from dad_jokes_skill.core.models import ContentItem, FeedCredentials

CREDENTIALS = FeedCredentials(
    client_id="client",
    client_secret="secret",
    refresh_token="refresh",
    user_agent="App for /r/dadjokes Alexa skill.",
)

LISTING = {
    "kind": "Listing",
    "data": {
        "children": [
            {"kind": "t3", "data": {"title": "Pinned rules", "selftext": "Be nice."}},
            {"kind": "t3", "data": {"title": "Why can't a bike stand?", "selftext": "Too tired."}},
            {"kind": "t1", "data": {"body": "a comment, not a post"}},
            {"kind": "t3", "data": {"title": "Link post", "selftext": None}},
        ]
    },
}


def _adapter(handler) -> RedditFeedAdapter:
    return RedditFeedAdapter(CREDENTIALS, limit=10, transport=httpx.MockTransport(handler))


def test_get_hot_listing_exchanges_token_and_maps_items() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/api/v1/access_token":
            return httpx.Response(200, json={"access_token": "bearer-123", "token_type": "bearer"})
        return httpx.Response(200, json=LISTING)

    items = asyncio.run(_adapter(handler).get_hot_listing("dadjokes"))

    assert items == [
        ContentItem(title="Pinned rules", body="Be nice."),
        ContentItem(title="Why can't a bike stand?", body="Too tired."),
        ContentItem(title="Link post", body=""),
    ]
    token_request, listing_request = seen
    assert token_request.method == "POST"
    assert token_request.headers["Authorization"].startswith("Basic ")
    assert b"grant_type=refresh_token" in token_request.content
    assert b"refresh_token=refresh" in token_request.content
    assert listing_request.url.host == "oauth.reddit.com"
    assert listing_request.url.path == "/r/dadjokes/hot"
    assert listing_request.url.params["raw_json"] == "1"
    assert listing_request.url.params["limit"] == "10"
    assert listing_request.headers["Authorization"] == "Bearer bearer-123"
    assert listing_request.headers["User-Agent"] == CREDENTIALS.user_agent


def test_rejected_credentials_raise_feed_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "Unauthorized", "error": 401})

    with pytest.raises(FeedUnavailableError):
        asyncio.run(_adapter(handler).get_hot_listing("dadjokes"))


def test_invalid_refresh_token_with_200_raises_feed_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": "invalid_grant"})

    with pytest.raises(FeedUnavailableError):
        asyncio.run(_adapter(handler).get_hot_listing("dadjokes"))


def test_network_error_raises_feed_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FeedUnavailableError):
        asyncio.run(_adapter(handler).get_hot_listing("dadjokes"))


def test_listing_server_error_raises_feed_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/v1/access_token":
            return httpx.Response(200, json={"access_token": "bearer-123"})
        return httpx.Response(503, text="upstream overloaded")

    with pytest.raises(FeedUnavailableError):
        asyncio.run(_adapter(handler).get_hot_listing("dadjokes"))


def test_listing_non_json_raises_feed_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/v1/access_token":
            return httpx.Response(200, json={"access_token": "bearer-123"})
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(FeedUnavailableError):
        asyncio.run(_adapter(handler).get_hot_listing("dadjokes"))


def test_parse_listing_rejects_malformed_payloads() -> None:
    with pytest.raises(FeedUnavailableError):
        parse_listing({"kind": "Listing"})
    with pytest.raises(FeedUnavailableError):
        parse_listing({"data": {"children": "nope"}})
    assert parse_listing({"data": {"children": []}}) == []


def test_credentials_repr_hides_secrets() -> None:
    text = repr(CREDENTIALS)
    assert "secret" not in text.replace("client_secret", "")
    assert "refresh" not in text.replace("refresh_token", "")
