"""Reddit adapter implementing the feed port over the OAuth API."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import httpx

from dad_jokes_skill.core.exceptions import FeedUnavailableError
from dad_jokes_skill.core.logging import get_logger
from dad_jokes_skill.core.models import ContentItem, FeedCredentials
from dad_jokes_skill.core.ports import FeedPort

logger = get_logger(__name__)

TOKEN_URL = "https://www.reddit.com/api/v1/access_token"
API_BASE_URL = "https://oauth.reddit.com"
SUBMISSION_KIND = "t3"


class RedditFeedAdapter(FeedPort):
    """Fetch subreddit listings using a long-lived refresh token.

    A fresh bearer token is requested for every listing fetch; neither tokens
    nor listings are kept between calls.
    """

    def __init__(
        self,
        credentials: FeedCredentials,
        *,
        limit: int = 25,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._credentials = credentials
        self._limit = limit
        self._timeout = timeout
        self._transport = transport

    async def get_hot_listing(self, category: str) -> Sequence[ContentItem]:
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            headers={"User-Agent": self._credentials.user_agent},
        ) as client:
            access_token = await self._fetch_access_token(client)
            payload = await self._get_json(
                client,
                f"{API_BASE_URL}/r/{category}/hot",
                params={"raw_json": 1, "limit": self._limit},
                headers={"Authorization": f"Bearer {access_token}"},
            )
        items = parse_listing(payload)
        logger.info("Fetched %d items from r/%s hot listing", len(items), category)
        return items

    async def _fetch_access_token(self, client: httpx.AsyncClient) -> str:
        try:
            response = await client.post(
                TOKEN_URL,
                auth=(self._credentials.client_id, self._credentials.client_secret),
                data={
                    "grant_type": "refresh_token",
                    "refresh_token": self._credentials.refresh_token,
                },
            )
        except httpx.HTTPError as exc:
            raise FeedUnavailableError(f"Reddit token request failed: {exc}") from exc
        if response.status_code >= 400:
            logger.error("Reddit token exchange rejected: %s", response.status_code)
            raise FeedUnavailableError(
                f"Reddit rejected credentials (HTTP {response.status_code})"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise FeedUnavailableError("Reddit token response was not JSON") from exc
        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            # Reddit answers invalid refresh tokens with 200 and an "error" field.
            raise FeedUnavailableError(f"Reddit token response missing access_token: {body!r}")
        return token

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: dict[str, Any],
        headers: dict[str, str],
    ) -> Any:
        try:
            response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            raise FeedUnavailableError(f"Reddit listing request failed: {exc}") from exc
        if response.status_code >= 400:
            logger.error("Reddit listing request failed: %s %s", response.status_code, url)
            raise FeedUnavailableError(
                f"Reddit listing request failed (HTTP {response.status_code})"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise FeedUnavailableError("Reddit listing response was not JSON") from exc


def parse_listing(payload: Any) -> list[ContentItem]:
    """Map a Reddit listing payload to content items, preserving order."""
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise FeedUnavailableError("Reddit listing payload malformed: missing data")
    children = payload["data"].get("children")
    if not isinstance(children, list):
        raise FeedUnavailableError("Reddit listing payload malformed: missing children")

    items: list[ContentItem] = []
    for child in children:
        if not isinstance(child, dict) or child.get("kind") != SUBMISSION_KIND:
            continue
        data = child.get("data") or {}
        title = data.get("title")
        if not isinstance(title, str):
            continue
        body = data.get("selftext")
        items.append(ContentItem(title=title, body=body if isinstance(body, str) else ""))
    return items


__all__ = ["RedditFeedAdapter", "parse_listing", "TOKEN_URL", "API_BASE_URL"]
