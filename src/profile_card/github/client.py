"""Async GitHub GraphQL client."""

from __future__ import annotations

import base64
import logging
import re
from typing import Any

import httpx

from ..config import (
    AVATAR_SIZE,
    AVATAR_TIMEOUT_SECONDS,
    GITHUB_GRAPHQL_URL,
    GRAPHQL_TIMEOUT_SECONDS,
    USER_AGENT,
)
from ..errors import (
    MissingCredentials,
    SubjectNotFound,
    UpstreamAuthFailed,
    UpstreamError,
    UpstreamRateLimited,
)
from .queries import user_query
from .rate_limit import RateLimitMonitor

logger = logging.getLogger(__name__)

_IMAGE_CONTENT_TYPE = re.compile(r"^image/[\w.+-]+$")


def _sized_avatar_url(url: str) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}s={AVATAR_SIZE}"


class GitHubClient:
    """Thin async wrapper around the GitHub GraphQL endpoint.

    Use as an async context manager::

        async with GitHubClient(token) as client:
            user = await client.fetch_user_page("octocat", None, since, until)
    """

    def __init__(
        self,
        token: str | None,
        timeout: float = GRAPHQL_TIMEOUT_SECONDS,
        avatar_timeout: float = AVATAR_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token or ""
        self.timeout = timeout
        self.avatar_timeout = avatar_timeout
        self.rate_limit = RateLimitMonitor()
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubClient:
        self._http = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            raise RuntimeError("GitHubClient must be used as an async context manager")
        return self._http

    def _headers(self) -> dict[str, str]:
        if not self.token:
            raise MissingCredentials()
        return {
            "Authorization": f"bearer {self.token}",
            "Content-Type": "application/json",
        }

    async def fetch_user_page(
        self,
        login: str,
        cursor: str | None,
        since: str,
        until: str,
        include_languages: bool = True,
    ) -> dict[str, Any]:
        """Fetch one page of the user query and return ``data.user``."""
        payload = {
            "query": user_query(include_languages),
            "variables": {"login": login, "cursor": cursor, "from": since, "to": until},
        }
        headers = self._headers()
        try:
            response = await self.http.post(
                GITHUB_GRAPHQL_URL, json=payload, headers=headers, timeout=self.timeout
            )
        except httpx.TimeoutException as exc:
            raise UpstreamError(f"GitHub API request timed out after {self.timeout:g}s") from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(f"GitHub API request failed: {exc}") from exc

        self.rate_limit.update(response)

        if response.status_code == 401:
            raise UpstreamAuthFailed()
        if response.status_code in (403, 429):
            raise UpstreamRateLimited()
        if not response.is_success:
            raise UpstreamError(
                f"GitHub API error ({response.status_code}): {response.text[:100]}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamError("GitHub API returned malformed JSON") from exc
        if not isinstance(body, dict):
            raise UpstreamError("GitHub API returned an unexpected payload")

        errors = body.get("errors") or []
        if errors:
            _raise_graphql_errors(errors, login)

        user = (body.get("data") or {}).get("user")
        if not user:
            raise SubjectNotFound(f"User not found: {login}")
        return user

    async def fetch_avatar(self, url: str | None) -> str | None:
        """Download an avatar and return it as a ``data:`` URI, or None on failure."""
        if not url:
            return None
        try:
            response = await self.http.get(_sized_avatar_url(url), timeout=self.avatar_timeout)
        except httpx.HTTPError as exc:
            logger.warning("Avatar fetch error for %s: %s", url, exc)
            return None
        if not response.is_success:
            logger.warning("Avatar fetch failed: %d for %s", response.status_code, url)
            return None

        content_type = (response.headers.get("content-type") or "image/png").split(";")[0].strip().lower()
        if not _IMAGE_CONTENT_TYPE.match(content_type):
            logger.warning("Avatar has unexpected content type %r for %s", content_type, url)
            return None
        encoded = base64.b64encode(response.content).decode("ascii")
        return f"data:{content_type};base64,{encoded}"


def _raise_graphql_errors(errors: list[dict[str, Any]], login: str) -> None:
    types = {e.get("type") for e in errors if isinstance(e, dict)}
    message = " | ".join(
        e.get("message", "") for e in errors if isinstance(e, dict) and e.get("message")
    ) or "GitHub API error"
    if "NOT_FOUND" in types:
        raise SubjectNotFound(f"User not found: {login}")
    if "RATE_LIMITED" in types:
        raise UpstreamRateLimited(message)
    raise UpstreamError(message)
