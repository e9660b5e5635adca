"""Process-local TTL cache and the optional shared (Redis REST) cache."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from .config import (
    CACHE_TTL_SECONDS,
    SHARED_CACHE_KEY_PREFIX,
    SHARED_CACHE_TIMEOUT_SECONDS,
    Settings,
)
from .errors import SharedCacheError
from .models import ProfileSnapshot

logger = logging.getLogger(__name__)


def cache_key(login: str, include_languages: bool) -> str:
    return f"{login}:{'with-langs' if include_languages else 'no-langs'}"


@dataclass
class CacheEntry:
    """Either a finished snapshot or the task still producing it."""

    expires_at: float
    snapshot: ProfileSnapshot | None = None
    in_flight: asyncio.Task | None = None


class LocalCache:
    """In-memory cache map with lazy TTL expiry.

    Not thread-safe; it is owned by a coordinator running on a single
    event loop.
    """

    def __init__(
        self,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _live_entry(self, key: str) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        return entry

    def get(self, key: str) -> ProfileSnapshot | None:
        entry = self._live_entry(key)
        return entry.snapshot if entry else None

    def put(self, key: str, snapshot: ProfileSnapshot) -> None:
        self._entries[key] = CacheEntry(
            expires_at=self._clock() + self.ttl_seconds, snapshot=snapshot
        )

    def in_flight(self, key: str) -> asyncio.Task | None:
        entry = self._live_entry(key)
        return entry.in_flight if entry else None

    def begin(self, key: str, task: asyncio.Task) -> None:
        self._entries[key] = CacheEntry(
            expires_at=self._clock() + self.ttl_seconds, in_flight=task
        )

    def discard(self, key: str, task: asyncio.Task | None = None) -> None:
        """Remove ``key``; with ``task`` given, only if that task still owns the slot."""
        entry = self._entries.get(key)
        if entry is None:
            return
        if task is not None and entry.in_flight is not task:
            return
        del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()


class SharedCache:
    """Shared snapshot cache spoken to over the Upstash Redis REST protocol.

    Each command is a JSON array POSTed to the endpoint; the reply is
    ``{"result": ...}`` or ``{"error": "..."}``. All failures surface as
    ``SharedCacheError``.
    """

    enabled = True

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = SHARED_CACHE_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self._http = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    async def _command(self, *args: str) -> Any:
        try:
            response = await self._http.post(self.url, json=list(args))
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise SharedCacheError(f"{args[0]} failed: {exc}") from exc
        if not isinstance(body, dict):
            raise SharedCacheError(f"{args[0]} returned an unexpected payload")
        if body.get("error"):
            raise SharedCacheError(f"{args[0]} failed: {body['error']}")
        return body.get("result")

    async def get(self, key: str) -> ProfileSnapshot | None:
        raw = await self._command("GET", SHARED_CACHE_KEY_PREFIX + key)
        if raw is None:
            return None
        try:
            data = json.loads(raw) if isinstance(raw, str) else raw
            return ProfileSnapshot.from_dict(data)
        except (ValueError, KeyError, TypeError) as exc:
            raise SharedCacheError(f"undecodable entry for {key}: {exc}") from exc

    async def set(self, key: str, snapshot: ProfileSnapshot, ttl_seconds: int) -> None:
        await self._command(
            "SET",
            SHARED_CACHE_KEY_PREFIX + key,
            json.dumps(snapshot.to_dict(), ensure_ascii=False),
            "EX",
            str(ttl_seconds),
        )

    async def aclose(self) -> None:
        await self._http.aclose()


class DisabledSharedCache:
    """Stand-in used when no shared cache is configured."""

    enabled = False

    async def get(self, key: str) -> ProfileSnapshot | None:
        return None

    async def set(self, key: str, snapshot: ProfileSnapshot, ttl_seconds: int) -> None:
        return None

    async def aclose(self) -> None:
        return None


def build_shared_cache(settings: Settings) -> SharedCache | DisabledSharedCache:
    if settings.shared_cache_enabled:
        logger.info("Shared cache enabled at %s", settings.shared_cache_url)
        return SharedCache(settings.shared_cache_url, settings.shared_cache_token)
    logger.debug("Shared cache not configured; using local cache only")
    return DisabledSharedCache()
