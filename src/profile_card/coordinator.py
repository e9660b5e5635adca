"""Fetch/cache coordination for profile snapshots."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from .aggregator import aggregate_profile
from .cache import DisabledSharedCache, LocalCache, SharedCache, cache_key
from .config import CACHE_TTL_SECONDS, MAX_IN_FLIGHT_REQUESTS, MAX_PAGES
from .errors import MissingCredentials, SharedCacheError, TooManyInFlight
from .github.client import GitHubClient
from .models import ProfileSnapshot

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SnapshotCoordinator:
    """Serves snapshots from the local cache, the shared cache, or GitHub.

    Lookup order is local cache, shared cache, an already running fetch for
    the same key, and finally a new upstream fetch. All state is touched from
    one event loop, and registering a new fetch happens without yielding, so
    at most one upstream fetch per key runs at any time.
    """

    def __init__(
        self,
        client: GitHubClient,
        shared_cache: SharedCache | DisabledSharedCache | None = None,
        local_cache: LocalCache | None = None,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        max_in_flight: int = MAX_IN_FLIGHT_REQUESTS,
        max_pages: int = MAX_PAGES,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._client = client
        self._shared = shared_cache if shared_cache is not None else DisabledSharedCache()
        self._local = local_cache if local_cache is not None else LocalCache(ttl_seconds)
        self.ttl_seconds = ttl_seconds
        self.max_in_flight = max_in_flight
        self.max_pages = max_pages
        self._clock = clock
        self._in_flight = 0

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    async def get_snapshot(
        self, login: str, include_languages: bool = True
    ) -> ProfileSnapshot:
        if not self._client.token:
            raise MissingCredentials()

        key = cache_key(login, include_languages)

        snapshot = self._local.get(key)
        if snapshot is not None:
            logger.debug("local cache hit for %s", key)
            return snapshot

        snapshot = await self._read_shared(key)
        if snapshot is not None:
            logger.debug("shared cache hit for %s", key)
            self._local.put(key, snapshot)
            return snapshot

        # A fetch may have finished while the shared cache was consulted.
        snapshot = self._local.get(key)
        if snapshot is not None:
            return snapshot

        # No await between the lookup and begin(): get-or-begin is atomic.
        task = self._local.in_flight(key)
        if task is None:
            if self._in_flight >= self.max_in_flight:
                raise TooManyInFlight()
            self._in_flight += 1
            task = asyncio.ensure_future(self._fetch(key, login, include_languages))
            self._local.begin(key, task)
        else:
            logger.debug("joining in-flight fetch for %s", key)

        # Shielded so an abandoned caller does not cancel the shared fetch.
        return await asyncio.shield(task)

    async def _fetch(
        self, key: str, login: str, include_languages: bool
    ) -> ProfileSnapshot:
        task = asyncio.current_task()
        try:
            snapshot = await aggregate_profile(
                self._client,
                login,
                include_languages=include_languages,
                now=self._clock(),
                max_pages=self.max_pages,
            )
        except BaseException:
            self._local.discard(key, task)
            raise
        finally:
            self._in_flight -= 1

        self._local.put(key, snapshot)
        await self._write_shared(key, snapshot)
        return snapshot

    async def _read_shared(self, key: str) -> ProfileSnapshot | None:
        if not self._shared.enabled:
            return None
        try:
            return await self._shared.get(key)
        except SharedCacheError as exc:
            logger.warning("Shared cache get error for %s: %s", key, exc)
            return None

    async def _write_shared(self, key: str, snapshot: ProfileSnapshot) -> None:
        if not self._shared.enabled:
            return
        try:
            await self._shared.set(key, snapshot, self.ttl_seconds)
        except SharedCacheError as exc:
            logger.warning("Shared cache set error for %s: %s", key, exc)
