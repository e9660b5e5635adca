"""Tests for the local and shared cache layers."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from profile_card.cache import (
    DisabledSharedCache,
    LocalCache,
    SharedCache,
    build_shared_cache,
    cache_key,
)
from profile_card.config import Settings
from profile_card.errors import SharedCacheError
from profile_card.models import LanguageStat, ProfileSnapshot, UserProfile, UserStats


def _make_snapshot() -> ProfileSnapshot:
    return ProfileSnapshot(
        user=UserProfile(login="octocat", name="The Octocat", bio="GitHub mascot"),
        stats=UserStats(stars=150, repos=8, prs=35, issues=10, commits=500),
        languages=(LanguageStat(name="TypeScript", size=7000, color="#3178c6"),),
    )


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_cache_key_includes_language_flag():
    assert cache_key("octocat", True) == "octocat:with-langs"
    assert cache_key("octocat", False) == "octocat:no-langs"


def test_local_cache_put_get():
    cache = LocalCache()
    snapshot = _make_snapshot()
    cache.put("k", snapshot)
    assert cache.get("k") is snapshot
    assert cache.get("missing") is None


def test_local_cache_evicts_expired_on_read():
    clock = FakeClock()
    cache = LocalCache(ttl_seconds=60, clock=clock)
    cache.put("k", _make_snapshot())

    clock.now = 59
    assert cache.get("k") is not None
    clock.now = 60
    assert cache.get("k") is None
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_local_cache_in_flight_slot():
    cache = LocalCache()
    task = asyncio.ensure_future(asyncio.sleep(0))
    cache.begin("k", task)

    assert cache.in_flight("k") is task
    # An in-flight slot has no snapshot yet.
    assert cache.get("k") is None

    other = asyncio.ensure_future(asyncio.sleep(0))
    cache.discard("k", other)
    assert cache.in_flight("k") is task
    cache.discard("k", task)
    assert cache.in_flight("k") is None
    await asyncio.gather(task, other)


def test_local_cache_discard_after_completion_keeps_snapshot():
    cache = LocalCache()
    cache.put("k", _make_snapshot())
    cache.discard("k", task=object())
    assert cache.get("k") is not None


def test_local_cache_clear():
    cache = LocalCache()
    cache.put("a", _make_snapshot())
    cache.put("b", _make_snapshot())
    cache.clear()
    assert len(cache) == 0


def _shared(handler) -> SharedCache:
    return SharedCache("https://cache.example.com/", "secret", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_shared_cache_set_then_get():
    store = {}
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        command = json.loads(request.content)
        seen.append((request.headers["Authorization"], command[0]))
        if command[0] == "SET":
            store[command[1]] = command[2]
            assert command[3:] == ["EX", "1800"]
            return httpx.Response(200, json={"result": "OK"})
        return httpx.Response(200, json={"result": store.get(command[1])})

    cache = _shared(handler)
    snapshot = _make_snapshot()
    await cache.set("octocat:with-langs", snapshot, 1800)
    restored = await cache.get("octocat:with-langs")
    await cache.aclose()

    assert "profile:octocat:with-langs" in store
    assert restored == snapshot
    assert seen == [("Bearer secret", "SET"), ("Bearer secret", "GET")]


@pytest.mark.asyncio
async def test_shared_cache_miss_returns_none():
    cache = _shared(lambda request: httpx.Response(200, json={"result": None}))
    assert await cache.get("nobody:with-langs") is None
    await cache.aclose()


@pytest.mark.asyncio
async def test_shared_cache_http_error_raises_shared_cache_error():
    cache = _shared(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(SharedCacheError):
        await cache.get("k")
    await cache.aclose()


@pytest.mark.asyncio
async def test_shared_cache_error_reply():
    cache = _shared(lambda request: httpx.Response(200, json={"error": "WRONGPASS"}))
    with pytest.raises(SharedCacheError, match="WRONGPASS"):
        await cache.set("k", _make_snapshot(), 60)
    await cache.aclose()


@pytest.mark.asyncio
async def test_shared_cache_undecodable_entry():
    cache = _shared(lambda request: httpx.Response(200, json={"result": "{not json"}))
    with pytest.raises(SharedCacheError):
        await cache.get("k")
    await cache.aclose()


@pytest.mark.asyncio
async def test_shared_cache_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    cache = _shared(handler)
    with pytest.raises(SharedCacheError):
        await cache.get("k")
    await cache.aclose()


@pytest.mark.asyncio
async def test_disabled_shared_cache():
    cache = DisabledSharedCache()
    assert cache.enabled is False
    await cache.set("k", _make_snapshot(), 60)
    assert await cache.get("k") is None


@pytest.mark.asyncio
async def test_build_shared_cache_requires_url_and_token():
    assert isinstance(build_shared_cache(Settings()), DisabledSharedCache)
    assert isinstance(build_shared_cache(Settings(shared_cache_url="https://x")), DisabledSharedCache)

    cache = build_shared_cache(Settings(shared_cache_url="https://x", shared_cache_token="t"))
    assert isinstance(cache, SharedCache)
    await cache.aclose()
