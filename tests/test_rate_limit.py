"""Tests for the rate limit monitor."""

from __future__ import annotations

import logging
import time
from unittest.mock import MagicMock

from profile_card.github.rate_limit import RateLimitMonitor


def _make_response(remaining: str | None = None, reset: str | None = None) -> MagicMock:
    headers = {}
    if remaining is not None:
        headers["X-RateLimit-Remaining"] = remaining
    if reset is not None:
        headers["X-RateLimit-Reset"] = reset
    resp = MagicMock()
    resp.headers = headers
    return resp


def test_update_sets_remaining_and_reset():
    monitor = RateLimitMonitor()
    resp = _make_response(remaining="100", reset=str(time.time() + 3600))
    monitor.update(resp)
    assert monitor._remaining == 100
    assert monitor._reset_at is not None
    assert 3590 <= monitor.seconds_until_reset() <= 3600


def test_update_without_headers():
    monitor = RateLimitMonitor()
    resp = _make_response()
    monitor.update(resp)
    assert monitor._remaining is None
    assert monitor._reset_at is None
    assert monitor.is_low is False
    assert monitor.seconds_until_reset() == 0


def test_update_ignores_malformed_headers():
    monitor = RateLimitMonitor()
    monitor.update(_make_response(remaining="lots", reset="soon"))
    assert monitor.remaining is None
    assert monitor._reset_at is None


def test_is_low_at_threshold(caplog):
    monitor = RateLimitMonitor(threshold=10)
    with caplog.at_level(logging.WARNING):
        monitor.update(_make_response(remaining="10", reset=str(time.time() + 60)))
    assert monitor.is_low is True
    assert "rate limit low" in caplog.text


def test_not_low_above_threshold(caplog):
    monitor = RateLimitMonitor(threshold=10)
    with caplog.at_level(logging.WARNING):
        monitor.update(_make_response(remaining="50"))
    assert monitor.is_low is False
    assert caplog.text == ""


def test_reset_in_the_past_is_zero():
    monitor = RateLimitMonitor()
    monitor.update(_make_response(remaining="5", reset=str(time.time() - 1)))
    assert monitor.seconds_until_reset() == 0
