"""Tracks the GitHub rate limit reported in response headers."""

from __future__ import annotations

import logging
import time

import httpx

from ..config import RATE_LIMIT_WARN_THRESHOLD

logger = logging.getLogger(__name__)


class RateLimitMonitor:
    """Records ``X-RateLimit-*`` headers and warns when the quota runs low.

    Requests are never delayed here: a rejected request surfaces as
    ``UpstreamRateLimited`` and the caller decides what to do.
    """

    def __init__(self, threshold: int = RATE_LIMIT_WARN_THRESHOLD) -> None:
        self.threshold = threshold
        self._remaining: int | None = None
        self._reset_at: float | None = None

    def update(self, response: httpx.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        reset = response.headers.get("X-RateLimit-Reset")
        if remaining is not None:
            try:
                self._remaining = int(remaining)
            except ValueError:
                logger.debug("Ignoring malformed X-RateLimit-Remaining: %r", remaining)
        if reset is not None:
            try:
                self._reset_at = float(reset)
            except ValueError:
                logger.debug("Ignoring malformed X-RateLimit-Reset: %r", reset)

        if self.is_low:
            logger.warning(
                "GitHub rate limit low: %d requests remaining, resets in %ds",
                self._remaining,
                self.seconds_until_reset(),
            )

    @property
    def remaining(self) -> int | None:
        return self._remaining

    @property
    def is_low(self) -> bool:
        return self._remaining is not None and self._remaining <= self.threshold

    def seconds_until_reset(self) -> int:
        if self._reset_at is None:
            return 0
        return max(0, int(self._reset_at - time.time()))
