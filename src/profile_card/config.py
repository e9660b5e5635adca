"""Constants and environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

# Environment variable names
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_SHARED_CACHE_URLS = ("UPSTASH_REDIS_REST_URL", "KV_REST_API_URL")
ENV_SHARED_CACHE_TOKENS = ("UPSTASH_REDIS_REST_TOKEN", "KV_REST_API_TOKEN")

# GitHub API
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "profile-card"
GRAPHQL_TIMEOUT_SECONDS = 10.0
AVATAR_TIMEOUT_SECONDS = 5.0
AVATAR_SIZE = 96
REPOS_PER_PAGE = 100
LANGUAGES_PER_REPO = 10
MAX_PAGES = 10
RATE_LIMIT_WARN_THRESHOLD = 10

# Cache
CACHE_TTL_SECONDS = 30 * 60
MAX_IN_FLIGHT_REQUESTS = 100
SHARED_CACHE_KEY_PREFIX = "profile:"
SHARED_CACHE_TIMEOUT_SECONDS = 5.0

# Aggregation
TOP_LANGUAGES = 5
DEFAULT_LANGUAGE_COLOR = "#ccc"


def _first_env(environ: Mapping[str, str], names: tuple[str, ...]) -> str:
    for name in names:
        value = environ.get(name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class Settings:
    github_token: str = ""
    shared_cache_url: str = ""
    shared_cache_token: str = ""
    cache_ttl_seconds: int = CACHE_TTL_SECONDS
    max_in_flight: int = MAX_IN_FLIGHT_REQUESTS
    max_pages: int = MAX_PAGES

    @property
    def shared_cache_enabled(self) -> bool:
        return bool(self.shared_cache_url and self.shared_cache_token)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from the environment (``os.environ`` by default)."""
        if environ is None:
            environ = os.environ
        return cls(
            github_token=environ.get(ENV_GITHUB_TOKEN, "").strip(),
            shared_cache_url=_first_env(environ, ENV_SHARED_CACHE_URLS),
            shared_cache_token=_first_env(environ, ENV_SHARED_CACHE_TOKENS),
        )
