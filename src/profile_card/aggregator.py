"""Paginated profile fetch and aggregation into a ProfileSnapshot."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from .config import DEFAULT_LANGUAGE_COLOR, MAX_PAGES, TOP_LANGUAGES
from .github.client import GitHubClient
from .models import LanguageStat, ProfileSnapshot, UserProfile, UserStats

logger = logging.getLogger(__name__)


def _total(payload: dict[str, Any], key: str) -> int:
    value = (payload.get(key) or {}).get("totalCount")
    return int(value) if value else 0


def _year_window(now: datetime) -> tuple[str, str]:
    """Return (Jan 1 00:00:00 UTC of now's year, now) as ISO-8601 strings."""
    now = now.astimezone(timezone.utc)
    start = datetime(now.year, 1, 1, tzinfo=timezone.utc)
    return start.isoformat(), now.isoformat()


def _accumulate_languages(
    languages: dict[str, LanguageStat], repo: dict[str, Any]
) -> None:
    edges = (repo.get("languages") or {}).get("edges") or []
    for edge in edges:
        node = edge.get("node")
        size = edge.get("size") or 0
        if not node or not size or not node.get("name"):
            continue
        name = node["name"]
        current = languages.get(name)
        if current is None:
            languages[name] = LanguageStat(
                name=name, size=size, color=node.get("color") or DEFAULT_LANGUAGE_COLOR
            )
        else:
            languages[name] = LanguageStat(
                name=name, size=current.size + size, color=current.color
            )


def top_languages(
    languages: dict[str, LanguageStat], limit: int = TOP_LANGUAGES
) -> tuple[LanguageStat, ...]:
    ranked = sorted(languages.values(), key=lambda lang: lang.size, reverse=True)
    return tuple(ranked[:limit])


def _build_stats(user: dict[str, Any], stars: int) -> UserStats:
    contributions = user.get("contributionsCollection") or {}
    return UserStats(
        stars=stars,
        repos=_total(user, "repositories"),
        prs=_total(user, "openPRs") + _total(user, "closedPRs") + _total(user, "mergedPRs"),
        issues=_total(user, "openIssues") + _total(user, "closedIssues"),
        commits=int(contributions.get("totalCommitContributions") or 0),
    )


async def aggregate_profile(
    client: GitHubClient,
    login: str,
    include_languages: bool = True,
    now: datetime | None = None,
    max_pages: int = MAX_PAGES,
) -> ProfileSnapshot:
    """Page through a user's owned repositories and build a snapshot.

    Identity fields and counts come from the first page. Stars and language
    sizes accumulate over every page until the upstream reports no next page,
    a page comes back empty, or ``max_pages`` pages have been requested.
    """
    since, until = _year_window(now or datetime.now(timezone.utc))

    user: dict[str, Any] = {}
    stars = 0
    languages: dict[str, LanguageStat] = {}
    cursor: str | None = None
    has_next_page = True
    page_count = 0

    # At least one page is always requested; the first page carries the identity.
    while has_next_page and (page_count == 0 or page_count < max_pages):
        page_count += 1
        page = await client.fetch_user_page(
            login, cursor, since, until, include_languages=include_languages
        )
        if page_count == 1:
            user = page

        repos = page.get("repositories") or {}
        nodes = repos.get("nodes") or []
        for repo in nodes:
            if not repo:
                continue
            stars += _total(repo, "stargazers")
            if include_languages:
                _accumulate_languages(languages, repo)

        page_info = repos.get("pageInfo") or {}
        has_next_page = bool(page_info.get("hasNextPage")) and bool(nodes)
        cursor = page_info.get("endCursor")
        logger.debug("%s: page %d, %d repositories", login, page_count, len(nodes))

    truncated = has_next_page
    if truncated:
        logger.warning("%s: stopped after %d pages; totals are partial", login, page_count)

    avatar_url = user.get("avatarUrl")
    avatar_data_url = await client.fetch_avatar(avatar_url)

    profile = UserProfile(
        login=user.get("login") or login,
        name=user.get("name"),
        avatar_url=avatar_url,
        avatar_data_url=avatar_data_url,
        bio=user.get("bio"),
        pronouns=user.get("pronouns"),
        twitter=user.get("twitterUsername"),
    )
    return ProfileSnapshot(
        user=profile,
        stats=_build_stats(user, stars),
        languages=top_languages(languages) if include_languages else (),
        truncated=truncated,
    )
