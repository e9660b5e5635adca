"""Wires the client, caches, coordinator and renderer together."""

from __future__ import annotations

from .cache import build_shared_cache
from .config import Settings
from .coordinator import SnapshotCoordinator
from .github.client import GitHubClient
from .models import CardOptions
from .renderer import render_json, render_snapshot, write_svg


async def generate_card(
    coordinator: SnapshotCoordinator,
    login: str,
    options: CardOptions | None = None,
    include_languages: bool = True,
) -> str:
    """Fetch (or reuse) the snapshot for ``login`` and render it as SVG."""
    snapshot = await coordinator.get_snapshot(login, include_languages)
    return render_snapshot(snapshot, options)


async def run(
    username: str,
    token: str,
    options: CardOptions | None = None,
    include_languages: bool = True,
    output_format: str = "svg",
    output_file: str | None = None,
    settings: Settings | None = None,
) -> None:
    settings = settings or Settings.from_env()
    shared_cache = build_shared_cache(settings)
    try:
        async with GitHubClient(token) as client:
            coordinator = SnapshotCoordinator(
                client,
                shared_cache=shared_cache,
                ttl_seconds=settings.cache_ttl_seconds,
                max_in_flight=settings.max_in_flight,
                max_pages=settings.max_pages,
            )
            if output_format == "json":
                snapshot = await coordinator.get_snapshot(username, include_languages)
                render_json(snapshot, output_file=output_file)
            else:
                svg = await generate_card(coordinator, username, options, include_languages)
                write_svg(svg, output_file=output_file)
    finally:
        await shared_cache.aclose()
