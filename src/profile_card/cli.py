"""Command-line entry point for profile-card."""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import ENV_GITHUB_TOKEN
from .errors import ProfileCardError
from .models import CardOptions
from .orchestrator import run

_LANGUAGE_FIELDS = {"all", "languages", "langs"}


def _includes_languages(fields: str | None) -> bool:
    """Decide from a comma-separated ``--fields`` value whether to fetch languages."""
    if fields is None:
        return True
    wanted = {part.strip().lower() for part in fields.split(",") if part.strip()}
    if not wanted:
        return True
    return bool(wanted & _LANGUAGE_FIELDS)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


@click.command()
@click.argument("username")
@click.option("--token", envvar=ENV_GITHUB_TOKEN, default=None, help="GitHub token (or set GITHUB_TOKEN).")
@click.option("--theme", default=None, help="Theme name, e.g. github_dark or dracula.")
@click.option("--title-color", default=None, help="Title color override (hex, no #).")
@click.option("--text-color", default=None, help="Text color override (hex, no #).")
@click.option("--icon-color", default=None, help="Icon color override (hex, no #).")
@click.option("--bg-color", default=None, help="Background color override (hex, no #).")
@click.option("--border-color", default=None, help="Border color override (hex, no #).")
@click.option("--hide-border", is_flag=True, default=False, help="Remove the card border.")
@click.option("--compact", is_flag=True, default=False, help="Hide bio, pronouns, twitter and language labels.")
@click.option("--fields", default=None, help="Comma-separated: languages, stats, all.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["svg", "json"]),
    default="svg",
    help="Output format.",
)
@click.option("--output", "output_file", default=None, help="Write output to a file instead of stdout.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(version=__version__)
def main(
    username: str,
    token: str | None,
    theme: str | None,
    title_color: str | None,
    text_color: str | None,
    icon_color: str | None,
    bg_color: str | None,
    border_color: str | None,
    hide_border: bool,
    compact: bool,
    fields: str | None,
    output_format: str,
    output_file: str | None,
    verbose: bool,
) -> None:
    """Render a GitHub profile card for USERNAME."""
    if not token:
        raise click.UsageError(
            "GitHub token required. Use --token or set GITHUB_TOKEN environment variable."
        )

    _setup_logging(verbose)

    options = CardOptions(
        theme=theme,
        title_color=title_color,
        text_color=text_color,
        icon_color=icon_color,
        bg_color=bg_color,
        border_color=border_color,
        hide_border=hide_border,
        compact=compact,
    )

    try:
        asyncio.run(run(
            username=username,
            token=token,
            options=options,
            include_languages=_includes_languages(fields),
            output_format=output_format,
            output_file=output_file,
        ))
    except ProfileCardError as exc:
        raise click.ClickException(exc.message) from exc
