"""SVG card renderer with JSON output support."""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console

from .errors import InvalidSnapshotInput
from .formatting import escape_xml, k_format, wrap_text
from .icons import icon
from .models import CardOptions, LanguageStat, ProfileSnapshot, UserProfile, UserStats
from .themes import resolve_colors

# Layout
CARD_WIDTH = 500
CARD_HEIGHT = 200
PADDING = 22
AVATAR_SIZE = 72
BAR_WIDTH = CARD_WIDTH - PADDING * 2
BAR_HEIGHT = 8
BAR_Y = CARD_HEIGHT - 40
LABEL_Y = CARD_HEIGHT - 16
INFO_X = PADDING + AVATAR_SIZE + 16
BIO_LINE_LENGTH = 42
BIO_MAX_LINES = 2

FONT_FAMILY = "ui-sans-serif, -apple-system, BlinkMacSystemFont, Segoe UI, Helvetica Neue, Arial"
EMPTY_AVATAR = "data:image/svg+xml,%3Csvg%3E%3C/svg%3E"

# (icon, label, stats attribute, x offset)
_STAT_COLUMNS = (
    ("star", "Stars", "stars", 0),
    ("commit", "Commits", "commits", 100),
    ("issue", "Issues", "issues", 220),
    ("repo", "Repos", "repos", 320),
    ("pr", "PRs", "prs", 405),
)


def _num(value: float) -> str:
    """Format a coordinate without float noise: 319.2, 22, 136.8."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def language_segments(
    languages: Sequence[LanguageStat], bar_width: float = BAR_WIDTH
) -> list[tuple[LanguageStat, float, float]]:
    """Return (language, x offset, width) for each bar segment, left to right."""
    total = sum(lang.size for lang in languages) or 1
    segments = []
    offset = 0.0
    for lang in languages:
        width = lang.size / total * bar_width
        segments.append((lang, offset, width))
        offset += width
    return segments


def _language_labels(languages: Sequence[LanguageStat]) -> str:
    total = sum(lang.size for lang in languages) or 1
    spacing = BAR_WIDTH // max(len(languages), 1)
    labels = []
    for i, lang in enumerate(languages):
        x = PADDING + i * spacing
        pct = round(lang.size / total * 100)
        labels.append(
            f'<circle cx="{x + 5}" cy="{LABEL_Y}" r="4" fill="{escape_xml(lang.color)}"/>'
            f'<text x="{x + 13}" y="{LABEL_Y + 4}" class="lang">{escape_xml(lang.name)} {pct}%</text>'
        )
    return "".join(labels)


def _stat_block(stats: UserStats, icon_color: str) -> str:
    blocks = []
    for icon_name, label, attr, x in _STAT_COLUMNS:
        transform = f' transform="translate({x},0)"' if x else ""
        blocks.append(
            f"<g{transform}>"
            f"{icon(icon_name, icon_color)}"
            f'<text x="20" y="12" class="stat">{k_format(getattr(stats, attr))}</text>'
            f'<text x="0" y="28" class="stat-label">{label}</text>'
            "</g>"
        )
    return "".join(blocks)


def render_card(
    user: UserProfile | None,
    stats: UserStats | None,
    languages: Sequence[LanguageStat] = (),
    options: CardOptions | None = None,
) -> str:
    """Render a profile card as a self-contained SVG document.

    Only a missing user login or missing stats is an error; every optional
    field falls back to something sensible.
    """
    if user is None or not user.login:
        raise InvalidSnapshotInput("Invalid user data: missing login")
    if stats is None:
        raise InvalidSnapshotInput("Invalid stats data")

    options = options or CardOptions()
    colors = resolve_colors(options)
    compact = options.compact
    languages = list(languages or ())

    name = escape_xml(user.name or user.login)
    login = escape_xml(user.login)
    bio_lines = []
    if not compact and user.bio:
        bio_lines = [escape_xml(line) for line in wrap_text(user.bio, BIO_LINE_LENGTH, BIO_MAX_LINES)]
    pronouns = escape_xml(user.pronouns) if not compact and user.pronouns else ""
    twitter = escape_xml(user.twitter) if not compact and user.twitter else ""
    avatar = escape_xml(user.avatar_data_url or user.avatar_url or EMPTY_AVATAR)

    name_y = PADDING + 22
    username_y = name_y + 18
    bio_y = username_y + 14
    twitter_y = bio_y + 28 if bio_lines else username_y + 16
    header_y = PADDING + AVATAR_SIZE + 12
    avatar_center = PADDING + AVATAR_SIZE // 2
    border = "none" if options.hide_border else f"#{colors.border}"

    segments = "".join(
        f'<rect x="{_num(PADDING + offset)}" y="{BAR_Y}" width="{_num(width)}" '
        f'height="{BAR_HEIGHT}" fill="{escape_xml(lang.color)}"/>'
        for lang, offset, width in language_segments(languages)
    )

    parts = [
        f'<svg width="{CARD_WIDTH}" height="{CARD_HEIGHT}" viewBox="0 0 {CARD_WIDTH} {CARD_HEIGHT}" '
        'xmlns="http://www.w3.org/2000/svg" shape-rendering="geometricPrecision" '
        'text-rendering="optimizeLegibility" image-rendering="optimizeQuality">',
        f"<title>{name}&#39;s GitHub Stats</title>",
        "<defs>",
        f'<clipPath id="a"><circle cx="{avatar_center}" cy="{avatar_center}" r="{AVATAR_SIZE // 2}"/></clipPath>',
        f'<clipPath id="b"><rect x="{PADDING}" y="{BAR_Y}" width="{BAR_WIDTH}" height="{BAR_HEIGHT}" rx="4"/></clipPath>',
        "</defs>",
        "<style>",
        f"*{{font-family:{FONT_FAMILY},sans-serif}}",
        f".bg{{fill:#{colors.bg}}}",
        f".title{{font-size:18px;font-weight:700;fill:#{colors.title}}}",
        f".user{{font-size:12px;fill:#{colors.text};opacity:.7}}",
    ]
    if not compact:
        parts.append(
            f".bio{{font-size:11px;fill:#{colors.text};opacity:.65}}"
            f".tw{{font-size:11px;fill:#{colors.text};opacity:.7}}"
            f".lang{{font-size:10px;fill:#{colors.text}}}"
        )
    parts += [
        f".stat{{font-size:14px;font-weight:700;fill:#{colors.text}}}",
        f".stat-label{{font-size:9px;font-weight:600;fill:#{colors.text};opacity:.55;"
        "text-transform:uppercase;letter-spacing:.6px}",
        f".sec{{font-size:9px;font-weight:600;fill:#{colors.text};opacity:.5;"
        "text-transform:uppercase;letter-spacing:.6px}",
        "</style>",
        f'<rect class="bg" width="{CARD_WIDTH}" height="{CARD_HEIGHT}" rx="10" '
        f'stroke="{border}" stroke-width="1"/>',
        f'<circle cx="{avatar_center}" cy="{avatar_center}" r="{AVATAR_SIZE // 2 + 2}" fill="none" '
        f'stroke="#{colors.border}" stroke-width="1" opacity=".6"/>',
        f'<image href="{avatar}" x="{PADDING}" y="{PADDING}" width="{AVATAR_SIZE}" '
        f'height="{AVATAR_SIZE}" clip-path="url(#a)"/>',
        f'<text x="{INFO_X}" y="{name_y}" class="title">{name}</text>',
        f'<text x="{INFO_X}" y="{username_y}" class="user">@{login}'
        f'{f" · {pronouns}" if pronouns else ""}</text>',
    ]
    for i, line in enumerate(bio_lines):
        parts.append(f'<text x="{INFO_X}" y="{bio_y + i * 12}" class="bio">{line}</text>')
    if twitter:
        parts.append(
            f'<g transform="translate({INFO_X},{twitter_y - 9})">{icon("x", colors.icon, 11)}'
            f'<text x="14" y="9" class="tw">@{twitter}</text></g>'
        )
    parts += [
        f'<g transform="translate({PADDING},{header_y})">{_stat_block(stats, colors.icon)}</g>',
        f'<text x="{PADDING}" y="{BAR_Y - 8}" class="sec">Top Languages</text>',
        f'<rect x="{PADDING}" y="{BAR_Y}" width="{BAR_WIDTH}" height="{BAR_HEIGHT}" rx="4" '
        f'fill="#{colors.text}" opacity=".1"/>',
        f'<g clip-path="url(#b)">{segments}</g>',
    ]
    if not compact:
        parts.append(_language_labels(languages))
    parts.append("</svg>")
    return "\n".join(parts)


def render_snapshot(snapshot: ProfileSnapshot, options: CardOptions | None = None) -> str:
    return render_card(snapshot.user, snapshot.stats, snapshot.languages, options)


def _write_to_file(content: str, output_file: str) -> None:
    """Write content to a file and print confirmation."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    Console(stderr=True).print(f"Saved to {output_file}")


def write_svg(content: str, output_file: str | None = None) -> None:
    """Write rendered SVG to stdout or a file."""
    if output_file:
        _write_to_file(content, output_file)
    else:
        print(content)


def render_json(snapshot: ProfileSnapshot, output_file: str | None = None) -> None:
    """Render a ProfileSnapshot as JSON."""
    content = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)
    if output_file:
        _write_to_file(content, output_file)
    else:
        print(content)
