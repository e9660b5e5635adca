"""Built-in card palettes and color resolution.

Hex values are stored without the leading "#".
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .models import CardOptions

_HEX_COLOR = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class Theme(NamedTuple):
    bg: str
    title: str
    text: str
    icon: str
    border: str


DEFAULT_THEME_NAME = "default"

THEMES: dict[str, Theme] = {
    "default": Theme("fffefe", "2f80ed", "434d58", "4c71f2", "e4e2e2"),
    # dark
    "dark": Theme("151515", "fff", "9f9f9f", "79ff97", "2a2a2a"),
    "dracula": Theme("282a36", "ff6e96", "f8f8f2", "bd93f9", "44475a"),
    "monokai": Theme("272822", "f92672", "f8f8f2", "a6e22e", "3e3d32"),
    "nord": Theme("2e3440", "88c0d0", "d8dee9", "81a1c1", "3b4252"),
    "github_dark": Theme("0d1117", "58a6ff", "c9d1d9", "1f6feb", "21262d"),
    "slate": Theme("0b1220", "e2e8f0", "94a3b8", "38bdf8", "1f2937"),
    "midnight": Theme("0f172a", "38bdf8", "cbd5e1", "818cf8", "1e293b"),
    "highcontrast": Theme("000", "e7f216", "fff", "00ffff", "333"),
    # light
    "pearl": Theme("f7f7f5", "1f2328", "3d444d", "0969da", "e6e8eb"),
    "ice": Theme("f0f9ff", "0369a1", "075985", "0ea5e9", "dbeafe"),
    "sand": Theme("fbf7f0", "6b4e2e", "7a6754", "d97706", "eadfce"),
    # pastel
    "pastel_peach": Theme("fff1f2", "fb7185", "7f1d1d", "fda4af", "ffe4e6"),
    "pastel_mint": Theme("f0fdf4", "4ade80", "14532d", "86efac", "dcfce7"),
    "pastel_lavender": Theme("f5f3ff", "a78bfa", "4c1d95", "c4b5fd", "ede9fe"),
    "pastel_lemon": Theme("fefce8", "facc15", "713f12", "fde68a", "fef9c3"),
    "pastel_rose": Theme("fff1f5", "f472b6", "831843", "f9a8d4", "fce7f3"),
    # material
    "mui_blue": Theme("e3f2fd", "1976d2", "0d47a1", "42a5f5", "bbdefb"),
    "mui_indigo": Theme("e8eaf6", "3f51b5", "1a237e", "5c6bc0", "c5cae9"),
    "mui_teal": Theme("e0f2f1", "00796b", "004d40", "26a69a", "b2dfdb"),
    "mui_deep_purple": Theme("ede7f6", "673ab7", "311b92", "9575cd", "d1c4e9"),
    "mui_orange": Theme("fff3e0", "f57c00", "e65100", "ff9800", "ffe0b2"),
    "mui_red": Theme("ffebee", "d32f2f", "b71c1c", "ef5350", "ffcdd2"),
    # vscode
    "vscode_dark_plus": Theme("1e1e1e", "569cd6", "d4d4d4", "c586c0", "2d2d2d"),
    "vscode_light": Theme("ffffff", "0066bf", "333333", "795e26", "e5e5e5"),
    "vscode_monokai_pro": Theme("2d2a2e", "ff6188", "fcfcfa", "a9dc76", "403e41"),
    "vscode_night_owl": Theme("011627", "82aaff", "d6deeb", "c792ea", "1d3b53"),
    "vscode_palenight": Theme("292d3e", "c792ea", "a6accd", "89ddff", "3a3f58"),
    # brand
    "twitter": Theme("15202b", "1da1f2", "e1e8ed", "1da1f2", "38444d"),
    "discord": Theme("2c2f33", "5865f2", "ffffff", "99aab5", "23272a"),
    "spotify": Theme("121212", "1db954", "b3b3b3", "1ed760", "282828"),
    "github_light": Theme("ffffff", "24292e", "57606a", "0969da", "d0d7de"),
    "youtube": Theme("181818", "ff0000", "ffffff", "ff4e45", "303030"),
    "instagram": Theme("1e1e1e", "e1306c", "f5f5f5", "fd1d1d", "2a2a2a"),
    # neon
    "radical": Theme("141321", "fe428e", "a9fef7", "f8d847", "2a2a40"),
    "cyberpunk": Theme("14001f", "ff00ff", "00ffff", "fcee0c", "2a003f"),
    "synthwave": Theme("2b213a", "e2e9ec", "e5289e", "ef8539", "3e2f5a"),
    "oceanic": Theme("0c1e26", "00c2ff", "9be7ff", "00ffa3", "123844"),
    "mint": Theme("0f1f1c", "5eead4", "99f6e4", "2dd4bf", "1b3a34"),
    "royal": Theme("1a1a2e", "ffd700", "eaeaea", "8a2be2", "2e2e4d"),
    # natural
    "gruvbox": Theme("282828", "fabd2f", "ebdbb2", "fe8019", "3c3836"),
    "merko": Theme("0a0f0b", "abd200", "68b587", "b7d364", "1a2f1a"),
    "forest": Theme("0f1b17", "b7f7d9", "86a995", "34d399", "17332a"),
    "rose": Theme("1a0f14", "ffd0dd", "e6b0c0", "fb7185", "2b1a22"),
    "sunset": Theme("2a1a1f", "ff7a59", "ffd6c2", "ffb347", "40252b"),
    "lavender": Theme("1e1b2e", "c084fc", "e9d5ff", "a78bfa", "312e4a"),
    "ember": Theme("1a0f0f", "ff4500", "ffb3a7", "ff6347", "331a1a"),
    "tokyonight": Theme("1a1b27", "70a5fd", "38bdae", "bf91f3", "2a2b3d"),
    "onedark": Theme("282c34", "e4bf7a", "abb2bf", "8eb573", "3e4451"),
    "cobalt": Theme("193549", "e683d9", "75eeb2", "0480ef", "2a4a6a"),
    # amoled
    "amoled_blue": Theme("000000", "00bfff", "b3e5fc", "1e90ff", "0a0a0a"),
    "amoled_green": Theme("000000", "00ff7f", "ccffcc", "00fa9a", "0d0d0d"),
    "amoled_purple": Theme("000000", "bb86fc", "e0c3fc", "9d4edd", "121212"),
    # grayscale
    "grayscale_light": Theme("f5f5f5", "111111", "555555", "888888", "dddddd"),
    "grayscale_mid": Theme("2b2b2b", "ffffff", "bbbbbb", "999999", "3c3c3c"),
    "grayscale_dark": Theme("121212", "e0e0e0", "9e9e9e", "bdbdbd", "1f1f1f"),
}


def available_themes() -> list[str]:
    return list(THEMES)


def _clean_color(value: str | None) -> str | None:
    if not value:
        return None
    value = value.strip().lstrip("#")
    return value if _HEX_COLOR.match(value) else None


def resolve_colors(options: CardOptions | None = None) -> Theme:
    """Merge the named theme with per-color overrides.

    Unknown theme names fall back to the default palette; overrides that are
    not plain hex colors are ignored.
    """
    options = options or CardOptions()
    base = THEMES.get(options.theme or DEFAULT_THEME_NAME) or THEMES[DEFAULT_THEME_NAME]
    return Theme(
        bg=_clean_color(options.bg_color) or base.bg,
        title=_clean_color(options.title_color) or base.title,
        text=_clean_color(options.text_color) or base.text,
        icon=_clean_color(options.icon_color) or base.icon,
        border=_clean_color(options.border_color) or base.border,
    )
