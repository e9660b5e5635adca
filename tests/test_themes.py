"""Tests for theme resolution and icons."""

from __future__ import annotations

import pytest

from profile_card.icons import ICONS, icon
from profile_card.models import CardOptions
from profile_card.themes import THEMES, Theme, available_themes, resolve_colors


def test_default_theme_exists():
    default = THEMES["default"]
    assert all(default)


def test_builtin_theme_count():
    assert len(THEMES) == 56
    assert available_themes()[0] == "default"
    for name in ("dark", "dracula", "github_dark", "pearl", "mui_blue", "tokyonight", "grayscale_dark"):
        assert name in THEMES


def test_resolve_named_theme():
    assert resolve_colors(CardOptions(theme="dracula")) == THEMES["dracula"]


@pytest.mark.parametrize("theme", [None, "", "no-such-theme", "DARK"])
def test_resolve_unknown_theme_falls_back_to_default(theme):
    assert resolve_colors(CardOptions(theme=theme)) == THEMES["default"]


def test_resolve_without_options():
    assert resolve_colors() == THEMES["default"]


def test_overrides_replace_individual_colors():
    colors = resolve_colors(CardOptions(theme="dark", title_color="ff0000", border_color="#00ff00"))
    base = THEMES["dark"]
    assert colors == Theme(bg=base.bg, title="ff0000", text=base.text, icon=base.icon, border="00ff00")


@pytest.mark.parametrize("bad", ["red", "12345", "ff0000;}<script>", "#", "  "])
def test_invalid_overrides_are_ignored(bad):
    assert resolve_colors(CardOptions(bg_color=bad)).bg == THEMES["default"].bg


def test_icon_renders_path_with_color():
    snippet = icon("star", "abcdef", 16)
    assert snippet.startswith('<svg width="16" height="16"')
    assert 'fill="#abcdef"' in snippet
    assert ICONS["star"] in snippet


def test_all_card_icons_exist():
    for name in ("star", "commit", "issue", "repo", "pr", "x"):
        assert ICONS[name]
