"""Data models for profile-card."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class UserProfile:
    login: str
    name: str | None = None
    avatar_url: str | None = None
    avatar_data_url: str | None = None
    bio: str | None = None
    pronouns: str | None = None
    twitter: str | None = None


@dataclass(frozen=True)
class UserStats:
    stars: int = 0
    repos: int = 0
    prs: int = 0
    issues: int = 0
    commits: int = 0


@dataclass(frozen=True)
class LanguageStat:
    name: str
    size: int
    color: str


@dataclass(frozen=True)
class ProfileSnapshot:
    """Aggregated result of one upstream fetch; the unit of caching."""

    user: UserProfile
    stats: UserStats
    languages: tuple[LanguageStat, ...] = ()
    truncated: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["languages"] = [asdict(lang) for lang in self.languages]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProfileSnapshot:
        """Build a snapshot from a dict produced by ``to_dict``.

        Optional fields may be absent; ``user.login`` is required.
        """
        user = data["user"]
        stats = data.get("stats") or {}
        return cls(
            user=UserProfile(
                login=user["login"],
                name=user.get("name"),
                avatar_url=user.get("avatar_url"),
                avatar_data_url=user.get("avatar_data_url"),
                bio=user.get("bio"),
                pronouns=user.get("pronouns"),
                twitter=user.get("twitter"),
            ),
            stats=UserStats(
                stars=int(stats.get("stars", 0)),
                repos=int(stats.get("repos", 0)),
                prs=int(stats.get("prs", 0)),
                issues=int(stats.get("issues", 0)),
                commits=int(stats.get("commits", 0)),
            ),
            languages=tuple(
                LanguageStat(name=lang["name"], size=int(lang["size"]), color=lang["color"])
                for lang in data.get("languages") or []
            ),
            truncated=bool(data.get("truncated", False)),
        )


@dataclass
class CardOptions:
    theme: str | None = None
    title_color: str | None = None
    text_color: str | None = None
    icon_color: str | None = None
    bg_color: str | None = None
    border_color: str | None = None
    hide_border: bool = False
    compact: bool = False
