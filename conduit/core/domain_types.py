"""Domain Types — derived read models and partial user changes.

Invariants:
    - Profile, FavoriteInfo and HydratedArticle are derived values, never persisted
    - Profile.following is always relative to one viewer

Design Decisions:
    - Frozen dataclasses for read models: a composed value cannot be patched after
      the fact, so a partial hydration can never leak out
"""

from dataclasses import dataclass, field
from typing import Any


# ─── Read Models ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Profile:
    """Viewer-relative public view of a user."""
    username: str
    bio: str | None
    image: str | None
    following: bool


@dataclass(frozen=True)
class FavoriteInfo:
    """Favorite state of one article as seen by one viewer."""
    favorited: bool
    favorites_count: int


@dataclass(frozen=True)
class HydratedArticle:
    """Article plus everything a reader sees next to it."""
    article: Any
    author: Profile
    favorite_info: FavoriteInfo
    tags: list = field(default_factory=list)


# ─── Mutations ───────────────────────────────────────────────────

@dataclass
class UserChanges:
    """Partial profile update — None means "leave unchanged"."""
    email: str | None = None
    username: str | None = None
    password: str | None = None
    bio: str | None = None
    image: str | None = None

    def provided(self) -> dict[str, Any]:
        """Only the fields the caller actually set."""
        return {
            name: value
            for name, value in (
                ("email", self.email),
                ("username", self.username),
                ("password", self.password),
                ("bio", self.bio),
                ("image", self.image),
            )
            if value is not None
        }
