"""Boundary Protocols — contracts between the composers and the graph stores.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Composers (profile, article) see stores only through these Protocols
    - Implementations provided by the service layer via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: lookups do IO; the pure parts of composition
      (core/compose.py) are never async themselves
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from conduit.core.domain_types import Profile


class UserLike(Protocol):
    """Structural contract for User objects handed to composers."""
    id: UUID
    username: str
    bio: str | None
    image: str | None


class ArticleLike(Protocol):
    """Structural contract for Article objects handed to the aggregator."""
    id: UUID
    author_id: UUID
    slug: str
    created_at: datetime


class TagLike(Protocol):
    id: UUID
    article_id: UUID
    name: str


class FollowLookup(Protocol):
    """Read side of the follow graph."""
    async def is_following(self, follower_id: UUID, followee_id: UUID) -> bool: ...


class FavoriteLookup(Protocol):
    """Read side of the favorite graph."""
    async def count_favorites(self, article_id: UUID) -> int: ...
    async def is_favorited(self, user_id: UUID, article_id: UUID) -> bool: ...


class TagLookup(Protocol):
    async def list_tags(self, article_id: UUID) -> list[TagLike]: ...


class UserLookup(Protocol):
    async def find_by_id(self, user_id: UUID) -> UserLike: ...


class ProfileSource(Protocol):
    """Anything that turns (subject, viewer) into a Profile."""
    async def compose(
        self, subject: UserLike, viewer_id: UUID | None,
    ) -> Profile: ...
