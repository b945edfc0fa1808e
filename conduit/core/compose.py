"""Read-Model Composition — pure builders for viewer-relative values.

Invariants:
    - No IO, no async: callers fetch, these functions only assemble
    - An anonymous viewer (None) never sees following=True
    - favorites_count is never negative

Design Decisions:
    - following is passed in as an already-computed bool: the builder cannot
      accidentally read stored state (there is none to read)
"""

from uuid import UUID

from conduit.core.domain_types import FavoriteInfo, HydratedArticle, Profile
from conduit.core.repository_protocols import UserLike


def build_profile(subject: UserLike, following: bool) -> Profile:
    return Profile(
        username=subject.username,
        bio=subject.bio,
        image=subject.image,
        following=following,
    )


def anonymous_profile(subject: UserLike) -> Profile:
    """Profile for a caller without a session token."""
    return build_profile(subject, following=False)


def build_favorite_info(
    favorites_count: int, viewer_id: UUID | None, favorited: bool,
) -> FavoriteInfo:
    """Clamp the viewer flag to False for anonymous viewers."""
    return FavoriteInfo(
        favorited=viewer_id is not None and favorited,
        favorites_count=max(favorites_count, 0),
    )


def assemble_article(
    article, author: Profile, favorite_info: FavoriteInfo, tags: list,
) -> HydratedArticle:
    return HydratedArticle(
        article=article,
        author=author,
        favorite_info=favorite_info,
        tags=list(tags),
    )
