"""Article Aggregator — hydrates an article with tags, favorite info and author profile.

Invariants:
    - The caller gets a complete HydratedArticle or an exception, never a partial one
    - Any sub-fetch failure propagates unchanged (no zeroed counts, no empty tags
      standing in for an error)
    - favorited is False for anonymous viewers

Design Decisions:
    - Sub-fetches run one after another on the unit of work's AsyncSession:
      an AsyncSession must not be used by concurrent tasks, and the reads are
      independent so their order carries no meaning
    - Collaborators injected as Protocols (core/repository_protocols.py)
"""

import logging
from typing import Iterable
from uuid import UUID

from conduit.core.compose import assemble_article, build_favorite_info
from conduit.core.domain_types import HydratedArticle
from conduit.core.repository_protocols import (
    ArticleLike, FavoriteLookup, ProfileSource, TagLookup, UserLookup,
)

logger = logging.getLogger(__name__)


class ArticleAggregator:
    def __init__(
        self,
        users: UserLookup,
        tags: TagLookup,
        favorites: FavoriteLookup,
        profiles: ProfileSource,
    ):
        self.users = users
        self.tags = tags
        self.favorites = favorites
        self.profiles = profiles

    async def hydrate(
        self, article: ArticleLike, viewer_id: UUID | None,
    ) -> HydratedArticle:
        tags = await self.tags.list_tags(article.id)
        favorites_count = await self.favorites.count_favorites(article.id)
        favorited = (
            viewer_id is not None
            and await self.favorites.is_favorited(viewer_id, article.id)
        )
        author = await self.users.find_by_id(article.author_id)
        profile = await self.profiles.compose(author, viewer_id)
        return assemble_article(
            article,
            profile,
            build_favorite_info(favorites_count, viewer_id, favorited),
            tags,
        )

    async def hydrate_many(
        self, articles: Iterable[ArticleLike], viewer_id: UUID | None,
    ) -> list[HydratedArticle]:
        return [await self.hydrate(article, viewer_id) for article in articles]
