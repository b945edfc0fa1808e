"""Article Store — create articles with their tags, look them up by slug.

Invariants:
    - An article and its tags are committed together or not at all
    - find_by_slug raises NotFoundError for an unknown slug
    - list_recent is newest first and bounded by `limit`

Design Decisions:
    - Slug = slugified title + 8 hex chars of a fresh UUID; articles.slug's
      unique constraint is the final word on collisions
"""

import logging
import uuid
from typing import Collection, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.core.errors import NotFoundError
from conduit.core.slug import slugify
from conduit.models.article import Article
from conduit.services.tag_store import TagStore

logger = logging.getLogger(__name__)


class ArticleStore:
    def __init__(self, db: AsyncSession, tags: TagStore):
        self.db = db
        self.tags = tags

    async def create(
        self,
        author_id: UUID,
        title: str,
        description: str,
        body: str,
        tag_list: Sequence[str] = (),
    ) -> Article:
        article = Article(
            author_id=author_id,
            slug=slugify(title, uuid.uuid4().hex[:8]),
            title=title,
            description=description,
            body=body,
        )
        self.db.add(article)
        await self.db.flush()
        await self.tags.create_tags(article.id, list(tag_list), commit=False)
        await self.db.commit()
        logger.info(
            "Article created",
            extra={"user_id": author_id, "slug": article.slug},
        )
        return article

    async def find_by_slug(self, slug: str) -> Article:
        result = await self.db.execute(
            select(Article).where(Article.slug == slug).limit(1)
        )
        article = result.scalar_one_or_none()
        if article is None:
            raise NotFoundError("Article", slug)
        return article

    async def list_recent(
        self, limit: int, only_ids: Collection[UUID] | None = None,
    ) -> list[Article]:
        """Newest articles, optionally restricted to `only_ids`."""
        if limit <= 0 or (only_ids is not None and not only_ids):
            return []
        query = select(Article).order_by(Article.created_at.desc()).limit(limit)
        if only_ids is not None:
            query = query.where(Article.id.in_(list(only_ids)))
        result = await self.db.execute(query)
        return list(result.scalars().all())
