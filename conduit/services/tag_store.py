"""Tag Store — ordered article -> tag associations.

Invariants:
    - create_tags returns tags in input order; empty input is not an error
    - list_tags returns tags in insertion order (created_at, then position)
    - list_recent is newest first and never longer than `limit`
    - Duplicate names are stored as given

Design Decisions:
    - One timestamp per batch plus a position index: ordering survives clocks
      that cannot tell two inserts in the same batch apart
    - commit=False lets the article store write an article and its tags in
      one transaction
"""

from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.models.tag import Tag


class TagStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_tags(
        self, article_id: UUID, names: Sequence[str], commit: bool = True,
    ) -> list[Tag]:
        if not names:
            return []
        now = datetime.now(timezone.utc)
        tags = [
            Tag(
                article_id=article_id, name=name, position=position,
                created_at=now, updated_at=now,
            )
            for position, name in enumerate(names)
        ]
        self.db.add_all(tags)
        if commit:
            await self.db.commit()
        else:
            await self.db.flush()
        return tags

    async def list_tags(self, article_id: UUID) -> list[Tag]:
        result = await self.db.execute(
            select(Tag)
            .where(Tag.article_id == article_id)
            .order_by(Tag.created_at, Tag.position)
        )
        return list(result.scalars().all())

    async def list_recent(self, limit: int) -> list[Tag]:
        if limit <= 0:
            return []
        result = await self.db.execute(
            select(Tag)
            .order_by(Tag.created_at.desc(), Tag.position.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
