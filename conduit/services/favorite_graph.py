"""Favorite Graph — user -> article favorite edges and counts.

Invariants:
    - Same convention as the follow graph: strict insert, idempotent delete
    - count_favorites counts edges, and there is at most one edge per (user, article)

Design Decisions:
    - Existence read first, uq_favorites_pair catches the concurrent-insert race
"""

import logging
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.core.errors import AlreadyFavoritedError, StorageError
from conduit.models.favorite import Favorite
from conduit.services.integrity import violates

logger = logging.getLogger(__name__)

_PAIR_MARKERS = ("uq_favorites_pair", "favorites.user_id, favorites.article_id")


class FavoriteGraph:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def favorite(self, user_id: UUID, article_id: UUID) -> None:
        if await self.is_favorited(user_id, article_id):
            raise AlreadyFavoritedError()
        self.db.add(Favorite(user_id=user_id, article_id=article_id))
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if violates(e, *_PAIR_MARKERS):
                raise AlreadyFavoritedError()
            logger.error(f"Favorite insert failed: {e}", extra={"user_id": user_id})
            raise StorageError("Integrity constraint violated", "insert")

    async def unfavorite(self, user_id: UUID, article_id: UUID) -> int:
        result = await self.db.execute(
            delete(Favorite)
            .where(Favorite.user_id == user_id)
            .where(Favorite.article_id == article_id)
        )
        await self.db.commit()
        return result.rowcount

    async def count_favorites(self, article_id: UUID) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Favorite)
            .where(Favorite.article_id == article_id)
        )
        return result.scalar_one()

    async def is_favorited(self, user_id: UUID, article_id: UUID) -> bool:
        result = await self.db.execute(
            select(Favorite.id)
            .where(Favorite.user_id == user_id)
            .where(Favorite.article_id == article_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_favorited_article_ids(self, user_id: UUID) -> set[UUID]:
        result = await self.db.execute(
            select(Favorite.article_id).where(Favorite.user_id == user_id)
        )
        return set(result.scalars().all())
