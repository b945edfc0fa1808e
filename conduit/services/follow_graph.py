"""Follow Graph — directed follower -> followee edges.

Invariants:
    - follow() is strict: a second follow of the same pair raises AlreadyFollowingError
    - unfollow() is idempotent: deleting a missing edge succeeds
    - Self-follow is rejected with SelfFollowError before touching storage
    - Uniqueness is decided by uq_follows_pair, not by a read-then-write check

Design Decisions:
    - Existence read first (no rollback on the common duplicate path, so objects
      already loaded in the session stay usable), then insert and catch
      IntegrityError for the concurrent-insert race
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.core.errors import AlreadyFollowingError, SelfFollowError, StorageError
from conduit.models.follow import Follow
from conduit.services.integrity import violates

logger = logging.getLogger(__name__)

_PAIR_MARKERS = ("uq_follows_pair", "follows.follower_id, follows.followee_id")


class FollowGraph:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def follow(self, follower_id: UUID, followee_id: UUID) -> None:
        if follower_id == followee_id:
            raise SelfFollowError()
        if await self.is_following(follower_id, followee_id):
            raise AlreadyFollowingError()
        self.db.add(Follow(follower_id=follower_id, followee_id=followee_id))
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if violates(e, *_PAIR_MARKERS):
                raise AlreadyFollowingError()
            logger.error(f"Follow insert failed: {e}", extra={"user_id": follower_id})
            raise StorageError("Integrity constraint violated", "insert")
        logger.info(
            "Follow edge created",
            extra={"user_id": follower_id, "operation": "follow"},
        )

    async def unfollow(self, follower_id: UUID, followee_id: UUID) -> int:
        """Delete the edge; returns the affected row count (0 is not an error)."""
        result = await self.db.execute(
            delete(Follow)
            .where(Follow.follower_id == follower_id)
            .where(Follow.followee_id == followee_id)
        )
        await self.db.commit()
        if not result.rowcount:
            logger.debug("Unfollow with no matching edge", extra={"user_id": follower_id})
        return result.rowcount

    async def is_following(self, follower_id: UUID, followee_id: UUID) -> bool:
        result = await self.db.execute(
            select(Follow.id)
            .where(Follow.follower_id == follower_id)
            .where(Follow.followee_id == followee_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
