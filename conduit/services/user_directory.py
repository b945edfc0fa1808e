"""User Directory — signup, signin, lookups and profile updates.

Invariants:
    - Passwords are hashed by the credential service before any write
    - DuplicateEmailError vs DuplicateUsernameError is decided by which unique
      constraint fired, so two racing signups cannot both succeed
    - signin raises InvalidCredentialsError for an unknown email and for a wrong
      password alike
    - An unknown email still pays one password verification
    - update() only touches the fields that were provided; last write wins

Design Decisions:
    - Availability read before the write gives a precise error without a
      rollback; the constraint classification covers the concurrent race
    - Clock injected as a callable returning epoch seconds: token iat is testable
"""

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.core.domain_types import UserChanges
from conduit.core.errors import (
    ConduitError, DuplicateEmailError, DuplicateUsernameError,
    InvalidCredentialsError, NotFoundError, StorageError,
)
from conduit.infrastructure.credentials import CredentialService
from conduit.models.user import User
from conduit.services.integrity import violates

logger = logging.getLogger(__name__)


def epoch_seconds() -> int:
    return int(datetime.now(timezone.utc).timestamp())


def _duplicate_error(
    exc: IntegrityError, email: str | None, username: str | None,
) -> ConduitError:
    if violates(exc, "uq_users_username", "users.username"):
        return DuplicateUsernameError(username or "")
    if violates(exc, "uq_users_email", "users.email"):
        return DuplicateEmailError(email or "")
    logger.error(f"Unclassified user integrity error: {exc}")
    return StorageError("Integrity constraint violated", "insert")


class UserDirectory:
    def __init__(
        self,
        db: AsyncSession,
        credentials: CredentialService,
        clock: Callable[[], int] = epoch_seconds,
    ):
        self.db = db
        self.credentials = credentials
        self.clock = clock

    async def signup(
        self, email: str, username: str, password: str,
    ) -> tuple[User, str]:
        """Create the user and a token bound to its id."""
        await self._ensure_available(email, username)
        hashed = self.credentials.hash(password)
        user = User(email=email, username=username, password=hashed)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise _duplicate_error(e, email, username)
        logger.info("User signed up", extra={"user_id": user.id, "username": username})
        return user, self.credentials.issue_token(user.id, self.clock())

    async def signin(self, email: str, password: str) -> tuple[User, str]:
        try:
            user = await self.find_by_email(email)
        except NotFoundError:
            self.credentials.dummy_verify()
            logger.info("Signin for unknown email")
            raise InvalidCredentialsError()
        if not self.credentials.verify(password, user.password):
            logger.info("Signin with wrong password", extra={"user_id": user.id})
            raise InvalidCredentialsError()
        return user, self.credentials.issue_token(user.id, self.clock())

    async def find_by_id(self, user_id: UUID) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def find_by_username(self, username: str) -> User:
        result = await self.db.execute(
            select(User).where(User.username == username).limit(1)
        )
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError("User", username)
        return user

    async def find_by_email(self, email: str) -> User:
        result = await self.db.execute(
            select(User).where(User.email == email).limit(1)
        )
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError("User", email)
        return user

    async def update(self, user_id: UUID, changes: UserChanges) -> User:
        user = await self.find_by_id(user_id)
        values = changes.provided()
        if not values:
            return user
        if "password" in values:
            values["password"] = self.credentials.hash(values["password"])
        await self._ensure_available(
            values.get("email"), values.get("username"), exclude_id=user.id,
        )
        for name, value in values.items():
            setattr(user, name, value)
        user.updated_at = datetime.now(timezone.utc)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise _duplicate_error(e, changes.email, changes.username)
        return user

    async def _ensure_available(
        self,
        email: str | None,
        username: str | None,
        exclude_id: UUID | None = None,
    ) -> None:
        """Raise the matching duplicate error if another user holds email/username."""
        if email is not None:
            query = select(User.id).where(User.email == email)
            if exclude_id is not None:
                query = query.where(User.id != exclude_id)
            if (await self.db.execute(query.limit(1))).scalar_one_or_none():
                raise DuplicateEmailError(email)
        if username is not None:
            query = select(User.id).where(User.username == username)
            if exclude_id is not None:
                query = query.where(User.id != exclude_id)
            if (await self.db.execute(query.limit(1))).scalar_one_or_none():
                raise DuplicateUsernameError(username)
