"""API Dependencies — session token extraction and per-request service wiring.

Invariants:
    - One AsyncSession per request, shared by every service (FastAPI caches get_db)
    - Authorization header accepted as "Token <jwt>" or "Bearer <jwt>"
    - Missing header => anonymous viewer (None) for optional routes,
      InvalidTokenError for routes that require a viewer
    - A present but bad/expired token is always an error, never silently anonymous

Design Decisions:
    - CredentialService cached per process: it is stateless
"""

from functools import lru_cache
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.config import get_settings
from conduit.core.errors import InvalidTokenError
from conduit.infrastructure.credentials import CredentialService
from conduit.infrastructure.database import get_db
from conduit.services.wiring import Services, build_services

_SCHEMES = ("token", "bearer")


@lru_cache
def get_credential_service() -> CredentialService:
    settings = get_settings()
    return CredentialService(
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
        token_ttl_seconds=settings.token_ttl_seconds,
    )


def get_services(
    db: AsyncSession = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
) -> Services:
    return build_services(db, credentials)


def extract_token(authorization: str | None) -> str | None:
    """Pull the raw token out of an Authorization header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() not in _SCHEMES or not token.strip():
        raise InvalidTokenError()
    return token.strip()


def get_optional_viewer_id(
    authorization: str | None = Header(None),
    credentials: CredentialService = Depends(get_credential_service),
) -> UUID | None:
    token = extract_token(authorization)
    if token is None:
        return None
    return credentials.verify_token(token)


def get_viewer_id(
    viewer_id: UUID | None = Depends(get_optional_viewer_id),
) -> UUID:
    if viewer_id is None:
        raise InvalidTokenError()
    return viewer_id


def get_raw_token(authorization: str | None = Header(None)) -> str | None:
    return extract_token(authorization)
