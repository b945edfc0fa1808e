"""Service test fixtures — async DB, wired services and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - Route tests seed data through the API, not through test_db, so the two
      never interleave on the shared in-memory connection

Design Decisions:
    - SQLite in-memory with StaticPool: one connection, fast, no external dependency
    - Short token TTL in the credential fixture: nothing depends on 24h tokens
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import conduit.models  # noqa: F401
from conduit.db.base import Base
from conduit.infrastructure.credentials import CredentialService
from conduit.infrastructure.database import get_db
from conduit.main import app
from conduit.services.wiring import build_services


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def credentials():
    return CredentialService("service-test-secret", token_ttl_seconds=3600)


@pytest.fixture
def services(test_db, credentials):
    return build_services(test_db, credentials)


@pytest.fixture
async def alice(services):
    user, _ = await services.users.signup("alice@example.com", "alice", "alice-pass")
    return user


@pytest.fixture
async def bob(services):
    user, _ = await services.users.signup("bob@example.com", "bob", "bob-pass")
    return user


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
