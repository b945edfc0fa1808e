"""Tag listing and health probes."""

import conduit.infrastructure.database as database
from tests.services.api_helpers import publish, register


async def test_tags_empty(client):
    res = await client.get("/api/tags")
    assert res.status_code == 200
    assert res.json() == {"tags": []}


async def test_tags_are_recent_and_unique(client):
    token = await register(client, "jake")
    await publish(client, token, "first", ["old"])
    await publish(client, token, "second", ["web", "rust", "web"])
    res = await client.get("/api/tags")
    tags = res.json()["tags"]
    assert tags[:2] == ["web", "rust"]
    assert len(tags) == len(set(tags))
    assert "old" in tags


async def test_tags_bounded_by_recent_limit(client):
    token = await register(client, "jake")
    await publish(client, token, "many", [f"t{i}" for i in range(8)])
    res = await client.get("/api/tags")
    assert res.json()["tags"] == ["t7", "t6", "t5", "t4", "t3"]


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_pool_is_503(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
