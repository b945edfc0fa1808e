"""Follow graph — strict follow, idempotent unfollow, no self-follow."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from conduit.core.errors import AlreadyFollowingError, SelfFollowError
from conduit.models.follow import Follow


async def test_follow_then_is_following(services, alice, bob):
    await services.follows.follow(alice.id, bob.id)
    assert await services.follows.is_following(alice.id, bob.id) is True


async def test_follow_is_directed(services, alice, bob):
    await services.follows.follow(alice.id, bob.id)
    assert await services.follows.is_following(bob.id, alice.id) is False


async def test_unfollow_removes_edge(services, alice, bob):
    await services.follows.follow(alice.id, bob.id)
    assert await services.follows.unfollow(alice.id, bob.id) == 1
    assert await services.follows.is_following(alice.id, bob.id) is False


async def test_unfollow_without_edge_is_a_no_op(services, alice, bob):
    assert await services.follows.unfollow(alice.id, bob.id) == 0
    assert await services.follows.is_following(alice.id, bob.id) is False


async def test_second_follow_is_rejected(services, test_db, alice, bob):
    alice_id, bob_id = alice.id, bob.id
    await services.follows.follow(alice_id, bob_id)
    with pytest.raises(AlreadyFollowingError):
        await services.follows.follow(alice_id, bob_id)
    count = await test_db.scalar(select(func.count()).select_from(Follow))
    assert count == 1


async def test_self_follow_is_rejected(services, alice):
    with pytest.raises(SelfFollowError):
        await services.follows.follow(alice.id, alice.id)
    assert await services.follows.is_following(alice.id, alice.id) is False


async def test_is_following_unknown_ids_is_false(services):
    assert await services.follows.is_following(uuid4(), uuid4()) is False


async def test_refollow_after_unfollow(services, alice, bob):
    await services.follows.follow(alice.id, bob.id)
    await services.follows.unfollow(alice.id, bob.id)
    await services.follows.follow(alice.id, bob.id)
    assert await services.follows.is_following(alice.id, bob.id) is True


async def _never_following(follower_id, followee_id):
    return False


async def test_concurrent_duplicate_caught_by_constraint(
    services, test_db, alice, bob, monkeypatch,
):
    alice_id, bob_id = alice.id, bob.id
    test_db.add(Follow(follower_id=alice_id, followee_id=bob_id))
    await test_db.commit()
    # the existence read misses, as it would for a racing request
    monkeypatch.setattr(services.follows, "is_following", _never_following)
    with pytest.raises(AlreadyFollowingError):
        await services.follows.follow(alice_id, bob_id)
    count = await test_db.scalar(select(func.count()).select_from(Follow))
    assert count == 1
