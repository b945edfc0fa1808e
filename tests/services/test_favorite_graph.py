"""Favorite graph — same convention as follows, counts never double count."""

import pytest
from sqlalchemy import func, select

from conduit.core.errors import AlreadyFavoritedError
from conduit.models.favorite import Favorite


@pytest.fixture
async def article(services, alice):
    return await services.articles.create(alice.id, "Dragons", "d", "b", [])


async def test_favorite_and_count(services, bob, article):
    await services.favorites.favorite(bob.id, article.id)
    assert await services.favorites.is_favorited(bob.id, article.id) is True
    assert await services.favorites.count_favorites(article.id) == 1


async def test_second_favorite_is_rejected_and_count_stays_one(services, bob, article):
    bob_id, article_id = bob.id, article.id
    await services.favorites.favorite(bob_id, article_id)
    with pytest.raises(AlreadyFavoritedError):
        await services.favorites.favorite(bob_id, article_id)
    assert await services.favorites.count_favorites(article_id) == 1


async def test_count_across_users(services, alice, bob, article):
    await services.favorites.favorite(alice.id, article.id)
    await services.favorites.favorite(bob.id, article.id)
    assert await services.favorites.count_favorites(article.id) == 2


async def test_unfavorite(services, bob, article):
    await services.favorites.favorite(bob.id, article.id)
    assert await services.favorites.unfavorite(bob.id, article.id) == 1
    assert await services.favorites.is_favorited(bob.id, article.id) is False
    assert await services.favorites.count_favorites(article.id) == 0


async def test_unfavorite_without_edge_is_a_no_op(services, bob, article):
    assert await services.favorites.unfavorite(bob.id, article.id) == 0


async def test_list_favorited_article_ids(services, alice, bob, article):
    other = await services.articles.create(alice.id, "Other", "d", "b", [])
    await services.favorites.favorite(bob.id, article.id)
    await services.favorites.favorite(bob.id, other.id)
    ids = await services.favorites.list_favorited_article_ids(bob.id)
    assert ids == {article.id, other.id}
    assert await services.favorites.list_favorited_article_ids(alice.id) == set()


async def _never_favorited(user_id, article_id):
    return False


async def test_concurrent_duplicate_caught_by_constraint(
    services, test_db, bob, article, monkeypatch,
):
    bob_id, article_id = bob.id, article.id
    test_db.add(Favorite(user_id=bob_id, article_id=article_id))
    await test_db.commit()
    monkeypatch.setattr(services.favorites, "is_favorited", _never_favorited)
    with pytest.raises(AlreadyFavoritedError):
        await services.favorites.favorite(bob_id, article_id)
    count = await test_db.scalar(select(func.count()).select_from(Favorite))
    assert count == 1
