"""Article aggregator — hydration with fakes, and failure propagation."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from conduit.core.errors import NotFoundError, StorageError
from conduit.services.article_aggregator import ArticleAggregator
from conduit.services.profile_composer import ProfileComposer


@dataclass
class FakeUser:
    id: UUID
    username: str
    bio: str | None = None
    image: str | None = None


@dataclass
class FakeArticle:
    id: UUID
    author_id: UUID
    slug: str = "dragons-0000aaaa"
    title: str = "Dragons"
    description: str = "d"
    body: str = "b"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class FakeTag:
    article_id: UUID
    name: str


class FakeUsers:
    def __init__(self, *users):
        self.by_id = {u.id: u for u in users}

    async def find_by_id(self, user_id):
        if user_id not in self.by_id:
            raise NotFoundError("User", str(user_id))
        return self.by_id[user_id]


class FakeTags:
    def __init__(self, tags):
        self.tags = tags

    async def list_tags(self, article_id):
        return [t for t in self.tags if t.article_id == article_id]


class FakeFavorites:
    def __init__(self, edges):
        self.edges = set(edges)
        self.is_favorited_calls = 0

    async def count_favorites(self, article_id):
        return sum(1 for _, a in self.edges if a == article_id)

    async def is_favorited(self, user_id, article_id):
        self.is_favorited_calls += 1
        return (user_id, article_id) in self.edges


class FakeFollows:
    async def is_following(self, follower_id, followee_id):
        return False


class BrokenTags:
    async def list_tags(self, article_id):
        raise StorageError("connection lost", "select")


@pytest.fixture
def author():
    return FakeUser(uuid4(), "jake")


@pytest.fixture
def article(author):
    return FakeArticle(uuid4(), author.id)


def _aggregator(author, tags, favorites):
    return ArticleAggregator(
        FakeUsers(author), tags, favorites, ProfileComposer(FakeFollows()),
    )


async def test_hydrate_favorited_by_viewer(author, article):
    viewer = uuid4()
    tags = FakeTags([FakeTag(article.id, "rust"), FakeTag(article.id, "web")])
    favorites = FakeFavorites({(viewer, article.id)})
    hydrated = await _aggregator(author, tags, favorites).hydrate(article, viewer)
    assert [t.name for t in hydrated.tags] == ["rust", "web"]
    assert hydrated.favorite_info.favorited is True
    assert hydrated.favorite_info.favorites_count == 1
    assert hydrated.author.username == "jake"
    assert hydrated.article is article


async def test_hydrate_for_anonymous_viewer(author, article):
    favorites = FakeFavorites({(uuid4(), article.id), (uuid4(), article.id)})
    hydrated = await _aggregator(author, FakeTags([]), favorites).hydrate(article, None)
    assert hydrated.favorite_info.favorited is False
    assert hydrated.favorite_info.favorites_count == 2
    assert hydrated.tags == []
    assert favorites.is_favorited_calls == 0


async def test_failing_sub_fetch_propagates(author, article):
    aggregator = _aggregator(author, BrokenTags(), FakeFavorites(set()))
    with pytest.raises(StorageError):
        await aggregator.hydrate(article, uuid4())


async def test_missing_author_propagates(article):
    stranger = FakeUser(uuid4(), "stranger")
    aggregator = _aggregator(stranger, FakeTags([]), FakeFavorites(set()))
    with pytest.raises(NotFoundError):
        await aggregator.hydrate(article, None)


async def test_hydrate_many_keeps_order(author):
    first = FakeArticle(uuid4(), author.id, slug="first")
    second = FakeArticle(uuid4(), author.id, slug="second")
    aggregator = _aggregator(author, FakeTags([]), FakeFavorites(set()))
    hydrated = await aggregator.hydrate_many([first, second], None)
    assert [h.article.slug for h in hydrated] == ["first", "second"]


async def test_hydrate_against_database(services, alice, bob):
    article = await services.articles.create(
        alice.id, "How to train your dragon", "d", "b", ["dragons", "training"],
    )
    await services.follows.follow(bob.id, alice.id)
    await services.favorites.favorite(bob.id, article.id)
    hydrated = await services.aggregator.hydrate(article, bob.id)
    assert [t.name for t in hydrated.tags] == ["dragons", "training"]
    assert hydrated.favorite_info.favorited is True
    assert hydrated.favorite_info.favorites_count == 1
    assert hydrated.author.username == "alice"
    assert hydrated.author.following is True
