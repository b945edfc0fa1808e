"""Service Wiring — builds every service for one unit of work.

Invariants:
    - All services in one Services bundle share the same AsyncSession
    - The dependency graph is static: stores first, composers on top

Design Decisions:
    - Plain constructor injection in one factory function, no service locator
    - CredentialService is process-wide (stateless); everything else is per request
"""

from dataclasses import dataclass
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from conduit.infrastructure.credentials import CredentialService
from conduit.services.article_aggregator import ArticleAggregator
from conduit.services.article_store import ArticleStore
from conduit.services.favorite_graph import FavoriteGraph
from conduit.services.follow_graph import FollowGraph
from conduit.services.profile_composer import ProfileComposer
from conduit.services.tag_store import TagStore
from conduit.services.user_directory import UserDirectory, epoch_seconds


@dataclass
class Services:
    users: UserDirectory
    follows: FollowGraph
    favorites: FavoriteGraph
    tags: TagStore
    articles: ArticleStore
    profiles: ProfileComposer
    aggregator: ArticleAggregator


def build_services(
    db: AsyncSession,
    credentials: CredentialService,
    clock: Callable[[], int] = epoch_seconds,
) -> Services:
    users = UserDirectory(db, credentials, clock)
    follows = FollowGraph(db)
    favorites = FavoriteGraph(db)
    tags = TagStore(db)
    articles = ArticleStore(db, tags)
    profiles = ProfileComposer(follows)
    aggregator = ArticleAggregator(users, tags, favorites, profiles)
    return Services(
        users=users,
        follows=follows,
        favorites=favorites,
        tags=tags,
        articles=articles,
        profiles=profiles,
        aggregator=aggregator,
    )
