"""Article Routes — create, read, favorite/unfavorite, fixed-size listing.

Invariants:
    - Every article response is a full hydration relative to the caller
    - Listing is a single bounded page (no cursors)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from conduit.api.deps import get_optional_viewer_id, get_services, get_viewer_id
from conduit.schemas.article import (
    ArticleListResponse, ArticleResponse, CreateArticleRequest,
    article_body, article_response,
)
from conduit.services.wiring import Services

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.post(
    "", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED,
)
async def create_article(
    body: CreateArticleRequest,
    viewer_id: UUID = Depends(get_viewer_id),
    services: Services = Depends(get_services),
):
    fields = body.article
    article = await services.articles.create(
        viewer_id, fields.title, fields.description, fields.body, fields.tag_list,
    )
    return article_response(await services.aggregator.hydrate(article, viewer_id))


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    favorited: str | None = Query(None, description="username"),
    limit: int = Query(20, ge=1, le=100),
    viewer_id: UUID | None = Depends(get_optional_viewer_id),
    services: Services = Depends(get_services),
):
    """Newest articles, optionally only those favorited by `favorited`."""
    only_ids = None
    if favorited is not None:
        fan = await services.users.find_by_username(favorited)
        only_ids = await services.favorites.list_favorited_article_ids(fan.id)
    articles = await services.articles.list_recent(limit, only_ids)
    hydrated = await services.aggregator.hydrate_many(articles, viewer_id)
    return ArticleListResponse(
        articles=[article_body(h) for h in hydrated],
        articles_count=len(hydrated),
    )


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    viewer_id: UUID | None = Depends(get_optional_viewer_id),
    services: Services = Depends(get_services),
):
    article = await services.articles.find_by_slug(slug)
    return article_response(await services.aggregator.hydrate(article, viewer_id))


@router.post("/{slug}/favorite", response_model=ArticleResponse)
async def favorite_article(
    slug: str,
    viewer_id: UUID = Depends(get_viewer_id),
    services: Services = Depends(get_services),
):
    article = await services.articles.find_by_slug(slug)
    await services.favorites.favorite(viewer_id, article.id)
    return article_response(await services.aggregator.hydrate(article, viewer_id))


@router.delete("/{slug}/favorite", response_model=ArticleResponse)
async def unfavorite_article(
    slug: str,
    viewer_id: UUID = Depends(get_viewer_id),
    services: Services = Depends(get_services),
):
    article = await services.articles.find_by_slug(slug)
    await services.favorites.unfavorite(viewer_id, article.id)
    return article_response(await services.aggregator.hydrate(article, viewer_id))
