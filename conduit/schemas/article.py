"""Article Schemas — create request, hydrated article response, tag list.

Invariants:
    - tagList order in responses is insertion order
    - Tag names are stripped, non-empty and fit tags.name (64 chars)
    - tags response de-duplicates names (first occurrence wins, order kept)

Design Decisions:
    - camelCase field names via alias: RealWorld wire format, snake_case in Python
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from conduit.core.domain_types import HydratedArticle
from conduit.schemas.profile import ProfileBody, profile_body


TagName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64),
]


class ArticleFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=255)
    description: str = Field("", max_length=1000)
    body: str = Field("", max_length=100_000)
    tag_list: list[TagName] = Field(
        default_factory=list, alias="tagList", max_length=20,
    )


class CreateArticleRequest(BaseModel):
    article: ArticleFields


class ArticleBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slug: str
    title: str
    description: str
    body: str
    tag_list: list[str] = Field(alias="tagList")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    favorited: bool
    favorites_count: int = Field(alias="favoritesCount")
    author: ProfileBody


class ArticleResponse(BaseModel):
    article: ArticleBody


class ArticleListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    articles: list[ArticleBody]
    articles_count: int = Field(alias="articlesCount")


class TagsResponse(BaseModel):
    tags: list[str]


def article_body(hydrated: HydratedArticle) -> ArticleBody:
    article = hydrated.article
    return ArticleBody(
        slug=article.slug,
        title=article.title,
        description=article.description,
        body=article.body,
        tag_list=[tag.name for tag in hydrated.tags],
        created_at=article.created_at,
        updated_at=article.updated_at,
        favorited=hydrated.favorite_info.favorited,
        favorites_count=hydrated.favorite_info.favorites_count,
        author=profile_body(hydrated.author),
    )


def article_response(hydrated: HydratedArticle) -> ArticleResponse:
    return ArticleResponse(article=article_body(hydrated))


def tags_response(tags: list) -> TagsResponse:
    return TagsResponse(tags=list(dict.fromkeys(tag.name for tag in tags)))
