"""Tag Routes — recent tag names across all articles."""

from fastapi import APIRouter, Depends

from conduit.api.deps import get_services
from conduit.config import get_settings
from conduit.schemas.article import TagsResponse, tags_response
from conduit.services.wiring import Services

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get("", response_model=TagsResponse)
async def list_tags(services: Services = Depends(get_services)):
    tags = await services.tags.list_recent(get_settings().recent_tags_limit)
    return tags_response(tags)
