"""Profile Routes — read, follow and unfollow by username.

Invariants:
    - Responses always describe the target user, relative to the caller
    - Follow is strict (409 on repeat); unfollow is idempotent
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from conduit.api.deps import get_optional_viewer_id, get_services, get_viewer_id
from conduit.schemas.profile import ProfileResponse, profile_response
from conduit.services.wiring import Services

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    viewer_id: UUID | None = Depends(get_optional_viewer_id),
    services: Services = Depends(get_services),
):
    subject = await services.users.find_by_username(username)
    return profile_response(await services.profiles.compose(subject, viewer_id))


@router.post("/{username}/follow", response_model=ProfileResponse)
async def follow(
    username: str,
    viewer_id: UUID = Depends(get_viewer_id),
    services: Services = Depends(get_services),
):
    subject = await services.users.find_by_username(username)
    await services.follows.follow(viewer_id, subject.id)
    return profile_response(await services.profiles.compose(subject, viewer_id))


@router.delete("/{username}/follow", response_model=ProfileResponse)
async def unfollow(
    username: str,
    viewer_id: UUID = Depends(get_viewer_id),
    services: Services = Depends(get_services),
):
    subject = await services.users.find_by_username(username)
    await services.follows.unfollow(viewer_id, subject.id)
    return profile_response(await services.profiles.compose(subject, viewer_id))
