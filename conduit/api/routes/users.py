"""User Routes — signup, signin, current user read and update.

Invariants:
    - Signup and signin both return a fresh token in the user envelope
    - GET/PUT /api/user require a valid token and echo it back
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from conduit.api.deps import get_raw_token, get_services, get_viewer_id
from conduit.core.domain_types import UserChanges
from conduit.schemas.user import (
    SigninRequest, SignupRequest, UpdateRequest, UserResponse, user_response,
)
from conduit.services.wiring import Services

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["users"])


@router.post(
    "/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def signup(body: SignupRequest, services: Services = Depends(get_services)):
    """Register a new account."""
    user, token = await services.users.signup(
        body.user.email, body.user.username, body.user.password,
    )
    return user_response(user, token)


@router.post("/users/login", response_model=UserResponse)
async def signin(body: SigninRequest, services: Services = Depends(get_services)):
    user, token = await services.users.signin(body.user.email, body.user.password)
    return user_response(user, token)


@router.get("/user", response_model=UserResponse)
async def current_user(
    viewer_id: UUID = Depends(get_viewer_id),
    token: str | None = Depends(get_raw_token),
    services: Services = Depends(get_services),
):
    user = await services.users.find_by_id(viewer_id)
    return user_response(user, token)


@router.put("/user", response_model=UserResponse)
async def update_user(
    body: UpdateRequest,
    viewer_id: UUID = Depends(get_viewer_id),
    token: str | None = Depends(get_raw_token),
    services: Services = Depends(get_services),
):
    """Partial update — only fields present in the body change."""
    fields = body.user
    user = await services.users.update(viewer_id, UserChanges(
        email=fields.email,
        username=fields.username,
        password=fields.password,
        bio=fields.bio,
        image=fields.image,
    ))
    return user_response(user, token)
