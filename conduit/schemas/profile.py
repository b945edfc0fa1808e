"""Profile Schemas — wire shape of a viewer-relative Profile."""

from pydantic import BaseModel

from conduit.core.domain_types import Profile


class ProfileBody(BaseModel):
    username: str
    bio: str | None = None
    image: str | None = None
    following: bool = False


class ProfileResponse(BaseModel):
    profile: ProfileBody


def profile_body(profile: Profile) -> ProfileBody:
    return ProfileBody(
        username=profile.username,
        bio=profile.bio,
        image=profile.image,
        following=profile.following,
    )


def profile_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(profile=profile_body(profile))
