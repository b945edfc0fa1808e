"""User Schemas — signup, signin, update and the authenticated user envelope.

Invariants:
    - Passwords: 1-128 chars on the way in, never on the way out
    - username: 1-64 chars, stripped, no whitespace
    - UserUpdate fields are all optional; omitted means unchanged

Design Decisions:
    - Request bodies wrapped in {"user": {...}}: RealWorld API shape
"""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

_USERNAME = re.compile(r"^\S+$")


def _clean_username(v: str) -> str:
    v = v.strip()
    if not _USERNAME.match(v):
        raise ValueError("username cannot be empty or contain whitespace")
    return v


class SignupFields(BaseModel):
    email: EmailStr
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return _clean_username(v)


class SignupRequest(BaseModel):
    user: SignupFields


class SigninFields(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class SigninRequest(BaseModel):
    user: SigninFields


class UpdateFields(BaseModel):
    email: EmailStr | None = None
    username: str | None = Field(None, min_length=1, max_length=64)
    password: str | None = Field(None, min_length=1, max_length=128)
    bio: str | None = Field(None, max_length=5000)
    image: str | None = Field(None, max_length=2048)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str | None) -> str | None:
        return None if v is None else _clean_username(v)


class UpdateRequest(BaseModel):
    user: UpdateFields


class UserBody(BaseModel):
    email: str
    token: str | None = None
    username: str
    bio: str | None = None
    image: str | None = None


class UserResponse(BaseModel):
    user: UserBody


def user_response(user, token: str | None) -> UserResponse:
    return UserResponse(user=UserBody(
        email=user.email,
        token=token,
        username=user.username,
        bio=user.bio,
        image=user.image,
    ))
