# Standard library imports
from datetime import datetime
from typing import List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from ...domain.models.user import User


class AuthorSummary(BaseModel):
    """Public projection of a user embedded in posts and comments (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    bio: str = ""
    skills: List[str] = Field(default_factory=list)
    avatar: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class ProfileUpdateRequest(BaseModel):
    """DTO for profile edit; omitted fields keep their current value"""
    name: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    avatar: Optional[str] = None


def to_author_summary(user: User) -> AuthorSummary:
    return AuthorSummary(id=user.id or "", name=user.name, email=user.email)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
        bio=user.bio,
        skills=list(user.skills),
        avatar=user.avatar,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
