# Standard library imports
from datetime import datetime
from typing import List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from .comment_dto import CommentResponse
from .user_dto import AuthorSummary


class PostCreateRequest(BaseModel):
    """DTO for post creation; trimming and length rules are enforced by the domain"""
    title: Optional[str] = None
    body: Optional[str] = None


class PostUpdateRequest(BaseModel):
    """DTO for post edit (title and body only)"""
    title: Optional[str] = None
    body: Optional[str] = None


class PostResponse(BaseModel):
    """DTO for a post with author and comments resolved"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    body: str
    author: Optional[AuthorSummary] = None
    likes: List[str] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class LikeResponse(BaseModel):
    """DTO for the like toggle result"""
    model_config = ConfigDict(populate_by_name=True)

    liked: bool
    likes_count: int = Field(alias="likesCount")


class MessageResponse(BaseModel):
    message: str
