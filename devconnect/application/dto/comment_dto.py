from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .user_dto import AuthorSummary


class CommentCreateRequest(BaseModel):
    """DTO for adding a comment; length rules are enforced by the domain"""
    text: Optional[str] = None


class CommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    text: str
    user: Optional[AuthorSummary] = None
    post: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
