# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import ValidationError
from .text_rules import clean_body, clean_title


@dataclass
class Post:
    """
    Pure domain model for Post entity.
    
    A post is the aggregate root for its likes and comment references:
    ``likes`` holds user ids with no duplicates and ``comment_ids`` holds
    comment ids in creation order. The comments themselves live in their
    own collection and are kept in sync by the post repository.
    """
    id: Optional[str]
    title: str
    body: str
    author_id: str
    likes: List[str] = field(default_factory=list)
    comment_ids: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        self.title = clean_title(self.title)
        self.body = clean_body(self.body)
        if not self.author_id:
            raise ValidationError("Author is required")
        if len(set(self.likes)) != len(self.likes):
            raise ValidationError("A user can like a post only once")

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.likes
