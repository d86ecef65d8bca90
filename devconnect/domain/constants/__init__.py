"""Constants for domain model field names"""

from .user_fields import UserFields
from .post_fields import PostFields
from .comment_fields import CommentFields

__all__ = [
    "UserFields",
    "PostFields",
    "CommentFields",
]
