from .add_comment import AddCommentUseCase
from .list_comments import ListCommentsUseCase

__all__ = ["AddCommentUseCase", "ListCommentsUseCase"]
