from .create_post import CreatePostUseCase
from .edit_post import EditPostUseCase
from .delete_post import DeletePostUseCase
from .get_post import GetPostUseCase
from .list_posts import ListPostsUseCase, ListPostsByAuthorUseCase
from .toggle_like import ToggleLikeUseCase

__all__ = [
    "CreatePostUseCase",
    "EditPostUseCase",
    "DeletePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "ListPostsByAuthorUseCase",
    "ToggleLikeUseCase",
]
