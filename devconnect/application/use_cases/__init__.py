from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    GetUserUseCase,
    ListUsersUseCase,
    UpdateProfileUseCase,
)
from .post import (
    CreatePostUseCase,
    EditPostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ListPostsByAuthorUseCase,
    ToggleLikeUseCase,
)
from .comment import (
    AddCommentUseCase,
    ListCommentsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateProfileUseCase",
    "CreatePostUseCase",
    "EditPostUseCase",
    "DeletePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "ListPostsByAuthorUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "ListCommentsUseCase",
]
