from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import AuthorSummary, UserResponse, ProfileUpdateRequest
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    PostResponse,
    LikeResponse,
    MessageResponse,
)
from .comment_dto import CommentCreateRequest, CommentResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "AuthorSummary",
    "UserResponse",
    "ProfileUpdateRequest",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
    "LikeResponse",
    "MessageResponse",
    "CommentCreateRequest",
    "CommentResponse",
]
