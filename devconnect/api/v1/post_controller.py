# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.comment_dto import CommentCreateRequest, CommentResponse
from ...application.dto.post_dto import (
    LikeResponse,
    MessageResponse,
    PostCreateRequest,
    PostResponse,
    PostUpdateRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    EditPostUseCase,
    GetPostUseCase,
    ListPostsByAuthorUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
)
from ...application.use_cases.comment import AddCommentUseCase, ListCommentsUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """
    Create a post authored by the current user
    
    Args:
        request: Post creation request (title, body)
        current_user: Current authenticated user (from dependency)
        
    Returns:
        PostResponse with the author resolved
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)
    return await create_post_use_case.execute(request=request, author_id=current_user.id)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    current_user: UserResponse = Depends(get_current_user),
) -> List[PostResponse]:
    """List all posts, newest first"""
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute()


@router.get("/user/{user_id}", response_model=List[PostResponse])
async def list_posts_by_user(
    user_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> List[PostResponse]:
    """List posts written by a user, newest first"""
    container = get_container()
    list_by_author_use_case = container.get(ListPostsByAuthorUseCase)
    return await list_by_author_use_case.execute(author_id=user_id)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """Get a single post with author and comments resolved"""
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)
    return await get_post_use_case.execute(post_id)


@router.put("/{post_id}", response_model=PostResponse)
async def edit_post(
    post_id: str,
    request: PostUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """
    Replace a post's title and body
    
    Only the author may edit; anyone else gets 403.
    """
    container = get_container()
    edit_post_use_case = container.get(EditPostUseCase)
    return await edit_post_use_case.execute(
        post_id=post_id,
        request=request,
        acting_user_id=current_user.id,
    )


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete a post and all of its comments
    
    Only the author may delete; anyone else gets 403.
    """
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)
    return await delete_post_use_case.execute(post_id=post_id, acting_user_id=current_user.id)


@router.post("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> LikeResponse:
    """Like the post, or unlike it if the current user already did"""
    container = get_container()
    toggle_like_use_case = container.get(ToggleLikeUseCase)
    return await toggle_like_use_case.execute(post_id=post_id, acting_user_id=current_user.id)


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    request: CommentCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CommentResponse:
    """Comment on any existing post"""
    container = get_container()
    add_comment_use_case = container.get(AddCommentUseCase)
    return await add_comment_use_case.execute(
        post_id=post_id,
        request=request,
        acting_user_id=current_user.id,
    )


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
async def list_comments(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> List[CommentResponse]:
    """List a post's comments, oldest first"""
    container = get_container()
    list_comments_use_case = container.get(ListCommentsUseCase)
    return await list_comments_use_case.execute(post_id)
