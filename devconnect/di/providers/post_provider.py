from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...application.services.post_view_builder import PostViewBuilder
from ...application.use_cases.post import (
    CreatePostUseCase,
    EditPostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ListPostsByAuthorUseCase,
    ToggleLikeUseCase,
)
from ...application.use_cases.comment import AddCommentUseCase, ListCommentsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post, like and comment use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the read-side view builder and all post/comment use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            PostViewBuilder,
            lambda: PostViewBuilder(
                user_repository=container.get(UserRepository),
                comment_repository=container.get(CommentRepository),
            )
        )
        
        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
        
        container.register_factory(
            EditPostUseCase,
            lambda: EditPostUseCase(
                post_repository=container.get(PostRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
        
        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(post_repository=container.get(PostRepository))
        )
        
        container.register_factory(
            GetPostUseCase,
            lambda: GetPostUseCase(
                post_repository=container.get(PostRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
        
        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(
                post_repository=container.get(PostRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
        
        container.register_factory(
            ListPostsByAuthorUseCase,
            lambda: ListPostsByAuthorUseCase(
                post_repository=container.get(PostRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
        
        container.register_factory(
            ToggleLikeUseCase,
            lambda: ToggleLikeUseCase(post_repository=container.get(PostRepository))
        )
        
        container.register_factory(
            AddCommentUseCase,
            lambda: AddCommentUseCase(
                post_repository=container.get(PostRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
        
        container.register_factory(
            ListCommentsUseCase,
            lambda: ListCommentsUseCase(
                post_repository=container.get(PostRepository),
                comment_repository=container.get(CommentRepository),
                view_builder=container.get(PostViewBuilder),
            )
        )
