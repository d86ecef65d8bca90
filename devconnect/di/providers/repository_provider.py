from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository
from ...infrastructure.db.mongo_comment_repository import MongoCommentRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        user_collection = container.get("user_collection")
        post_collection = container.get("post_collection")
        comment_collection = container.get("comment_collection")
        
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=user_collection)
        )
        
        # The post repository writes comments too (cascade delete, comment append)
        container.register_singleton(
            PostRepository,
            MongoPostRepository(
                post_collection=post_collection,
                comment_collection=comment_collection,
                client=container.get("mongo_client"),
                use_transactions=get_settings().mongo_use_transactions,
            )
        )
        
        container.register_singleton(
            CommentRepository,
            MongoCommentRepository(comment_collection=comment_collection)
        )
