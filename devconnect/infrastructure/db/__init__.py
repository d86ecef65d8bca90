from .mongo_connection import (
    get_client,
    get_database,
    get_user_collection,
    get_post_collection,
    get_comment_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_post_repository import MongoPostRepository
from .mongo_comment_repository import MongoCommentRepository

__all__ = [
    "get_client",
    "get_database",
    "get_user_collection",
    "get_post_collection",
    "get_comment_collection",
    "MongoUserRepository",
    "MongoPostRepository",
    "MongoCommentRepository",
]
