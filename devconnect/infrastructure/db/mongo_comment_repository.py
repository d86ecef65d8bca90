# Standard library imports
import logging
from typing import Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.models.comment import Comment
from ...domain.constants import CommentFields
from ...domain.exceptions import StoreError
from .mongo_connection import get_comment_collection
from .object_ids import id_str, to_object_id, to_object_ids

logger = logging.getLogger(__name__)

# Oldest first: chronological reading order
CHRONOLOGICAL = [(CommentFields.CREATED_AT, ASCENDING), (CommentFields.MONGO_ID, ASCENDING)]


class MongoCommentRepository(CommentRepository):
    """MongoDB implementation of CommentRepository"""
    
    def __init__(self, comment_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.comment_collection = comment_collection if comment_collection is not None else get_comment_collection()
    
    async def ensure_indexes(self) -> None:
        await self.comment_collection.create_index(
            [(CommentFields.POST, ASCENDING), (CommentFields.CREATED_AT, ASCENDING)]
        )
    
    async def find_by_post(self, post_id: str) -> List[Comment]:
        object_id = to_object_id(post_id)
        if object_id is None:
            return []
        return await self._find({CommentFields.POST: object_id})
    
    async def find_by_posts(self, post_ids: Iterable[str]) -> List[Comment]:
        object_ids = to_object_ids(post_ids)
        if not object_ids:
            return []
        return await self._find({CommentFields.POST: {"$in": object_ids}})
    
    async def _find(self, query: dict) -> List[Comment]:
        try:
            cursor = self.comment_collection.find(query).sort(CHRONOLOGICAL)
            return [document_to_comment(document) async for document in cursor]
        except PyMongoError as e:
            logger.error(f"Error listing comments: {e}", exc_info=True)
            raise StoreError(f"Error listing comments: {str(e)}", operation="find_comments") from e


def document_to_comment(document: dict) -> Comment:
    """Convert MongoDB document to Comment domain model"""
    return Comment(
        id=id_str(document.get(CommentFields.MONGO_ID)),
        text=document.get(CommentFields.TEXT, ""),
        user_id=id_str(document.get(CommentFields.USER)),
        post_id=id_str(document.get(CommentFields.POST)),
        created_at=document.get(CommentFields.CREATED_AT),
        updated_at=document.get(CommentFields.UPDATED_AT),
    )
