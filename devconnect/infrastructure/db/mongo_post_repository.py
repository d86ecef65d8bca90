# Standard library imports
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, Tuple, TypeVar

# External package imports
from bson import ObjectId
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorClientSession,
    AsyncIOMotorCollection,
)
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.comment import Comment
from ...domain.models.post import Post
from ...domain.constants import CommentFields, PostFields
from ...domain.exceptions import StoreError, ValidationError
from .mongo_connection import get_client, get_comment_collection, get_post_collection
from .mongo_comment_repository import document_to_comment
from .object_ids import id_str, to_object_id

logger = logging.getLogger(__name__)

# Newest first, _id breaks ties between posts created in the same millisecond
NEWEST_FIRST = [(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)]

# A toggle only retries when a concurrent toggle by the same user flips the
# like between the two conditional updates
MAX_TOGGLE_ATTEMPTS = 5

# Write conflicts between transactions on the same post carry this label
TRANSIENT_TRANSACTION_ERROR = "TransientTransactionError"
MAX_TRANSACTION_ATTEMPTS = 3

T = TypeVar("T")


class MongoPostRepository(PostRepository):
    """
    MongoDB implementation of PostRepository.

    Likes and comment references are embedded arrays on the post document and
    are only ever changed with single-document atomic operators ($addToSet,
    $pull, $push). Writes spanning the posts and comments collections run in
    a client-session transaction when transactions are enabled.
    """

    def __init__(
        self,
        post_collection: Optional[AsyncIOMotorCollection] = None,
        comment_collection: Optional[AsyncIOMotorCollection] = None,
        client: Optional[AsyncIOMotorClient] = None,
        use_transactions: Optional[bool] = None,
    ) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()
        self.comment_collection = comment_collection if comment_collection is not None else get_comment_collection()
        self.client = client if client is not None else get_client()
        self.use_transactions = (
            use_transactions if use_transactions is not None else get_settings().mongo_use_transactions
        )

    async def ensure_indexes(self) -> None:
        await self.post_collection.create_index([(PostFields.CREATED_AT, DESCENDING)])
        await self.post_collection.create_index(
            [(PostFields.AUTHOR, ASCENDING), (PostFields.CREATED_AT, DESCENDING)]
        )

    async def _run_unit_of_work(
        self,
        work: Callable[[Optional[AsyncIOMotorClientSession]], Awaitable[T]],
    ) -> T:
        """
        Run ``work`` inside a transaction, or with no session when transactions are off

        Concurrent transactions writing the same post document abort all but
        one with a write conflict labelled TransientTransactionError; those are
        rerun from the start with a fresh session.
        """
        if not self.use_transactions:
            return await work(None)

        for attempt in range(1, MAX_TRANSACTION_ATTEMPTS + 1):
            try:
                async with await self.client.start_session() as session:
                    async with session.start_transaction():
                        return await work(session)
            except PyMongoError as e:
                if attempt == MAX_TRANSACTION_ATTEMPTS or not e.has_error_label(TRANSIENT_TRANSACTION_ERROR):
                    raise
                logger.warning(f"Transient transaction error, retrying (attempt {attempt}): {e}")
        raise StoreError("Transaction did not complete", operation="unit_of_work")

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Returns:
            Post domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding post by ID: {e}", exc_info=True)
            raise StoreError(f"Error finding post by ID: {str(e)}", operation="find_by_id") from e

        if document is None:
            return None
        return self._document_to_post(document)

    async def find_all(self) -> List[Post]:
        return await self._find({})

    async def find_by_author(self, author_id: str) -> List[Post]:
        object_id = to_object_id(author_id)
        if object_id is None:
            return []
        return await self._find({PostFields.AUTHOR: object_id})

    async def create(self, post: Post) -> Post:
        """
        Insert a new post

        Args:
            post: Post domain model without an ID

        Returns:
            Saved Post domain model with ID and timestamps set
        """
        if not post:
            raise ValueError("Post cannot be None")

        author_object_id = to_object_id(post.author_id)
        if author_object_id is None:
            raise ValidationError("Invalid author reference")

        now = datetime.now(timezone.utc)
        post_dict = {
            PostFields.TITLE: post.title,
            PostFields.BODY: post.body,
            PostFields.AUTHOR: author_object_id,
            PostFields.LIKES: [],
            PostFields.COMMENTS: [],
            PostFields.CREATED_AT: now,
            PostFields.UPDATED_AT: now,
        }

        try:
            result = await self.post_collection.insert_one(post_dict)
            new_document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            logger.error(f"Error creating post: {e}", exc_info=True)
            raise StoreError(f"Error creating post: {str(e)}", operation="create") from e

        if new_document is None:
            raise StoreError("Post was created but could not be retrieved", operation="create")
        return self._document_to_post(new_document)

    async def update_content(self, post_id: str, title: str, body: str) -> Optional[Post]:
        """
        Replace title and body only

        Likes and comment references are not part of the $set so concurrent
        toggles and comment additions are never overwritten by an edit.
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: object_id},
                {"$set": {
                    PostFields.TITLE: title,
                    PostFields.BODY: body,
                    PostFields.UPDATED_AT: datetime.now(timezone.utc),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error updating post {post_id}: {e}", exc_info=True)
            raise StoreError(f"Error updating post: {str(e)}", operation="update_content") from e

        if document is None:
            return None
        return self._document_to_post(document)

    async def toggle_like(self, post_id: str, user_id: str) -> Optional[Tuple[bool, int]]:
        """
        Toggle a like with two guarded atomic updates

        Add only matches when the user is absent from the like set and remove
        only matches when present, so each step is a compare-and-set at the
        storage layer.

        Returns:
            (liked, likes_count), or None if the post does not exist
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return None
        user_object_id = to_object_id(user_id)
        if user_object_id is None:
            raise ValidationError("Invalid user reference")

        try:
            for attempt in range(MAX_TOGGLE_ATTEMPTS):
                liked = await self._conditional_like_update(
                    {PostFields.MONGO_ID: object_id, PostFields.LIKES: {"$ne": user_object_id}},
                    {"$addToSet": {PostFields.LIKES: user_object_id}},
                )
                if liked is not None:
                    return True, liked

                unliked = await self._conditional_like_update(
                    {PostFields.MONGO_ID: object_id, PostFields.LIKES: user_object_id},
                    {"$pull": {PostFields.LIKES: user_object_id}},
                )
                if unliked is not None:
                    return False, unliked

                exists = await self.post_collection.count_documents(
                    {PostFields.MONGO_ID: object_id}, limit=1
                )
                if not exists:
                    return None
                logger.debug(f"Like toggle on post {post_id} raced, retrying (attempt {attempt + 1})")
        except PyMongoError as e:
            logger.error(f"Error toggling like on post {post_id}: {e}", exc_info=True)
            raise StoreError(f"Error toggling like: {str(e)}", operation="toggle_like") from e

        raise StoreError(
            f"Like toggle on post {post_id} did not settle after {MAX_TOGGLE_ATTEMPTS} attempts",
            operation="toggle_like",
        )

    async def _conditional_like_update(self, query: dict, update: dict) -> Optional[int]:
        """Apply ``update`` if ``query`` matches; return the new like count or None."""
        update = {**update, "$set": {PostFields.UPDATED_AT: datetime.now(timezone.utc)}}
        document = await self.post_collection.find_one_and_update(
            query,
            update,
            projection={PostFields.LIKES: 1},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            return None
        return len(document.get(PostFields.LIKES) or [])

    async def add_comment(self, comment: Comment) -> Optional[Comment]:
        """
        Insert a comment and $push its ID onto the post

        The comment is inserted first and removed again if the post vanished,
        so the post's list never references a comment that was not stored.
        """
        if not comment:
            raise ValueError("Comment cannot be None")

        post_object_id = to_object_id(comment.post_id)
        if post_object_id is None:
            return None
        user_object_id = to_object_id(comment.user_id)
        if user_object_id is None:
            raise ValidationError("Invalid user reference")

        now = datetime.now(timezone.utc)
        comment_object_id = ObjectId()
        comment_dict = {
            CommentFields.MONGO_ID: comment_object_id,
            CommentFields.TEXT: comment.text,
            CommentFields.USER: user_object_id,
            CommentFields.POST: post_object_id,
            CommentFields.CREATED_AT: now,
            CommentFields.UPDATED_AT: now,
        }

        async def insert_and_push(session: Optional[AsyncIOMotorClientSession]) -> bool:
            await self.comment_collection.insert_one(dict(comment_dict), session=session)
            push_result = await self.post_collection.update_one(
                {PostFields.MONGO_ID: post_object_id},
                {
                    "$push": {PostFields.COMMENTS: comment_object_id},
                    "$set": {PostFields.UPDATED_AT: now},
                },
                session=session,
            )
            if push_result.matched_count == 0:
                await self.comment_collection.delete_one(
                    {CommentFields.MONGO_ID: comment_object_id}, session=session
                )
                return False
            return True

        try:
            appended = await self._run_unit_of_work(insert_and_push)
        except PyMongoError as e:
            logger.error(f"Error adding comment to post {comment.post_id}: {e}", exc_info=True)
            raise StoreError(f"Error adding comment: {str(e)}", operation="add_comment") from e

        if not appended:
            return None
        return document_to_comment(comment_dict)

    async def delete(self, post_id: str) -> bool:
        """
        Delete a post and cascade to its comments

        The post goes first so that, without transactions, a failure part-way
        can only leave unreachable comments, never a post pointing at missing
        ones.
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return False

        async def delete_post_then_comments(session: Optional[AsyncIOMotorClientSession]) -> Optional[int]:
            result = await self.post_collection.delete_one(
                {PostFields.MONGO_ID: object_id}, session=session
            )
            if result.deleted_count == 0:
                return None
            comments_result = await self.comment_collection.delete_many(
                {CommentFields.POST: object_id}, session=session
            )
            return comments_result.deleted_count

        try:
            deleted_comments = await self._run_unit_of_work(delete_post_then_comments)
        except PyMongoError as e:
            logger.error(f"Error deleting post {post_id}: {e}", exc_info=True)
            raise StoreError(f"Error deleting post: {str(e)}", operation="delete") from e

        if deleted_comments is None:
            return False
        logger.debug(f"Deleted post {post_id} and {deleted_comments} comment(s)")
        return True

    async def _find(self, query: dict) -> List[Post]:
        try:
            cursor = self.post_collection.find(query).sort(NEWEST_FIRST)
            return [self._document_to_post(document) async for document in cursor]
        except PyMongoError as e:
            logger.error(f"Error listing posts: {e}", exc_info=True)
            raise StoreError(f"Error listing posts: {str(e)}", operation="find_posts") from e

    def _document_to_post(self, document: dict) -> Post:
        """Convert MongoDB document to Post domain model"""
        if not document or PostFields.MONGO_ID not in document:
            raise StoreError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            body=document.get(PostFields.BODY, ""),
            author_id=id_str(document.get(PostFields.AUTHOR)),
            likes=[str(user_id) for user_id in document.get(PostFields.LIKES) or []],
            comment_ids=[str(comment_id) for comment_id in document.get(PostFields.COMMENTS) or []],
            created_at=document.get(PostFields.CREATED_AT),
            updated_at=document.get(PostFields.UPDATED_AT),
        )
