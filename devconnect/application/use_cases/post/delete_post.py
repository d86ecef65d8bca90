# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NotFoundError
from ....domain.policies import ensure_can_mutate
from ...dto.post_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post together with its comments"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str, acting_user_id: str) -> MessageResponse:
        """
        Delete a post owned by the acting user
        
        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the acting user is not the author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        
        ensure_can_mutate(acting_user_id, post)
        
        deleted = await self.post_repository.delete(post_id)
        if not deleted:
            raise NotFoundError("Post", post_id)
        
        logger.info(f"User {acting_user_id} deleted post {post_id} with {len(post.comment_ids)} comment(s)")
        return MessageResponse(message="Post deleted successfully")
