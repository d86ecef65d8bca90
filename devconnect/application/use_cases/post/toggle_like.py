# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import LikeResponse

logger = logging.getLogger(__name__)


class ToggleLikeUseCase:
    """Use case for liking or unliking a post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str, acting_user_id: str) -> LikeResponse:
        """
        Like the post if the acting user has not liked it yet, unlike it otherwise
        
        Returns:
            LikeResponse with the new state and like count
            
        Raises:
            NotFoundError: If the post does not exist
        """
        result = await self.post_repository.toggle_like(post_id, acting_user_id)
        if result is None:
            raise NotFoundError("Post", post_id)
        
        liked, likes_count = result
        logger.debug(f"User {acting_user_id} {'liked' if liked else 'unliked'} post {post_id}")
        return LikeResponse(liked=liked, likes_count=likes_count)
