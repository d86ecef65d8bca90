# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.comment import Comment
from ....domain.exceptions import NotFoundError
from ...dto.comment_dto import CommentCreateRequest, CommentResponse
from ...services.post_view_builder import PostViewBuilder

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """Use case for commenting on a post; any authenticated user may comment"""
    
    def __init__(self, post_repository: PostRepository, view_builder: PostViewBuilder) -> None:
        self.post_repository = post_repository
        self.view_builder = view_builder
    
    async def execute(
        self,
        post_id: str,
        request: CommentCreateRequest,
        acting_user_id: str,
    ) -> CommentResponse:
        """
        Add a comment and append it to the post's comment list
        
        Raises:
            ValidationError: If the text is out of range after trimming
            NotFoundError: If the post does not exist
        """
        new_comment = Comment(
            id=None,
            text=request.text,
            user_id=acting_user_id,
            post_id=post_id,
        )
        
        saved_comment = await self.post_repository.add_comment(new_comment)
        if saved_comment is None:
            raise NotFoundError("Post", post_id)
        
        logger.info(f"User {acting_user_id} commented on post {post_id}")
        return await self.view_builder.build_comment(saved_comment)
