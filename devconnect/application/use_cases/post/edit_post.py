# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.text_rules import clean_body, clean_title
from ....domain.exceptions import NotFoundError
from ....domain.policies import ensure_can_mutate
from ...dto.post_dto import PostUpdateRequest, PostResponse
from ...services.post_view_builder import PostViewBuilder

logger = logging.getLogger(__name__)


class EditPostUseCase:
    """Use case for editing a post's title and body"""
    
    def __init__(self, post_repository: PostRepository, view_builder: PostViewBuilder) -> None:
        self.post_repository = post_repository
        self.view_builder = view_builder
    
    async def execute(
        self,
        post_id: str,
        request: PostUpdateRequest,
        acting_user_id: str,
    ) -> PostResponse:
        """
        Replace title and body of a post owned by the acting user
        
        Raises:
            ValidationError: If title or body is out of range after trimming
            NotFoundError: If the post does not exist
            AuthorizationError: If the acting user is not the author
        """
        title = clean_title(request.title)
        body = clean_body(request.body)
        
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        
        ensure_can_mutate(acting_user_id, post)
        
        updated_post = await self.post_repository.update_content(post_id, title, body)
        if updated_post is None:
            # Deleted between the ownership check and the update
            raise NotFoundError("Post", post_id)
        
        logger.info(f"User {acting_user_id} edited post {post_id}")
        return await self.view_builder.build_post(updated_post)
