# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....domain.exceptions import AuthenticationError
from ...dto.post_dto import PostCreateRequest, PostResponse
from ...services.post_view_builder import PostViewBuilder

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        view_builder: PostViewBuilder,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.view_builder = view_builder
    
    async def execute(self, request: PostCreateRequest, author_id: str) -> PostResponse:
        """
        Create a new post
        
        Args:
            request: Post creation request (title, body)
            author_id: ID of the authenticated user writing the post
            
        Returns:
            PostResponse with the author resolved and no likes or comments
            
        Raises:
            ValidationError: If title or body is out of range after trimming
            AuthenticationError: If the author does not exist
        """
        # Validates and trims before any store round trip
        new_post = Post(
            id=None,
            title=request.title,
            body=request.body,
            author_id=author_id,
        )
        
        author = await self.user_repository.find_by_id(author_id)
        if author is None:
            raise AuthenticationError("User not found")
        
        saved_post = await self.post_repository.create(new_post)
        logger.info(f"User {author_id} created post {saved_post.id}")
        
        return await self.view_builder.build_post(saved_post)
