from typing import List

from ....domain.repositories.comment_repository import CommentRepository
from ....domain.repositories.post_repository import PostRepository
from ...dto.comment_dto import CommentResponse
from ...services.post_view_builder import PostViewBuilder


class ListCommentsUseCase:
    """Comments for a post in reading order (oldest first)"""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        view_builder: PostViewBuilder,
    ) -> None:
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.view_builder = view_builder

    async def execute(self, post_id: str) -> List[CommentResponse]:
        # A deleted post has no comments, even if a non-transactional cascade left some behind
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            return []
        comments = await self.comment_repository.find_by_post(post_id)
        return await self.view_builder.build_comments(comments)
