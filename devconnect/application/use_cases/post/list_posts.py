from typing import List

from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from ...services.post_view_builder import PostViewBuilder


class ListPostsUseCase:
    """All posts, newest first"""

    def __init__(self, post_repository: PostRepository, view_builder: PostViewBuilder) -> None:
        self.post_repository = post_repository
        self.view_builder = view_builder

    async def execute(self) -> List[PostResponse]:
        posts = await self.post_repository.find_all()
        return await self.view_builder.build_posts(posts)


class ListPostsByAuthorUseCase:
    """Posts written by one user, newest first; unknown or malformed IDs give an empty list"""

    def __init__(self, post_repository: PostRepository, view_builder: PostViewBuilder) -> None:
        self.post_repository = post_repository
        self.view_builder = view_builder

    async def execute(self, author_id: str) -> List[PostResponse]:
        posts = await self.post_repository.find_by_author(author_id)
        return await self.view_builder.build_posts(posts)
