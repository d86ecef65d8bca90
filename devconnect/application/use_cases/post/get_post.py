from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import PostResponse
from ...services.post_view_builder import PostViewBuilder


class GetPostUseCase:
    def __init__(self, post_repository: PostRepository, view_builder: PostViewBuilder) -> None:
        self.post_repository = post_repository
        self.view_builder = view_builder

    async def execute(self, post_id: str) -> PostResponse:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return await self.view_builder.build_post(post)
