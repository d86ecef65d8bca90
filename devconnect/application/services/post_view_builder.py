"""
Read-side join for posts and comments.

Repositories return bare references (author ids, user ids). Before a post or
comment leaves the application layer, the ids are resolved in one batch
against the user store and replaced by the public ``{_id, name, email}``
projection.
"""

# Standard library imports
from collections import defaultdict
from typing import Dict, Iterable, List

# Local application imports
from ...domain.models.comment import Comment
from ...domain.models.post import Post
from ...domain.models.user import User
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.user_repository import UserRepository
from ..dto.comment_dto import CommentResponse
from ..dto.post_dto import PostResponse
from ..dto.user_dto import to_author_summary


class PostViewBuilder:
    """Builds response DTOs for posts and comments with references resolved"""

    def __init__(
        self,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.user_repository = user_repository
        self.comment_repository = comment_repository

    async def build_posts(self, posts: List[Post]) -> List[PostResponse]:
        """Resolve authors and embed each post's comments (oldest first)"""
        if not posts:
            return []

        comments = await self.comment_repository.find_by_posts(post.id for post in posts)
        comments_by_post: Dict[str, List[Comment]] = defaultdict(list)
        for comment in comments:
            comments_by_post[comment.post_id].append(comment)

        user_ids = {post.author_id for post in posts}
        user_ids.update(comment.user_id for comment in comments)
        users = await self.user_repository.find_by_ids(user_ids)

        return [
            self._post_to_response(post, comments_by_post.get(post.id or "", []), users)
            for post in posts
        ]

    async def build_post(self, post: Post) -> PostResponse:
        return (await self.build_posts([post]))[0]

    async def build_comments(self, comments: List[Comment]) -> List[CommentResponse]:
        if not comments:
            return []
        users = await self.user_repository.find_by_ids({comment.user_id for comment in comments})
        return [self._comment_to_response(comment, users) for comment in comments]

    async def build_comment(self, comment: Comment) -> CommentResponse:
        return (await self.build_comments([comment]))[0]

    def _post_to_response(
        self,
        post: Post,
        comments: Iterable[Comment],
        users: Dict[str, User],
    ) -> PostResponse:
        author = users.get(post.author_id)
        return PostResponse(
            id=post.id or "",
            title=post.title,
            body=post.body,
            author=to_author_summary(author) if author else None,
            likes=list(post.likes),
            comments=[self._comment_to_response(comment, users) for comment in comments],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def _comment_to_response(self, comment: Comment, users: Dict[str, User]) -> CommentResponse:
        user = users.get(comment.user_id)
        return CommentResponse(
            id=comment.id or "",
            text=comment.text,
            user=to_author_summary(user) if user else None,
            post=comment.post_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
