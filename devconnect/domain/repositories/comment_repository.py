from abc import ABC, abstractmethod
from typing import Iterable, List
from ..models.comment import Comment


class CommentRepository(ABC):
    """Repository interface - read side of comments (writes go through PostRepository)"""
    
    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create storage indexes (post, creation time)"""
        pass
    
    @abstractmethod
    async def find_by_post(self, post_id: str) -> List[Comment]:
        """List comments for a post, oldest first"""
        pass
    
    @abstractmethod
    async def find_by_posts(self, post_ids: Iterable[str]) -> List[Comment]:
        """List comments for several posts, oldest first"""
        pass
