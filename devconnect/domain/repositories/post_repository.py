from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.comment import Comment
from ..models.post import Post


class PostRepository(ABC):
    """
    Repository interface for the post aggregate.
    
    Posts own their like set and comment-reference list, so every write that
    touches either goes through this repository as a single atomic update.
    """
    
    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create storage indexes (author, creation time)"""
        pass
    
    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID; malformed IDs resolve to None"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[Post]:
        """List all posts, newest first"""
        pass
    
    @abstractmethod
    async def find_by_author(self, author_id: str) -> List[Post]:
        """List posts written by a user, newest first"""
        pass
    
    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post and return it with ID and timestamps set"""
        pass
    
    @abstractmethod
    async def update_content(self, post_id: str, title: str, body: str) -> Optional[Post]:
        """Replace title and body only; None if the post does not exist"""
        pass
    
    @abstractmethod
    async def toggle_like(self, post_id: str, user_id: str) -> Optional[Tuple[bool, int]]:
        """
        Atomically add or remove ``user_id`` from the like set.
        Returns (liked, likes_count), or None if the post does not exist.
        """
        pass
    
    @abstractmethod
    async def add_comment(self, comment: Comment) -> Optional[Comment]:
        """
        Insert a comment and append its ID to the post's comment list as one
        unit. Returns the saved comment, or None if the post does not exist.
        """
        pass
    
    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete a post and every comment referencing it; False if not found"""
        pass
