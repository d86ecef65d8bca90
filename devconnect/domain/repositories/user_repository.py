from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create storage indexes (unique email)"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (case-insensitive)"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID; malformed IDs resolve to None"""
        pass
    
    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Resolve many user IDs at once, keyed by ID; unknown IDs are omitted"""
        pass
    
    @abstractmethod
    async def find_all(self, search: Optional[str] = None) -> List[User]:
        """List users newest first, optionally filtered by name, email or skill"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass
