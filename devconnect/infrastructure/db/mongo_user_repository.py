# Standard library imports
import logging
import re
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.constants import UserFields
from ...domain.exceptions import NotFoundError, StoreError, ValidationError
from .mongo_connection import get_user_collection
from .object_ids import to_object_id, to_object_ids

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def ensure_indexes(self) -> None:
        await self.user_collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
        await self.user_collection.create_index([(UserFields.CREATED_AT, DESCENDING)])
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for (normalized before lookup)
            
        Returns:
            User domain model if found, None otherwise
        """
        normalized = normalize_email(email)
        if not normalized:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: normalized})
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}", exc_info=True)
            raise StoreError(f"Error finding user by email: {str(e)}", operation="find_by_email") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Returns:
            User domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID: {e}", exc_info=True)
            raise StoreError(f"Error finding user by ID: {str(e)}", operation="find_by_id") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        object_ids = to_object_ids(user_ids)
        if not object_ids:
            return {}
        
        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = {}
            async for document in cursor:
                user = self._document_to_user(document)
                users[user.id] = user
            return users
        except PyMongoError as e:
            logger.error(f"Error resolving users: {e}", exc_info=True)
            raise StoreError(f"Error resolving users: {str(e)}", operation="find_by_ids") from e
    
    async def find_all(self, search: Optional[str] = None) -> List[User]:
        query: dict = {}
        if search and search.strip():
            pattern = {"$regex": re.escape(search.strip()), "$options": "i"}
            query["$or"] = [
                {UserFields.NAME: pattern},
                {UserFields.EMAIL: pattern},
                {UserFields.SKILLS: pattern},
            ]
        
        try:
            cursor = self.user_collection.find(query).sort(
                [(UserFields.CREATED_AT, DESCENDING), (UserFields.MONGO_ID, DESCENDING)]
            )
            return [self._document_to_user(document) async for document in cursor]
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise StoreError(f"Error listing users: {str(e)}", operation="find_all") from e
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID and timestamps set
            
        Raises:
            ValidationError: If the email is already taken by another user
        """
        if not user:
            raise ValueError("User cannot be None")
        
        now = datetime.now(timezone.utc)
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.UPDATED_AT] = now
        
        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise NotFoundError("User", user.id)
                
                updated_document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict},
                    return_document=ReturnDocument.AFTER,
                )
                if updated_document is None:
                    raise NotFoundError("User", user.id)
                return self._document_to_user(updated_document)
            
            user_dict[UserFields.CREATED_AT] = now
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise StoreError("User was created but could not be retrieved", operation="save")
            return self._document_to_user(new_document)
        except DuplicateKeyError as e:
            raise ValidationError("User with this email already exists") from e
        except PyMongoError as e:
            logger.error(f"Error saving user: {e}", exc_info=True)
            raise StoreError(f"Error saving user: {str(e)}", operation="save") from e
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StoreError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            bio=document.get(UserFields.BIO, ""),
            skills=list(document.get(UserFields.SKILLS) or []),
            avatar=document.get(UserFields.AVATAR, ""),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to the mutable part of a MongoDB document"""
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.BIO: user.bio,
            UserFields.SKILLS: list(user.skills),
            UserFields.AVATAR: user.avatar,
        }
