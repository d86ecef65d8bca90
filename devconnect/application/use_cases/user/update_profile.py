# Standard library imports
import logging
from dataclasses import replace

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import ProfileUpdateRequest, UserResponse, to_user_response

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """Use case for editing the acting user's own profile"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, acting_user_id: str, request: ProfileUpdateRequest) -> UserResponse:
        """
        Update name, bio, skills and avatar; omitted fields are kept
        
        Raises:
            NotFoundError: If the acting user no longer exists
            ValidationError: If the resulting profile breaks a field rule
        """
        user = await self.user_repository.find_by_id(acting_user_id)
        if user is None:
            raise NotFoundError("User", acting_user_id)
        
        changes = request.model_dump(exclude_none=True)
        # Email, password and timestamps are not editable here
        updated_user = replace(user, **changes)
        
        saved_user = await self.user_repository.save(updated_user)
        logger.info(f"Updated profile of user {saved_user.id}: {sorted(changes)}")
        return to_user_response(saved_user)
