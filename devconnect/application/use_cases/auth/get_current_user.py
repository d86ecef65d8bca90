# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthenticationError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse, to_user_response


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            UserResponse with user information
            
        Raises:
            AuthenticationError: If token is invalid or user not found
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise AuthenticationError(f"Invalid or expired token: {str(exception)}")
        
        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("User not found")
        
        return to_user_response(user)
