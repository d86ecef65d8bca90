# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse, to_user_response


class GetUserUseCase:
    """Use case for fetching a public user profile"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Raises:
            NotFoundError: If the ID is malformed or does not resolve
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return to_user_response(user)
