from typing import List, Optional

from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, to_user_response


class ListUsersUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, search: Optional[str] = None) -> List[UserResponse]:
        users = await self.user_repository.find_all(search=search)
        return [to_user_response(user) for user in users]
