from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_profile import UpdateProfileUseCase

__all__ = ["GetUserUseCase", "ListUsersUseCase", "UpdateProfileUseCase"]
