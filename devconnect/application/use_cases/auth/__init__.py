from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase

__all__ = ["RegisterUserUseCase", "LoginUserUseCase", "GetCurrentUserUseCase"]
