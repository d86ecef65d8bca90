"""
Unit tests for auth use cases (Login, Register, GetCurrentUser).
"""
from unittest.mock import AsyncMock

import pytest
from devconnect.core.security import hash_password, create_jwt_token
from devconnect.application.use_cases.auth.login_user import LoginUserUseCase
from devconnect.application.use_cases.auth.register_user import RegisterUserUseCase
from devconnect.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from devconnect.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, TokenResponse
from devconnect.domain.exceptions import AuthenticationError, ValidationError
from devconnect.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


def _user(user_id="usr-123", email="test@example.com", hashed_password="hash") -> User:
    return User(id=user_id, name="Test User", email=email, hashed_password=hashed_password)


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = _user(hashed_password=hash_password("validpass123"))

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, TokenResponse)
        assert result.token_type == "bearer"
        assert len(result.access_token) > 0

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="unknown@example.com", password="anypass123")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = _user(hashed_password=hash_password("correctpass"))

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="wrongpassword")
        )
        assert result is None


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.return_value = _user(user_id="usr-new", email="new@example.com")

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserRegistrationRequest(name="New User", email="new@example.com", password="password123")
        )
        assert result.id == "usr-new"
        assert result.email == "new@example.com"
        assert not hasattr(result, "hashed_password")

        saved_user = mock_user_repo.save.call_args.args[0]
        assert saved_user.id is None
        assert saved_user.hashed_password != "password123"

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = _user(email="existing@example.com")

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ValidationError, match="already exists"):
            await use_case.execute(
                UserRegistrationRequest(name="Dup", email="existing@example.com", password="password123")
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_duplicate_email_is_case_insensitive(self, user_repo, make_user):
        make_user("Existing", "existing@example.com")

        use_case = RegisterUserUseCase(user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(
                UserRegistrationRequest(name="Dup", email="Existing@Example.com", password="password123")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_current_user_success(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"sub": "usr-123", "email": "test@example.com"})
        mock_user_repo.find_by_id.return_value = _user()

        use_case = GetCurrentUserUseCase(mock_user_repo)
        result = await use_case.execute(token)
        assert result.id == "usr-123"
        assert result.email == "test@example.com"
        mock_user_repo.find_by_id.assert_awaited_once_with("usr-123")

    @pytest.mark.asyncio
    async def test_get_current_user_invalid_token_raises(self, mock_user_repo, mock_settings):
        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(AuthenticationError, match="Invalid"):
            await use_case.execute("invalid.jwt.token")

    @pytest.mark.asyncio
    async def test_get_current_user_missing_subject_raises(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"email": "x@example.com"})
        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(AuthenticationError, match="missing user ID"):
            await use_case.execute(token)

    @pytest.mark.asyncio
    async def test_get_current_user_not_found_raises(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"sub": "nonexistent", "email": "x@example.com"})
        mock_user_repo.find_by_id.return_value = None

        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(AuthenticationError, match="User not found"):
            await use_case.execute(token)
