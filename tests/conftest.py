"""
Shared pytest fixtures for devconnect tests.
"""
import os
from typing import Optional
from unittest.mock import MagicMock, patch

import pytest

from devconnect.application.services.post_view_builder import PostViewBuilder
from devconnect.core.security import hash_password
from devconnect.di.base_container import BaseContainer
from devconnect.di.container import register_use_cases
from devconnect.domain.models import User
from devconnect.domain.repositories import CommentRepository, PostRepository, UserRepository
from tests.fakes import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryUserRepository,
)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_devconnect_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_use_transactions = True
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("devconnect.core.config.get_settings", return_value=mock), patch(
        "devconnect.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def user_repo(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def post_repo(store):
    return InMemoryPostRepository(store)


@pytest.fixture
def comment_repo(store):
    return InMemoryCommentRepository(store)


@pytest.fixture
def view_builder(user_repo, comment_repo):
    return PostViewBuilder(user_repository=user_repo, comment_repository=comment_repo)


@pytest.fixture
def make_user(store):
    """Insert a user straight into the in-memory store and return it."""
    def _make_user(name: str, email: str, password: Optional[str] = None, **extra) -> User:
        now = store.now()
        user = User(
            id=store.new_id(),
            name=name,
            email=email,
            hashed_password=hash_password(password) if password else "$2b$12$hash",
            created_at=now,
            updated_at=now,
            **extra,
        )
        store.users[user.id] = user
        return user
    return _make_user


@pytest.fixture
def container(user_repo, post_repo, comment_repo):
    """Container wired exactly like production, but on the in-memory repositories."""
    test_container = BaseContainer()
    test_container.register_singleton(UserRepository, user_repo)
    test_container.register_singleton(PostRepository, post_repo)
    test_container.register_singleton(CommentRepository, comment_repo)
    register_use_cases(test_container)
    return test_container
