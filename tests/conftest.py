"""ABOUTME: Pytest configuration and fixtures for authfactors tests
ABOUTME: Provides environment variable helpers and user/recovery code factories"""

import os
import uuid

import pytest

from authfactors.domain.recovery_codes import RecoveryCode
from authfactors.domain.users import User


@pytest.fixture
def clear_env_vars():
    """Fixture to temporarily remove environment variables for testing."""
    original_vars = {}

    def _clear_env_vars(*args):
        for key in args:
            original_vars[key] = os.environ.get(key)
            os.environ.pop(key, None)

    yield _clear_env_vars

    # Restore original environment variables
    for key, value in original_vars.items():
        if value is not None:
            os.environ[key] = value


@pytest.fixture
def temp_env_vars():
    """Fixture to temporarily set environment variables for testing."""
    original_vars = {}

    def _set_env_vars(**kwargs):
        for key, value in kwargs.items():
            original_vars[key] = os.environ.get(key)
            os.environ[key] = value

    yield _set_env_vars

    # Restore original environment variables
    for key, value in original_vars.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def user(user_id) -> User:
    return User.build(user_id=user_id, email="testuser@example.com")


@pytest.fixture
def user_with_codes(user) -> User:
    return user.generate_new_recovery_codes()


@pytest.fixture
def make_recovery_code(user_id):
    def _make(code: str | None = None, **kwargs) -> RecoveryCode:
        return RecoveryCode.build(user_id=kwargs.pop("user_id", user_id), code=code, **kwargs)

    return _make
