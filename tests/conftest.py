"""
Shared pytest fixtures for reservation_api tests.
"""
import os
from functools import partial
from unittest.mock import patch

import pytest

from reservation_api.core.config import reset_settings
from reservation_api.core.security import hash_password
from reservation_api.di.container import reset_container
from reservation_api.domain.models.user import CreateUserParams
from reservation_api.infrastructure.db.memory_user_store import InMemoryUserStore

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def fast_hasher():
    """Real bcrypt hasher with minimal cost."""
    return partial(hash_password, rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def memory_store(fast_hasher):
    """Empty in-memory user store."""
    return InMemoryUserStore(password_hasher=fast_hasher)


@pytest.fixture
def valid_params():
    return CreateUserParams(
        email="valid_email@email.com",
        first_name="James",
        last_name="Foo",
        password="valid_password123",
    )


@pytest.fixture
def memory_env():
    """Environment for building the app against the in-memory backend."""
    env_vars = {
        "USER_STORE_BACKEND": "memory",
        "BCRYPT_ROUNDS": str(TEST_BCRYPT_ROUNDS),
        "MIN_PASSWORD_LENGTH": "7",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_container()
        reset_settings()
        yield env_vars
        reset_container()
        reset_settings()
