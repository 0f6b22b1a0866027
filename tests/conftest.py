from collections.abc import Iterator

import pytest
from argon2 import PasswordHasher
from fastapi.testclient import TestClient

from src.auth.local_service import LocalAuthService
from src.common.config import Settings
from src.main import create_app
from src.users.store import UserStore


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret="test-secret",
        jwt_algorithm="HS256",
        access_token_lifespan_minutes=15,
        refresh_token_lifespan_minutes=60,
        session_deadline_seconds=5,
    )


@pytest.fixture
def user_store() -> UserStore:
    return UserStore()


@pytest.fixture
def auth_service(user_store, settings) -> LocalAuthService:
    # Cheap argon2 parameters keep the suite fast.
    hasher = PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)
    return LocalAuthService(store=user_store, settings=settings, hasher=hasher)


@pytest.fixture
def client(auth_service) -> Iterator[TestClient]:
    app = create_app(auth_service=auth_service)
    with TestClient(app) as test_client:
        yield test_client
