"""Fixtures for end-to-end tests against the ASGI app with mocked infrastructure."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from dealort.config import Settings
from dealort.domain.model import User
from dealort.domain.service import JWTService
from dealort.interface.api.app import create_app
from tests.conftest import seed_user
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the seeding helpers."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    return TestClient(create_app(container=container), raise_server_exceptions=False)


@pytest.fixture
def create_user(container):
    """Seed a user into the in-memory store."""

    def _create(name: str = "Alice") -> User:
        return asyncio.run(seed_user(container, name))

    return _create


@pytest.fixture
def login(client):
    """Attach a session cookie for ``user`` to the client."""
    jwt_service = JWTService(Settings().auth)

    def _login(user: User) -> None:
        client.cookies.set("auth_token", jwt_service.create_token(user.id))

    return _login
