"""Tests for authentication dependencies."""

from typing import Annotated
from unittest.mock import AsyncMock

import pytest

from fastapi import Depends
from fastapi import FastAPI
from fastapi import status
from fastapi.testclient import TestClient

from claycraft_api.auth.dependencies import get_current_user
from claycraft_api.auth.dependencies import require_moderator
from claycraft_api.auth.jwt_service import JWTService
from claycraft_api.auth.jwt_service import get_jwt_service
from claycraft_api.config.auth import AuthSettings
from claycraft_api.config.auth import get_auth_settings
from claycraft_api.database.models.base import UserRole
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.user import UserRepository
from claycraft_api.database.repositories.user import get_user_repository


@pytest.fixture
def auth_settings(monkeypatch):
    """Auth settings shared by the service and the cookie lookup."""
    settings = AuthSettings(
        jwt_secret_key="test-secret-key-that-is-long-enough-for-hs256"
    )
    monkeypatch.setattr(
        "claycraft_api.auth.dependencies.get_auth_settings", lambda: settings
    )
    return settings


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(settings=auth_settings)


@pytest.fixture
def user_repo():
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def client(jwt_service, user_repo):
    """App exposing the current user and a moderator-only route."""
    app = FastAPI()

    @app.get("/me")
    async def me(user: Annotated[User, Depends(get_current_user)]) -> dict:
        return {"username": user.username}

    @app.get("/mod")
    async def mod(user: Annotated[User, Depends(require_moderator)]) -> dict:
        return {"username": user.username}

    app.dependency_overrides[get_jwt_service] = lambda: jwt_service
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    return TestClient(app)


class TestGetCurrentUser:
    """Test token extraction and user lookup."""

    def test_bearer_token(self, client, jwt_service, user_repo, regular_user):
        """Test authenticating with the Authorization header."""
        user_repo.get_by_pk.return_value = regular_user
        token = jwt_service.create_access_token(regular_user.pk)

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"username": "potter"}
        user_repo.get_by_pk.assert_awaited_once_with(regular_user.pk)

    def test_cookie_token(
        self, client, auth_settings, jwt_service, user_repo, regular_user
    ):
        """Test authenticating with the access token cookie."""
        user_repo.get_by_pk.return_value = regular_user
        client.cookies.set(
            auth_settings.cookie_name,
            jwt_service.create_access_token(regular_user.pk),
        )

        response = client.get("/me")

        assert response.status_code == status.HTTP_200_OK

    def test_missing_token(self, client):
        """Test that requests without a token get 401."""
        response = client.get("/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Access token required"

    def test_invalid_token(self, client):
        """Test that an undecodable token gets 401."""
        response = client.get("/me", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Invalid token"

    def test_unknown_user(self, client, jwt_service, user_repo, regular_user):
        """Test a valid token whose subject no longer exists."""
        user_repo.get_by_pk.return_value = None
        token = jwt_service.create_access_token(regular_user.pk)

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "User not found"


class TestRequireModerator:
    """Test the role check."""

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            (UserRole.USER, status.HTTP_403_FORBIDDEN),
            (UserRole.MODERATOR, status.HTTP_200_OK),
            (UserRole.ADMIN, status.HTTP_200_OK),
        ],
    )
    def test_roles(self, client, jwt_service, user_repo, user_factory, role, expected):
        """Test which roles reach moderator routes."""
        user = user_factory(role=role)
        user_repo.get_by_pk.return_value = user
        token = jwt_service.create_access_token(user.pk, role=role)

        response = client.get("/mod", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == expected


def test_auth_settings_accessor():
    """Test that auth settings come from the application settings."""
    assert isinstance(get_auth_settings(), AuthSettings)
