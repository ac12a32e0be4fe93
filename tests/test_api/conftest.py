"""Test configuration for API tests."""

from unittest.mock import AsyncMock

import pytest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from claycraft_api.api.admin_moderation import router as admin_moderation_router
from claycraft_api.api.appeals import router as appeals_router
from claycraft_api.api.reports import router as reports_router
from claycraft_api.auth.dependencies import get_current_user
from claycraft_api.services.appeal_service import AppealService
from claycraft_api.services.appeal_service import get_appeal_service
from claycraft_api.services.moderation_action_service import (
    ModerationActionService,
)
from claycraft_api.services.moderation_action_service import (
    get_moderation_action_service,
)
from claycraft_api.services.report_service import ReportService
from claycraft_api.services.report_service import get_report_service
from claycraft_api.services.target_service import TargetService
from claycraft_api.services.user_service import UserService
from claycraft_api.services.user_service import get_user_service


@pytest.fixture
def app():
    """Create test FastAPI app without database initialization."""
    app = FastAPI(title="Clay Craft API")
    app.include_router(reports_router, prefix="/api/v1")
    app.include_router(appeals_router, prefix="/api/v1")
    app.include_router(admin_moderation_router, prefix="/api/v1")
    return app


@pytest.fixture
def mock_report_service():
    return AsyncMock(spec=ReportService)


@pytest.fixture
def mock_appeal_service():
    return AsyncMock(spec=AppealService)


@pytest.fixture
def mock_action_service():
    service = AsyncMock(spec=ModerationActionService)
    service.target_service = AsyncMock(spec=TargetService)
    return service


@pytest.fixture
def mock_user_service():
    return AsyncMock(spec=UserService)


@pytest.fixture
def client(
    app,
    mock_report_service,
    mock_appeal_service,
    mock_action_service,
    mock_user_service,
):
    """Client with mocked services and no authenticated user yet."""
    app.dependency_overrides[get_report_service] = lambda: mock_report_service
    app.dependency_overrides[get_appeal_service] = lambda: mock_appeal_service
    app.dependency_overrides[get_moderation_action_service] = (
        lambda: mock_action_service
    )
    app.dependency_overrides[get_user_service] = lambda: mock_user_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def login(app):
    """Authenticate requests as the given user."""

    def _login(user):
        app.dependency_overrides[get_current_user] = lambda: user

    return _login
