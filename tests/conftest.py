"""Test configuration and fixtures for the Clay Craft API tests."""

from datetime import UTC
from datetime import datetime
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from claycraft_api.config.settings import ModerationSettings
from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.appeal import AppealStatus
from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.base import UserRole
from claycraft_api.database.models.comment import Comment
from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.moderation_action import ModerationActionType
from claycraft_api.database.models.post import Post
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.report import ReportStatus
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.appeal import AppealRepository
from claycraft_api.database.repositories.comment import CommentRepository
from claycraft_api.database.repositories.moderation_action import (
    ModerationActionRepository,
)
from claycraft_api.database.repositories.post import PostRepository
from claycraft_api.database.repositories.report import ReportRepository
from claycraft_api.database.repositories.user import UserRepository


def make_user(**overrides) -> User:
    """Build an established user; override any field."""
    data = {
        "pk": uuid4(),
        "email": "potter@example.com",
        "username": "potter",
        "bio": "Wheel thrown stoneware",
        "role": UserRole.USER,
        "created_at": datetime.now(UTC) - timedelta(days=90),
    }
    data.update(overrides)
    return User(**data)


def make_post(author: User, **overrides) -> Post:
    data = {
        "pk": uuid4(),
        "author_pk": author.pk,
        "title": "Celadon bowl",
        "description": "Cone 10 reduction firing",
        "created_at": datetime.now(UTC),
    }
    data.update(overrides)
    return Post(**data)


def make_comment(author: User, post: Post, **overrides) -> Comment:
    data = {
        "pk": uuid4(),
        "author_pk": author.pk,
        "post_pk": post.pk,
        "content": "Lovely glaze",
        "created_at": datetime.now(UTC),
    }
    data.update(overrides)
    return Comment(**data)


def make_report(target_type: TargetType, target_pk, **overrides) -> Report:
    data = {
        "pk": uuid4(),
        "reporter_pk": uuid4(),
        "target_type": target_type,
        "target_pk": target_pk,
        "reason": "spam",
        "description": "Looks like an advert",
        "status": ReportStatus.PENDING,
        "created_at": datetime.now(UTC),
    }
    data.update(overrides)
    return Report(**data)


def make_action(user: User, **overrides) -> ModerationAction:
    data = {
        "pk": uuid4(),
        "user_pk": user.pk,
        "moderator_pk": uuid4(),
        "action_type": ModerationActionType.WARNING,
        "reason": "Be nice",
        "target_type": TargetType.USER,
        "target_pk": user.pk,
        "created_at": datetime.now(UTC),
    }
    data.update(overrides)
    return ModerationAction(**data)


def make_appeal(user: User, action: ModerationAction, **overrides) -> Appeal:
    data = {
        "pk": uuid4(),
        "user_pk": user.pk,
        "moderation_action_pk": action.pk,
        "reason": "It was a misunderstanding",
        "status": AppealStatus.PENDING,
        "created_at": datetime.now(UTC),
    }
    data.update(overrides)
    return Appeal(**data)


@pytest.fixture
def regular_user() -> User:
    """Established regular user."""
    return make_user()


@pytest.fixture
def moderator_user() -> User:
    """Moderator user."""
    return make_user(
        email="mod@example.com", username="moderator", role=UserRole.MODERATOR
    )


@pytest.fixture
def admin_user() -> User:
    """Admin user."""
    return make_user(email="admin@example.com", username="admin", role=UserRole.ADMIN)


@pytest.fixture
def sample_post(regular_user) -> Post:
    """Published post by the regular user."""
    return make_post(regular_user)


@pytest.fixture
def sample_comment(regular_user, sample_post) -> Comment:
    """Comment by the regular user."""
    return make_comment(regular_user, sample_post)


@pytest.fixture
def system_actor_pk():
    """Primary key of the system reporter."""
    return uuid4()


@pytest.fixture
def moderation_settings(system_actor_pk) -> ModerationSettings:
    """Moderation settings with default thresholds."""
    return ModerationSettings(system_actor_pk=system_actor_pk)


@pytest.fixture
def mock_user_repo():
    """Mocked UserRepository."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_post_repo():
    """Mocked PostRepository with no recent activity."""
    repo = AsyncMock(spec=PostRepository)
    repo.count_by_author_since.return_value = 0
    return repo


@pytest.fixture
def mock_comment_repo():
    """Mocked CommentRepository with no recent activity."""
    repo = AsyncMock(spec=CommentRepository)
    repo.count_by_author_since.return_value = 0
    return repo


@pytest.fixture
def mock_report_repo():
    """Mocked ReportRepository."""
    return AsyncMock(spec=ReportRepository)


@pytest.fixture
def mock_action_repo():
    """Mocked ModerationActionRepository that echoes created actions."""
    repo = AsyncMock(spec=ModerationActionRepository)

    async def create_action(action_data):
        return ModerationAction(
            pk=uuid4(), created_at=datetime.now(UTC), **action_data.model_dump()
        )

    repo.create_action.side_effect = create_action
    return repo


@pytest.fixture
def mock_appeal_repo():
    """Mocked AppealRepository."""
    return AsyncMock(spec=AppealRepository)


@pytest.fixture
def user_factory():
    """Build users with field overrides."""
    return make_user


@pytest.fixture
def post_factory():
    """Build posts for an author."""
    return make_post


@pytest.fixture
def comment_factory():
    """Build comments for an author and post."""
    return make_comment


@pytest.fixture
def report_factory():
    """Build reports against a target."""
    return make_report


@pytest.fixture
def action_factory():
    """Build moderation actions against a user."""
    return make_action


@pytest.fixture
def appeal_factory():
    """Build appeals of an action."""
    return make_appeal
