"""Tests for user models."""

from datetime import UTC
from datetime import datetime
from datetime import timedelta
from uuid import uuid4

import pytest

from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.base import UserRole
from claycraft_api.database.models.user import User
from claycraft_api.database.models.user import UserCreate


class TestUser:
    """Test User model."""

    def test_user_default_values(self):
        """Test User model default values."""
        user = User(
            pk=uuid4(),
            created_at=datetime.now(UTC),
            email="test@example.com",
            username="testuser",
        )

        assert user.role == UserRole.USER
        assert user.bio is None
        assert user.suspended is False
        assert user.suspended_until is None
        assert user.warning_count == 0
        assert user.is_suspended is False
        assert user.is_moderator is False

    def test_permanent_suspension(self, user_factory):
        """Test that a suspension without an end date is in force."""
        assert user_factory(suspended=True).is_suspended is True

    def test_future_suspension(self, user_factory):
        """Test a suspension that has not yet ended."""
        user = user_factory(
            suspended=True, suspended_until=datetime.now(UTC) + timedelta(hours=1)
        )

        assert user.is_suspended is True

    def test_lapsed_suspension(self, user_factory):
        """Test that a passed end date lifts the suspension without a write."""
        user = user_factory(
            suspended=True, suspended_until=datetime.now(UTC) - timedelta(minutes=1)
        )

        assert user.suspended is True
        assert user.is_suspended is False

    def test_end_date_without_flag(self, user_factory):
        """Test that the flag governs a stale end date."""
        user = user_factory(suspended_until=datetime.now(UTC) + timedelta(days=1))

        assert user.is_suspended is False

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            (UserRole.USER, False),
            (UserRole.MODERATOR, True),
            (UserRole.ADMIN, True),
        ],
    )
    def test_is_moderator(self, user_factory, role, expected):
        """Test moderator privileges by role."""
        assert user_factory(role=role).is_moderator is expected

    def test_target_ref_and_text(self, user_factory):
        """Test how a user is referenced and scored."""
        user = user_factory(username="kiln_king", bio=None)

        assert user.target_ref.target_type == TargetType.USER
        assert user.target_ref.target_pk == user.pk
        assert user.moderation_text == "kiln_king "


class TestUserCreate:
    """Test UserCreate model."""

    def test_role_stored_as_value(self):
        """Test that the role dumps as its string value."""
        data = UserCreate(
            email="test@example.com", username="testuser", role=UserRole.MODERATOR
        )

        assert data.model_dump()["role"] == "moderator"
