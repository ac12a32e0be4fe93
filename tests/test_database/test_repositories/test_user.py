"""Tests for UserRepository database operations."""

from datetime import UTC
from datetime import datetime
from unittest.mock import AsyncMock
from unittest.mock import patch
from uuid import uuid4

import pytest

from claycraft_api.database.repositories.user import UserRepository


@pytest.fixture
def user_repo():
    """Create a UserRepository instance."""
    return UserRepository()


@pytest.fixture
def user_record():
    """Row for a warned user."""
    return {
        "pk": uuid4(),
        "email": "potter@example.com",
        "username": "potter",
        "bio": None,
        "role": "user",
        "suspended": False,
        "suspended_until": None,
        "warning_count": 2,
        "created_at": datetime.now(UTC),
        "updated_at": datetime.now(UTC),
    }


class TestUserRepository:
    """Test user persistence."""

    @pytest.mark.asyncio
    async def test_increment_warning_count(self, user_repo, user_record):
        """Test that warnings are incremented in a single statement."""
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetchrow.return_value = user_record
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            user = await user_repo.increment_warning_count(user_record["pk"])

        assert user.warning_count == 2
        query = mock_connection.fetchrow.call_args.args[0]
        assert "warning_count = warning_count + 1" in query

    @pytest.mark.asyncio
    async def test_increment_missing_user(self, user_repo):
        """Test that a missing user yields None."""
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetchrow.return_value = None
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            assert await user_repo.increment_warning_count(uuid4()) is None

    @pytest.mark.asyncio
    async def test_set_suspension_writes_both_fields(self, user_repo, user_record):
        """Test that the flag and end date are written together."""
        until = datetime.now(UTC)
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetchrow.return_value = {
                **user_record,
                "suspended": True,
                "suspended_until": until,
            }
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            user = await user_repo.set_suspension(
                user_record["pk"], suspended=True, suspended_until=until
            )

        assert user.is_suspended is False
        assert user.suspended is True
        query, *values = mock_connection.fetchrow.call_args.args
        assert "suspended = $1" in query
        assert "suspended_until = $2" in query
        assert values == [True, until, user_record["pk"]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("filter_name", "clause"),
        [
            ("suspended", "WHERE suspended = TRUE"),
            ("warned", "WHERE warning_count > 0"),
        ],
    )
    async def test_moderation_summary_filters(
        self, user_repo, user_record, filter_name, clause
    ):
        """Test the user list filters."""
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetch.return_value = [user_record]
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            summaries = await user_repo.get_moderation_summaries(filter_name)

        assert summaries[0].username == "potter"
        assert clause in mock_connection.fetch.call_args.args[0]
