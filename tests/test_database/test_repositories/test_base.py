"""Tests for the shared repository helpers."""

from datetime import UTC
from datetime import datetime
from unittest.mock import AsyncMock
from unittest.mock import patch
from uuid import uuid4

import pytest

from claycraft_api.database.repositories.post import PostRepository


@pytest.fixture
def post_repo():
    return PostRepository()


@pytest.fixture
def mock_connection():
    with patch(
        "claycraft_api.database.repositories.base.get_db_connection"
    ) as mock_get_conn:
        connection = AsyncMock()
        mock_get_conn.return_value.__aenter__.return_value = connection
        yield connection


class TestBaseRepository:
    """Test the generic queries through a concrete repository."""

    @pytest.mark.asyncio
    async def test_count_where_defaults_to_zero(self, post_repo, mock_connection):
        """Test that a NULL count reads as zero."""
        mock_connection.fetchval.return_value = None
        since = datetime.now(UTC)
        author_pk = uuid4()

        assert await post_repo.count_by_author_since(author_pk, since) == 0
        query, *args = mock_connection.fetchval.call_args.args
        assert query.startswith("SELECT COUNT(*) FROM posts WHERE")
        assert args == [author_pk, since]

    @pytest.mark.asyncio
    async def test_exists(self, post_repo, mock_connection):
        mock_connection.fetchval.return_value = True

        assert await post_repo.exists(uuid4()) is True

    @pytest.mark.asyncio
    async def test_get_by_pk_missing(self, post_repo, mock_connection):
        mock_connection.fetchrow.return_value = None

        assert await post_repo.get_by_pk(uuid4()) is None

    @pytest.mark.asyncio
    async def test_update_fields_bumps_updated_at(self, post_repo, mock_connection):
        """Test the generated UPDATE for a publish toggle."""
        mock_connection.fetchrow.return_value = None
        post_pk = uuid4()

        await post_repo.set_published(post_pk, published=False)

        query, *args = mock_connection.fetchrow.call_args.args
        assert "published = $1" in query
        assert "updated_at = NOW()" in query
        assert "WHERE pk = $2" in query
        assert args == [False, post_pk]

    @pytest.mark.asyncio
    async def test_insert_without_row_raises(self, post_repo, mock_connection):
        mock_connection.fetchrow.return_value = None

        with pytest.raises(ValueError, match="Failed to create record in posts"):
            await post_repo.insert({"title": "Bowl"})
