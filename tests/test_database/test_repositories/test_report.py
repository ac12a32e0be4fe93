"""Tests for ReportRepository database operations."""

from datetime import UTC
from datetime import datetime
from unittest.mock import AsyncMock
from unittest.mock import patch
from uuid import uuid4

import pytest

from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.report import ReportStatus
from claycraft_api.database.repositories.report import ReportRepository


@pytest.fixture
def report_repo():
    """Create a ReportRepository instance."""
    return ReportRepository()


@pytest.fixture
def report_record():
    """Row as returned for a resolved report."""
    return {
        "pk": uuid4(),
        "reporter_pk": uuid4(),
        "target_type": "post",
        "target_pk": uuid4(),
        "reason": "spam",
        "description": "Advert for pots",
        "status": "resolved",
        "resolved_by_pk": uuid4(),
        "resolved_at": datetime.now(UTC),
        "created_at": datetime.now(UTC),
        "updated_at": datetime.now(UTC),
    }


class TestReportRepository:
    """Test report persistence."""

    @pytest.mark.asyncio
    async def test_resolve_if_unresolved(self, report_repo, report_record):
        """Test that the update is guarded by the unresolved statuses."""
        moderator_pk = report_record["resolved_by_pk"]
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetchrow.return_value = report_record
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            report = await report_repo.resolve_if_unresolved(
                report_record["pk"], ReportStatus.RESOLVED, moderator_pk
            )

        assert report.status == ReportStatus.RESOLVED
        assert report.target_type == TargetType.POST
        query, *args = mock_connection.fetchrow.call_args.args
        assert "status = ANY($4::text[])" in query
        assert args == [
            "resolved",
            moderator_pk,
            report_record["pk"],
            ["pending", "under_review"],
        ]

    @pytest.mark.asyncio
    async def test_resolve_already_resolved(self, report_repo):
        """Test that a lost race returns None."""
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetchrow.return_value = None
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            report = await report_repo.resolve_if_unresolved(
                uuid4(), ReportStatus.DISMISSED, uuid4()
            )

        assert report is None

    @pytest.mark.asyncio
    async def test_create_report(self, report_repo, report_record):
        """Test that new reports are stored pending."""
        record = {
            **report_record,
            "status": "pending",
            "resolved_by_pk": None,
            "resolved_at": None,
        }
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetchrow.return_value = record
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            report = await report_repo.create_report(
                reporter_pk=record["reporter_pk"],
                target_type=TargetType.POST,
                target_pk=record["target_pk"],
                reason="spam",
                description="Advert for pots",
            )

        assert report.status == ReportStatus.PENDING
        query, *values = mock_connection.fetchrow.call_args.args
        assert "INSERT INTO reports" in query
        assert "post" in values
        assert "pending" in values

    @pytest.mark.asyncio
    async def test_get_unresolved(self, report_repo, report_record):
        """Test fetching the pending queue."""
        with patch(
            "claycraft_api.database.repositories.base.get_db_connection"
        ) as mock_get_conn:
            mock_connection = AsyncMock()
            mock_connection.fetch.return_value = [
                {**report_record, "status": "pending"}
            ]
            mock_get_conn.return_value.__aenter__.return_value = mock_connection

            reports = await report_repo.get_unresolved(limit=5)

        assert [r.status for r in reports] == [ReportStatus.PENDING]
        mock_connection.fetch.assert_called_once()
        assert mock_connection.fetch.call_args.args[1:] == (
            ["pending", "under_review"],
            5,
        )
