"""Report repository for content and user reporting."""

from uuid import UUID

from asyncpg import Record

from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.report import UNRESOLVED_REPORT_STATUSES
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.report import ReportStatus
from claycraft_api.database.repositories.base import BaseRepository

_UNRESOLVED = [status.value for status in UNRESOLVED_REPORT_STATUSES]


class ReportRepository(BaseRepository[Report]):
    """Repository for report database operations."""

    def __init__(self) -> None:
        """Initialize the report repository."""
        super().__init__("reports")

    def _record_to_model(self, record: Record) -> Report:
        """Convert database record to Report model."""
        return Report.model_validate(dict(record))

    async def create_report(
        self,
        reporter_pk: UUID,
        target_type: TargetType,
        target_pk: UUID,
        reason: str,
        description: str,
    ) -> Report:
        """Create a pending report."""
        return await self.insert(
            {
                "reporter_pk": reporter_pk,
                "target_type": target_type.value,
                "target_pk": target_pk,
                "reason": reason,
                "description": description,
                "status": ReportStatus.PENDING.value,
            }
        )

    async def resolve_if_unresolved(
        self,
        report_pk: UUID,
        status: ReportStatus,
        resolved_by_pk: UUID,
    ) -> Report | None:
        """Resolve a report unless someone else already has.

        Returns ``None`` when the report is missing or no longer pending or
        under review.
        """
        query = """
            UPDATE reports
            SET status = $1, resolved_by_pk = $2, resolved_at = NOW(),
                updated_at = NOW()
            WHERE pk = $3 AND status = ANY($4::text[])
            RETURNING *
        """
        return await self._fetch_one(
            query, status.value, resolved_by_pk, report_pk, _UNRESOLVED
        )

    async def mark_under_review(self, report_pk: UUID) -> Report | None:
        """Move a pending report to under review."""
        query = """
            UPDATE reports
            SET status = $1, updated_at = NOW()
            WHERE pk = $2 AND status = $3
            RETURNING *
        """
        return await self._fetch_one(
            query,
            ReportStatus.UNDER_REVIEW.value,
            report_pk,
            ReportStatus.PENDING.value,
        )

    async def get_reports_for_review(
        self,
        limit: int = 50,
        offset: int = 0,
        status_filter: str | None = None,
    ) -> list[Report]:
        """Get reports newest first, optionally filtered by status."""
        query = """
            SELECT * FROM reports
            WHERE ($3::text IS NULL OR status = $3)
            ORDER BY created_at DESC
            LIMIT $1 OFFSET $2
        """
        return await self._fetch_many(query, limit, offset, status_filter)

    async def get_unresolved(self, limit: int = 20) -> list[Report]:
        """Get the most recent pending or under-review reports."""
        query = """
            SELECT * FROM reports
            WHERE status = ANY($1::text[])
            ORDER BY created_at DESC
            LIMIT $2
        """
        return await self._fetch_many(query, _UNRESOLVED, limit)

    async def get_target_reports(
        self,
        target_type: TargetType,
        target_pk: UUID,
    ) -> list[Report]:
        """Get all reports filed against one target."""
        return await self.find_by(target_type=target_type.value, target_pk=target_pk)
