"""Appeal repository for the Clay Craft API."""

from uuid import UUID

from asyncpg import Record

from claycraft_api.database.models.appeal import UNRESOLVED_APPEAL_STATUSES
from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.appeal import AppealStatus
from claycraft_api.database.models.appeal import AppealWithAction
from claycraft_api.database.repositories.base import BaseRepository

_UNRESOLVED = [status.value for status in UNRESOLVED_APPEAL_STATUSES]

# Appeals joined with the action they contest.
_WITH_ACTION = """
    SELECT a.*,
           ma.action_type,
           ma.reason AS action_reason,
           ma.expires_at AS action_expires_at
    FROM appeals a
    JOIN moderation_actions ma ON a.moderation_action_pk = ma.pk
"""


class AppealRepository(BaseRepository[Appeal]):
    """Repository for appeal operations."""

    def __init__(self):
        super().__init__("appeals")

    def _record_to_model(self, record: Record) -> Appeal:
        """Convert database record to Appeal model."""
        return Appeal.model_validate(dict(record))

    async def create_appeal(
        self, user_pk: UUID, moderation_action_pk: UUID, reason: str
    ) -> Appeal:
        """Create a pending appeal."""
        return await self.insert(
            {
                "user_pk": user_pk,
                "moderation_action_pk": moderation_action_pk,
                "reason": reason,
                "status": AppealStatus.PENDING.value,
            }
        )

    async def decide_if_unresolved(
        self,
        appeal_pk: UUID,
        status: AppealStatus,
        reviewed_by_pk: UUID,
    ) -> Appeal | None:
        """Record a decision unless the appeal was already decided.

        Returns ``None`` when the appeal is missing or already decided.
        """
        query = """
            UPDATE appeals
            SET status = $1, reviewed_by_pk = $2, reviewed_at = NOW(),
                updated_at = NOW()
            WHERE pk = $3 AND status = ANY($4::text[])
            RETURNING *
        """
        return await self._fetch_one(
            query, status.value, reviewed_by_pk, appeal_pk, _UNRESOLVED
        )

    async def mark_under_review(self, appeal_pk: UUID) -> Appeal | None:
        """Move a pending appeal to under review."""
        query = """
            UPDATE appeals
            SET status = $1, updated_at = NOW()
            WHERE pk = $2 AND status = $3
            RETURNING *
        """
        return await self._fetch_one(
            query,
            AppealStatus.UNDER_REVIEW.value,
            appeal_pk,
            AppealStatus.PENDING.value,
        )

    async def get_user_appeals(
        self, user_pk: UUID, limit: int = 20, offset: int = 0
    ) -> list[AppealWithAction]:
        """Get a user's appeals with the contested action."""
        query = f"""
            {_WITH_ACTION}
            WHERE a.user_pk = $1
            ORDER BY a.created_at DESC
            LIMIT $2 OFFSET $3
        """  # nosec B608
        records = await self._fetch_rows(query, user_pk, limit, offset)
        return [AppealWithAction.model_validate(dict(r)) for r in records]

    async def get_appeals_queue(
        self,
        status: AppealStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[AppealWithAction]:
        """Get appeals for moderators, newest first, optionally by status."""
        query = f"""
            {_WITH_ACTION}
            WHERE ($1::text IS NULL OR a.status = $1)
            ORDER BY a.created_at DESC
            LIMIT $2 OFFSET $3
        """  # nosec B608
        records = await self._fetch_rows(
            query, status.value if status else None, limit, offset
        )
        return [AppealWithAction.model_validate(dict(r)) for r in records]

    async def get_unresolved(self, limit: int = 10) -> list[Appeal]:
        """Get the most recent pending or under-review appeals."""
        query = """
            SELECT * FROM appeals
            WHERE status = ANY($1::text[])
            ORDER BY created_at DESC
            LIMIT $2
        """
        return await self._fetch_many(query, _UNRESOLVED, limit)
