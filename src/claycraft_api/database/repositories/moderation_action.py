"""Moderation action repository for the Clay Craft API."""

from uuid import UUID

from asyncpg import Record

from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.moderation_action import ModerationActionCreate
from claycraft_api.database.repositories.base import BaseRepository


class ModerationActionRepository(BaseRepository[ModerationAction]):
    """Repository for moderation action database operations.

    Actions are append-only; there is no update path.
    """

    def __init__(self):
        super().__init__("moderation_actions")

    def _record_to_model(self, record: Record) -> ModerationAction:
        """Convert database record to ModerationAction model."""
        return ModerationAction.model_validate(dict(record))

    async def create_action(
        self, action_data: ModerationActionCreate
    ) -> ModerationAction:
        """Record a new moderation action."""
        return await self.insert(action_data.model_dump())

    async def get_actions_by_user(
        self,
        user_pk: UUID,
        *,
        active_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ModerationAction]:
        """Get actions taken against a user, newest first."""
        where_clause = "WHERE user_pk = $1"
        if active_only:
            where_clause += " AND (expires_at IS NULL OR expires_at > NOW())"

        query = f"""
            SELECT * FROM moderation_actions
            {where_clause}
            ORDER BY created_at DESC
            LIMIT $2 OFFSET $3
        """  # nosec B608
        return await self._fetch_many(query, user_pk, limit, offset)

    async def get_recent(self, limit: int = 10) -> list[ModerationAction]:
        """Get the most recent actions across all users."""
        return await self.get_latest(limit=limit)

    async def get_expired(self, limit: int = 50) -> list[ModerationAction]:
        """Get actions whose expiry has passed."""
        query = """
            SELECT * FROM moderation_actions
            WHERE expires_at IS NOT NULL AND expires_at <= NOW()
            ORDER BY expires_at DESC
            LIMIT $1
        """
        return await self._fetch_many(query, limit)
