"""User repository for the Clay Craft API."""

from datetime import datetime
from uuid import UUID

from asyncpg import Record

from claycraft_api.database.models.user import User
from claycraft_api.database.models.user import UserCreate
from claycraft_api.database.models.user import UserModerationSummary
from claycraft_api.database.repositories.base import BaseRepository

_SUMMARY_FILTERS = {
    "suspended": "WHERE suspended = TRUE",
    "warned": "WHERE warning_count > 0",
}


class UserRepository(BaseRepository[User]):
    """Repository for user operations."""

    def __init__(self):
        super().__init__("users")

    def _record_to_model(self, record: Record) -> User:
        """Convert database record to User model."""
        return User.model_validate(dict(record))

    async def create_user(self, user_data: UserCreate) -> User:
        """Create a new user."""
        return await self.insert(user_data.model_dump())

    async def set_suspension(
        self,
        user_pk: UUID,
        *,
        suspended: bool,
        suspended_until: datetime | None,
    ) -> User | None:
        """Set or clear a user's suspension fields in one update."""
        return await self.update_fields(
            user_pk,
            {"suspended": suspended, "suspended_until": suspended_until},
        )

    async def increment_warning_count(self, user_pk: UUID) -> User | None:
        """Atomically add one warning to a user."""
        query = """
            UPDATE users
            SET warning_count = warning_count + 1, updated_at = NOW()
            WHERE pk = $1
            RETURNING *
        """
        return await self._fetch_one(query, user_pk)

    async def get_moderation_summaries(
        self,
        filter_name: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[UserModerationSummary]:
        """List users for moderators, optionally only suspended or warned ones."""
        query = f"""
            SELECT pk, username, role, suspended, suspended_until,
                   warning_count, created_at
            FROM users
            {_SUMMARY_FILTERS.get(filter_name or "", "")}
            ORDER BY created_at DESC
            LIMIT $1 OFFSET $2
        """  # nosec B608
        records = await self._fetch_rows(query, limit, offset)
        return [UserModerationSummary.model_validate(dict(r)) for r in records]


def get_user_repository() -> UserRepository:
    """Get user repository instance."""
    return UserRepository()
