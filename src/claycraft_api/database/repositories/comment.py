"""Comment repository for the Clay Craft API."""

from datetime import datetime
from uuid import UUID

from asyncpg import Record

from claycraft_api.database.models.comment import Comment
from claycraft_api.database.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for comment reads used by moderation."""

    def __init__(self):
        super().__init__("comments")

    def _record_to_model(self, record: Record) -> Comment:
        """Convert database record to Comment model."""
        return Comment.model_validate(dict(record))

    async def count_by_author_since(self, author_pk: UUID, since: datetime) -> int:
        """Count comments an author created after ``since``."""
        return await self.count_where(
            "author_pk = $1 AND created_at > $2", author_pk, since
        )
