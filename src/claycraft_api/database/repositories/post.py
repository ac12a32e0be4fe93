"""Post repository for the Clay Craft API."""

from datetime import datetime
from uuid import UUID

from asyncpg import Record

from claycraft_api.database.models.post import Post
from claycraft_api.database.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for the post reads and publish toggling moderation needs."""

    def __init__(self):
        super().__init__("posts")

    def _record_to_model(self, record: Record) -> Post:
        """Convert database record to Post model."""
        return Post.model_validate(dict(record))

    async def set_published(self, post_pk: UUID, *, published: bool) -> Post | None:
        """Publish or unpublish a post."""
        return await self.update_fields(post_pk, {"published": published})

    async def count_by_author_since(self, author_pk: UUID, since: datetime) -> int:
        """Count posts an author created after ``since``."""
        return await self.count_where(
            "author_pk = $1 AND created_at > $2", author_pk, since
        )
