"""Comment model for the Clay Craft API."""

from uuid import UUID

from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType


class Comment(BaseDBModel):
    """Comment database model."""

    author_pk: UUID
    post_pk: UUID
    content: str

    @property
    def target_ref(self) -> TargetRef:
        return TargetRef(target_type=TargetType.COMMENT, target_pk=self.pk)

    @property
    def moderation_text(self) -> str:
        return self.content
