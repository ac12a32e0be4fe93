"""Post model for the Clay Craft API."""

from uuid import UUID

from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.base import Publishable
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType


class Post(BaseDBModel, Publishable):
    """Gallery post database model."""

    author_pk: UUID
    title: str
    description: str | None = None

    @property
    def target_ref(self) -> TargetRef:
        return TargetRef(target_type=TargetType.POST, target_pk=self.pk)

    @property
    def moderation_text(self) -> str:
        return f"{self.title} {self.description or ''}"
