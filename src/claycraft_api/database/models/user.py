"""User model for the Clay Craft API."""

from datetime import UTC
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict

from claycraft_api.database.models.base import MODERATOR_ROLES
from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.base import UserRole


class User(BaseDBModel):
    """User database model."""

    email: str
    username: str
    bio: str | None = None
    role: UserRole = UserRole.USER
    suspended: bool = False
    suspended_until: datetime | None = None
    warning_count: int = 0

    @property
    def is_suspended(self) -> bool:
        """Whether the suspension is currently in force.

        The stored flag is left set after ``suspended_until`` passes; the
        suspension simply stops applying.
        """
        if not self.suspended:
            return False
        return self.suspended_until is None or self.suspended_until > datetime.now(
            UTC
        )

    @property
    def is_moderator(self) -> bool:
        return self.role in MODERATOR_ROLES

    @property
    def target_ref(self) -> TargetRef:
        return TargetRef(target_type=TargetType.USER, target_pk=self.pk)

    @property
    def moderation_text(self) -> str:
        return f"{self.username} {self.bio or ''}"


class UserCreate(BaseModel):
    """User creation model."""

    email: str
    username: str
    bio: str | None = None
    role: UserRole = UserRole.USER

    model_config = ConfigDict(use_enum_values=True)


class UserModerationSummary(BaseModel):
    """User row for the moderator user list."""

    pk: UUID
    username: str
    role: UserRole
    suspended: bool
    suspended_until: datetime | None
    warning_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
