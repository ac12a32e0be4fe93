"""Moderation action models for the Clay Craft API."""

from datetime import UTC
from datetime import datetime
from datetime import timedelta
from enum import Enum
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType


class ModerationActionType(str, Enum):
    """Disciplinary actions a moderator can record against a user."""

    WARNING = "warning"
    TEMPORARY_SUSPENSION = "temporary_suspension"
    PERMANENT_SUSPENSION = "permanent_suspension"
    CONTENT_REMOVAL = "content_removal"
    CONTENT_APPROVAL = "content_approval"


SUSPENSION_ACTION_TYPES = (
    ModerationActionType.TEMPORARY_SUSPENSION,
    ModerationActionType.PERMANENT_SUSPENSION,
)

# Lifting a suspension is recorded as a content approval; there is no
# dedicated "suspension lifted" type. Change it here if one is introduced.
SUSPENSION_LIFTED_ACTION_TYPE = ModerationActionType.CONTENT_APPROVAL


class SuspensionDuration(str, Enum):
    """Suspension lengths offered to moderators."""

    ONE_DAY = "1_day"
    THREE_DAYS = "3_days"
    ONE_WEEK = "1_week"
    ONE_MONTH = "1_month"
    PERMANENT = "permanent"


SUSPENSION_OFFSETS: dict[SuspensionDuration, timedelta | None] = {
    SuspensionDuration.ONE_DAY: timedelta(days=1),
    SuspensionDuration.THREE_DAYS: timedelta(days=3),
    SuspensionDuration.ONE_WEEK: timedelta(weeks=1),
    SuspensionDuration.ONE_MONTH: timedelta(days=30),
    SuspensionDuration.PERMANENT: None,
}


def suspension_offset(duration: str | None) -> timedelta | None:
    """Map a duration code to an expiry offset, ``None`` meaning permanent.

    Unrecognized codes fall back to one day.
    """
    try:
        return SUSPENSION_OFFSETS[SuspensionDuration(duration)]
    except ValueError:
        return SUSPENSION_OFFSETS[SuspensionDuration.ONE_DAY]


class ModerationAction(BaseDBModel):
    """Moderation action database model."""

    user_pk: UUID
    moderator_pk: UUID
    action_type: ModerationActionType
    reason: str
    target_type: TargetType
    target_pk: UUID
    expires_at: datetime | None = None

    @property
    def target(self) -> TargetRef:
        return TargetRef(target_type=self.target_type, target_pk=self.target_pk)

    @property
    def is_active(self) -> bool:
        return self.expires_at is None or self.expires_at > datetime.now(UTC)

    @property
    def is_expired(self) -> bool:
        return not self.is_active

    @property
    def is_suspension(self) -> bool:
        return self.action_type in SUSPENSION_ACTION_TYPES


class ModerationActionCreate(BaseModel):
    """Moderation action creation model."""

    user_pk: UUID
    moderator_pk: UUID
    action_type: ModerationActionType
    reason: str = Field(..., min_length=1, max_length=1000)
    target_type: TargetType
    target_pk: UUID
    expires_at: datetime | None = None

    model_config = ConfigDict(use_enum_values=True)


class SuspensionRequest(BaseModel):
    """Moderator request to suspend a user."""

    duration: str = SuspensionDuration.ONE_DAY.value
    reason: str | None = Field(None, max_length=1000)


class WarningRequest(BaseModel):
    """Moderator request to warn a user."""

    reason: str | None = Field(None, max_length=1000)
