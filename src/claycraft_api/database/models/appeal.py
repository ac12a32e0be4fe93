"""Appeal models for the Clay Craft API."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.moderation_action import ModerationActionType


class AppealStatus(str, Enum):
    """Appeal status enumeration."""

    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    DENIED = "denied"


UNRESOLVED_APPEAL_STATUSES = (AppealStatus.PENDING, AppealStatus.UNDER_REVIEW)
APPEAL_DECISIONS = (AppealStatus.APPROVED, AppealStatus.DENIED)


class Appeal(BaseDBModel):
    """Appeal database model."""

    user_pk: UUID  # Appellant
    moderation_action_pk: UUID
    reason: str
    status: AppealStatus = AppealStatus.PENDING

    # Review details
    reviewed_by_pk: UUID | None = None
    reviewed_at: datetime | None = None

    @property
    def is_unresolved(self) -> bool:
        return self.status in UNRESOLVED_APPEAL_STATUSES


class AppealCreate(BaseModel):
    """Appeal submission model."""

    moderation_action_pk: UUID
    reason: str = Field(..., min_length=1, max_length=1000)


class AppealDecision(BaseModel):
    """Appeal decision model for moderator actions.

    Accepts ``approve``/``deny`` as well as the status values.
    """

    decision: str


class AppealWithAction(BaseModel):
    """Appeal together with the moderation action it contests."""

    pk: UUID
    user_pk: UUID
    moderation_action_pk: UUID
    reason: str
    status: AppealStatus
    reviewed_by_pk: UUID | None
    reviewed_at: datetime | None
    created_at: datetime

    action_type: ModerationActionType
    action_reason: str
    action_expires_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
