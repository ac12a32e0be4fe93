"""Report database models for content and user reporting."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel
from pydantic import Field

from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.moderation_action import ModerationAction


class ReportStatus(str, Enum):
    """Status of a report."""

    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


UNRESOLVED_REPORT_STATUSES = (ReportStatus.PENDING, ReportStatus.UNDER_REVIEW)
REPORT_OUTCOMES = (ReportStatus.RESOLVED, ReportStatus.DISMISSED)


class ReportAction(str, Enum):
    """Moderator actions available when resolving a report."""

    DISMISS = "dismiss"
    APPROVE = "approve"
    WARN_USER = "warn_user"
    SUSPEND_USER = "suspend_user"


class ContentAction(str, Enum):
    """Follow-up applied to the reported content on approval."""

    REMOVE = "remove"
    APPROVE = "approve"


class Report(BaseDBModel):
    """Report model for content and user reporting."""

    reporter_pk: UUID
    target_type: TargetType
    target_pk: UUID
    reason: str
    description: str
    status: ReportStatus = ReportStatus.PENDING
    resolved_by_pk: UUID | None = None
    resolved_at: datetime | None = None

    @property
    def target(self) -> TargetRef:
        return TargetRef(target_type=self.target_type, target_pk=self.target_pk)

    @property
    def is_unresolved(self) -> bool:
        return self.status in UNRESOLVED_REPORT_STATUSES


class ReportCreate(BaseModel):
    """Model for submitting a new report."""

    target_type: TargetType
    target_pk: UUID
    reason: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=1000)


class ReportResolution(BaseModel):
    """Moderator decision on a report."""

    action_type: str
    content_action: str | None = None
    warning_reason: str | None = Field(None, max_length=1000)
    suspension_duration: str | None = None
    suspension_reason: str | None = Field(None, max_length=1000)


class ReportResolutionResult(BaseModel):
    """Resolved report and the follow-up action, if one was taken."""

    report: Report
    action: ModerationAction | None = None
