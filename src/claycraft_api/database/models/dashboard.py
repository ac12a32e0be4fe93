"""Moderator dashboard response model."""

from pydantic import BaseModel

from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.report import Report


class ModerationDashboard(BaseModel):
    """Work queues shown on the moderator landing page."""

    pending_reports: list[Report]
    recent_actions: list[ModerationAction]
    pending_appeals: list[Appeal]
