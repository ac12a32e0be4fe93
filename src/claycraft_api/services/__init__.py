"""Service layer for the Clay Craft API."""

from claycraft_api.services.appeal_service import AppealService
from claycraft_api.services.moderation_action_service import (
    ModerationActionService,
)
from claycraft_api.services.report_service import ReportService
from claycraft_api.services.spam_detection_service import SpamDetectionService
from claycraft_api.services.target_service import TargetService
from claycraft_api.services.user_service import UserService

__all__ = [
    "AppealService",
    "ModerationActionService",
    "ReportService",
    "SpamDetectionService",
    "TargetService",
    "UserService",
]
