"""Database models for the Clay Craft API."""

from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.appeal import AppealCreate
from claycraft_api.database.models.appeal import AppealDecision
from claycraft_api.database.models.appeal import AppealStatus
from claycraft_api.database.models.appeal import AppealWithAction
from claycraft_api.database.models.base import BaseDBModel
from claycraft_api.database.models.base import Publishable
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.base import UserRole
from claycraft_api.database.models.comment import Comment
from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.moderation_action import ModerationActionCreate
from claycraft_api.database.models.moderation_action import ModerationActionType
from claycraft_api.database.models.moderation_action import SuspensionDuration
from claycraft_api.database.models.post import Post
from claycraft_api.database.models.report import ContentAction
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.report import ReportAction
from claycraft_api.database.models.report import ReportCreate
from claycraft_api.database.models.report import ReportResolution
from claycraft_api.database.models.report import ReportStatus
from claycraft_api.database.models.user import User
from claycraft_api.database.models.user import UserCreate

__all__ = [
    "Appeal",
    "AppealCreate",
    "AppealDecision",
    "AppealStatus",
    "AppealWithAction",
    "BaseDBModel",
    "Comment",
    "ContentAction",
    "ModerationAction",
    "ModerationActionCreate",
    "ModerationActionType",
    "Post",
    "Publishable",
    "Report",
    "ReportAction",
    "ReportCreate",
    "ReportResolution",
    "ReportStatus",
    "SuspensionDuration",
    "TargetRef",
    "TargetType",
    "User",
    "UserCreate",
    "UserRole",
]
