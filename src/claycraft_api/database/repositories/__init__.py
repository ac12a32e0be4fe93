"""Database repositories for the Clay Craft API."""

from claycraft_api.database.repositories.appeal import AppealRepository
from claycraft_api.database.repositories.base import BaseRepository
from claycraft_api.database.repositories.comment import CommentRepository
from claycraft_api.database.repositories.moderation_action import (
    ModerationActionRepository,
)
from claycraft_api.database.repositories.post import PostRepository
from claycraft_api.database.repositories.report import ReportRepository
from claycraft_api.database.repositories.user import UserRepository

__all__ = [
    "AppealRepository",
    "BaseRepository",
    "CommentRepository",
    "ModerationActionRepository",
    "PostRepository",
    "ReportRepository",
    "UserRepository",
]
