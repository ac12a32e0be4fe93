"""User service: account creation hook and moderator user lookups."""

import logging

from uuid import UUID

from claycraft_api.database.models.comment import Comment
from claycraft_api.database.models.post import Post
from claycraft_api.database.models.spam_check import AutoModerationResult
from claycraft_api.database.models.user import User
from claycraft_api.database.models.user import UserCreate
from claycraft_api.database.models.user import UserModerationSummary
from claycraft_api.database.repositories.user import UserRepository
from claycraft_api.services.errors import NotFoundError
from claycraft_api.services.errors import ValidationFailedError
from claycraft_api.services.spam_detection_service import SpamDetectionService
from claycraft_api.services.spam_detection_service import (
    get_spam_detection_service,
)

logger = logging.getLogger(__name__)

USER_LIST_FILTERS = ("suspended", "warned")


class UserService:
    """Service for user operations that involve moderation."""

    def __init__(
        self,
        user_repo: UserRepository,
        spam_service: SpamDetectionService,
    ):
        self.user_repo = user_repo
        self.spam_service = spam_service

    async def create_user(
        self, user_data: UserCreate
    ) -> tuple[User, AutoModerationResult]:
        """Create a user and run the spam check on their profile."""
        user = await self.user_repo.create_user(user_data)
        result = await self.spam_service.auto_moderate_content(user, user)
        logger.info(
            f"User {user.pk} created; profile check {result.action.value} "
            f"(score {result.score})"
        )
        return user, result

    async def moderate_post(self, post: Post) -> AutoModerationResult:
        """Run the spam check for a newly created post."""
        author = await self.get_user(post.author_pk)
        return await self.spam_service.auto_moderate_content(post, author)

    async def moderate_comment(self, comment: Comment) -> AutoModerationResult:
        """Run the spam check for a newly created comment."""
        author = await self.get_user(comment.author_pk)
        return await self.spam_service.auto_moderate_content(comment, author)

    async def get_user(self, user_pk: UUID) -> User:
        user = await self.user_repo.get_by_pk(user_pk)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def get_moderation_summaries(
        self,
        filter_name: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[UserModerationSummary]:
        """List users for moderators, optionally only suspended or warned."""
        if filter_name is not None and filter_name not in USER_LIST_FILTERS:
            raise ValidationFailedError(f"Unknown user filter: {filter_name}")
        return await self.user_repo.get_moderation_summaries(
            filter_name, limit, offset
        )


def get_user_service() -> UserService:
    """Get user service instance."""
    return UserService(
        user_repo=UserRepository(),
        spam_service=get_spam_detection_service(),
    )
