"""Moderation action service for the Clay Craft API."""

import logging

from datetime import UTC
from datetime import datetime
from uuid import UUID

from claycraft_api.database.models.base import Publishable
from claycraft_api.database.models.moderation_action import (
    SUSPENSION_LIFTED_ACTION_TYPE,
)
from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.moderation_action import ModerationActionCreate
from claycraft_api.database.models.moderation_action import ModerationActionType
from claycraft_api.database.models.moderation_action import suspension_offset
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.moderation_action import (
    ModerationActionRepository,
)
from claycraft_api.database.repositories.user import UserRepository
from claycraft_api.services.errors import NotFoundError
from claycraft_api.services.target_service import ModerationTarget
from claycraft_api.services.target_service import TargetService

logger = logging.getLogger(__name__)

DEFAULT_SUSPENSION_REASON = "Suspended by moderator"
DEFAULT_WARNING_REASON = "Warning issued by moderator"
SUSPENSION_LIFTED_REASON = "Suspension lifted"
CONTENT_REMOVED_REASON = "Content removed due to policy violation"
CONTENT_APPROVED_REASON = "Content approved after review"


class ModerationActionService:
    """Records disciplinary actions and applies their effects on users."""

    def __init__(
        self,
        action_repo: ModerationActionRepository | None = None,
        user_repo: UserRepository | None = None,
        target_service: TargetService | None = None,
    ) -> None:
        self.action_repo = action_repo or ModerationActionRepository()
        self.user_repo = user_repo or UserRepository()
        self.target_service = target_service or TargetService(user_repo=self.user_repo)

    async def suspend(
        self,
        user: User,
        duration: str | None,
        reason: str | None,
        moderator: User,
    ) -> ModerationAction:
        """Suspend a user for a fixed duration, or permanently."""
        offset = suspension_offset(duration)
        suspended_until = datetime.now(UTC) + offset if offset is not None else None

        await self.user_repo.set_suspension(
            user.pk, suspended=True, suspended_until=suspended_until
        )

        action = await self._record(
            user=user,
            moderator=moderator,
            action_type=(
                ModerationActionType.TEMPORARY_SUSPENSION
                if suspended_until is not None
                else ModerationActionType.PERMANENT_SUSPENSION
            ),
            reason=reason or DEFAULT_SUSPENSION_REASON,
            target=user,
            expires_at=suspended_until,
        )

        logger.info(
            f"User {user.pk} suspended by {moderator.pk} "
            f"until {suspended_until or 'further notice'}"
        )
        return action

    async def unsuspend(self, user: User, moderator: User) -> ModerationAction:
        """Lift a user's suspension."""
        await self.user_repo.set_suspension(
            user.pk, suspended=False, suspended_until=None
        )

        action = await self._record(
            user=user,
            moderator=moderator,
            action_type=SUSPENSION_LIFTED_ACTION_TYPE,
            reason=SUSPENSION_LIFTED_REASON,
            target=user,
        )

        logger.info(f"Suspension of user {user.pk} lifted by {moderator.pk}")
        return action

    async def warn(
        self, user: User, reason: str | None, moderator: User
    ) -> ModerationAction:
        """Issue a warning and bump the user's warning count."""
        updated = await self.user_repo.increment_warning_count(user.pk)
        if updated is None:
            raise NotFoundError(f"User {user.pk} not found")

        action = await self._record(
            user=user,
            moderator=moderator,
            action_type=ModerationActionType.WARNING,
            reason=reason or DEFAULT_WARNING_REASON,
            target=user,
        )

        logger.info(
            f"User {user.pk} warned by {moderator.pk} "
            f"(warning count {updated.warning_count})"
        )
        return action

    async def remove_content(
        self, content: ModerationTarget, moderator: User
    ) -> ModerationAction:
        """Unpublish content where possible and record its removal."""
        if isinstance(content, Publishable):
            await self.target_service.set_published(content, published=False)
        else:
            logger.info(
                f"{content.target_ref.target_type.value} {content.pk} has no "
                "publish flag; recording removal only"
            )

        author = await self.target_service.load_author(content)
        return await self._record(
            user=author,
            moderator=moderator,
            action_type=ModerationActionType.CONTENT_REMOVAL,
            reason=CONTENT_REMOVED_REASON,
            target=content,
        )

    async def approve_content(
        self, content: ModerationTarget, moderator: User
    ) -> ModerationAction:
        """Record that content was reviewed and approved."""
        author = await self.target_service.load_author(content)
        return await self._record(
            user=author,
            moderator=moderator,
            action_type=ModerationActionType.CONTENT_APPROVAL,
            reason=CONTENT_APPROVED_REASON,
            target=content,
        )

    async def restore_content(self, content: ModerationTarget) -> None:
        """Republish content removed by a moderation action."""
        if isinstance(content, Publishable):
            await self.target_service.set_published(content, published=True)
            logger.info(f"Content {content.pk} republished")

    async def reverse(self, action: ModerationAction, moderator: User) -> None:
        """Undo the effect of an action whose appeal was approved.

        Warnings and approvals have no reversal.
        """
        if action.is_suspension:
            subject = await self.target_service.load_user(action.user_pk)
            await self.unsuspend(subject, moderator)
        elif action.action_type == ModerationActionType.CONTENT_REMOVAL:
            try:
                target = await self.target_service.load(action.target)
            except NotFoundError:
                logger.warning(f"Removed content of action {action.pk} no longer exists")
                return
            await self.restore_content(target)
        else:
            logger.info(
                f"Action {action.pk} ({action.action_type.value}) has no reversal"
            )

    async def get_action(self, action_pk: UUID) -> ModerationAction:
        """Fetch an action or raise ``NotFoundError``."""
        action = await self.action_repo.get_by_pk(action_pk)
        if action is None:
            raise NotFoundError("Moderation action not found")
        return action

    async def get_user_actions(
        self,
        user_pk: UUID,
        *,
        active_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ModerationAction]:
        """Get actions taken against a user."""
        return await self.action_repo.get_actions_by_user(
            user_pk, active_only=active_only, limit=limit, offset=offset
        )

    async def get_recent_actions(self, limit: int = 10) -> list[ModerationAction]:
        """Get the latest actions across all users."""
        return await self.action_repo.get_recent(limit)

    async def get_expired_actions(self, limit: int = 50) -> list[ModerationAction]:
        """Get actions whose expiry has passed."""
        return await self.action_repo.get_expired(limit)

    async def _record(
        self,
        *,
        user: User,
        moderator: User,
        action_type: ModerationActionType,
        reason: str,
        target: ModerationTarget,
        expires_at: datetime | None = None,
    ) -> ModerationAction:
        ref = target.target_ref
        return await self.action_repo.create_action(
            ModerationActionCreate(
                user_pk=user.pk,
                moderator_pk=moderator.pk,
                action_type=action_type,
                reason=reason,
                target_type=ref.target_type,
                target_pk=ref.target_pk,
                expires_at=expires_at,
            )
        )


def get_moderation_action_service() -> ModerationActionService:
    """Get moderation action service instance."""
    return ModerationActionService(
        action_repo=ModerationActionRepository(),
        user_repo=UserRepository(),
    )
