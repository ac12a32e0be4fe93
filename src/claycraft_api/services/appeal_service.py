"""Appeal service for the Clay Craft API."""

import logging

from uuid import UUID

from claycraft_api.database.models.appeal import APPEAL_DECISIONS
from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.appeal import AppealCreate
from claycraft_api.database.models.appeal import AppealStatus
from claycraft_api.database.models.appeal import AppealWithAction
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.appeal import AppealRepository
from claycraft_api.services.errors import ConflictError
from claycraft_api.services.errors import ForbiddenError
from claycraft_api.services.errors import NotFoundError
from claycraft_api.services.errors import ValidationFailedError
from claycraft_api.services.moderation_action_service import (
    ModerationActionService,
)

logger = logging.getLogger(__name__)

REASON_MAX_LENGTH = 1000

# Moderator UI sends verbs; the API also accepts the resulting status
DECISION_ALIASES = {
    "approve": AppealStatus.APPROVED,
    "deny": AppealStatus.DENIED,
}


def parse_decision(decision: AppealStatus | str) -> AppealStatus:
    """Turn a decision verb or status into an appeal outcome."""
    if decision in DECISION_ALIASES:
        return DECISION_ALIASES[decision]

    try:
        status = AppealStatus(decision)
    except ValueError as e:
        raise ValidationFailedError("Invalid decision") from e
    if status not in APPEAL_DECISIONS:
        raise ValidationFailedError("Invalid decision")
    return status


class AppealService:
    """Service for managing the appeals workflow."""

    def __init__(
        self,
        appeal_repo: AppealRepository | None = None,
        action_service: ModerationActionService | None = None,
    ) -> None:
        self.appeal_repo = appeal_repo or AppealRepository()
        self.action_service = action_service or ModerationActionService()

    async def submit_appeal(self, appellant: User, appeal_data: AppealCreate) -> Appeal:
        """Contest a moderation action taken against the appellant."""
        reason = (appeal_data.reason or "").strip()
        if not reason:
            raise ValidationFailedError("Reason can't be blank")
        if len(reason) > REASON_MAX_LENGTH:
            raise ValidationFailedError(
                f"Reason is too long (maximum is {REASON_MAX_LENGTH} characters)"
            )

        action = await self.action_service.get_action(appeal_data.moderation_action_pk)
        if action.user_pk != appellant.pk:
            raise ForbiddenError("You can only appeal actions taken against you")

        appeal = await self.appeal_repo.create_appeal(appellant.pk, action.pk, reason)
        logger.info(f"Appeal {appeal.pk} submitted by user {appellant.pk}")
        return appeal

    async def get_appeal(self, appeal_pk: UUID, viewer: User) -> Appeal:
        """Get an appeal visible to its appellant and to moderators."""
        appeal = await self._get(appeal_pk)
        if appeal.user_pk != viewer.pk and not viewer.is_moderator:
            raise ForbiddenError("Access denied")
        return appeal

    async def start_review(self, appeal_pk: UUID, moderator: User) -> Appeal:
        """Move a pending appeal to under review."""
        self._require_moderator(moderator)

        appeal = await self.appeal_repo.mark_under_review(appeal_pk)
        if appeal is None:
            existing = await self._get(appeal_pk)
            raise ConflictError(
                f"Appeal is not pending (status: {existing.status.value})"
            )
        return appeal

    async def resolve_appeal(
        self,
        appeal_pk: UUID,
        moderator: User,
        decision: AppealStatus | str,
    ) -> Appeal:
        """Approve or deny an appeal exactly once.

        Approval reverses the contested action on behalf of the moderator.
        """
        self._require_moderator(moderator)
        status = parse_decision(decision)

        appeal = await self.appeal_repo.decide_if_unresolved(
            appeal_pk, status, moderator.pk
        )
        if appeal is None:
            existing = await self._get(appeal_pk)
            logger.warning(
                f"Appeal {appeal_pk} already {existing.status.value}; "
                f"decision by {moderator.pk} rejected"
            )
            raise ConflictError(f"Appeal already {existing.status.value}")

        if status == AppealStatus.APPROVED:
            action = await self.action_service.get_action(appeal.moderation_action_pk)
            await self.action_service.reverse(action, moderator)

        logger.info(f"Appeal {appeal_pk} {status.value} by {moderator.pk}")
        return appeal

    async def get_user_appeals(
        self, user_pk: UUID, limit: int = 20, offset: int = 0
    ) -> list[AppealWithAction]:
        """Get a user's own appeals."""
        return await self.appeal_repo.get_user_appeals(user_pk, limit, offset)

    async def get_appeals_queue(
        self,
        status: AppealStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[AppealWithAction]:
        """Get appeals for moderators."""
        return await self.appeal_repo.get_appeals_queue(status, limit, offset)

    async def get_pending_appeals(self, limit: int = 10) -> list[Appeal]:
        """Get the unresolved appeal queue."""
        return await self.appeal_repo.get_unresolved(limit)

    async def _get(self, appeal_pk: UUID) -> Appeal:
        appeal = await self.appeal_repo.get_by_pk(appeal_pk)
        if appeal is None:
            raise NotFoundError("Appeal not found")
        return appeal

    @staticmethod
    def _require_moderator(user: User) -> None:
        if not user.is_moderator:
            raise ForbiddenError("Moderator privileges required")


def get_appeal_service() -> AppealService:
    """Get appeal service instance."""
    return AppealService(
        appeal_repo=AppealRepository(),
        action_service=ModerationActionService(),
    )
