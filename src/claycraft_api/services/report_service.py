"""Report service for content reporting and moderator resolution."""

import logging

from uuid import UUID

from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.report import REPORT_OUTCOMES
from claycraft_api.database.models.report import ContentAction
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.report import ReportAction
from claycraft_api.database.models.report import ReportCreate
from claycraft_api.database.models.report import ReportResolution
from claycraft_api.database.models.report import ReportStatus
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.report import ReportRepository
from claycraft_api.services.errors import BadRequestError
from claycraft_api.services.errors import ConflictError
from claycraft_api.services.errors import ForbiddenError
from claycraft_api.services.errors import NotFoundError
from claycraft_api.services.errors import ValidationFailedError
from claycraft_api.services.moderation_action_service import (
    ModerationActionService,
)
from claycraft_api.services.target_service import ModerationTarget
from claycraft_api.services.target_service import TargetService

logger = logging.getLogger(__name__)


class ReportService:
    """Service for submitting and resolving reports."""

    def __init__(
        self,
        report_repo: ReportRepository | None = None,
        action_service: ModerationActionService | None = None,
        target_service: TargetService | None = None,
    ) -> None:
        self.report_repo = report_repo or ReportRepository()
        self.action_service = action_service or ModerationActionService()
        self.target_service = target_service or self.action_service.target_service

    async def submit_report(self, report_data: ReportCreate, reporter: User) -> Report:
        """File a report against a post, comment or user."""
        target = TargetRef(
            target_type=report_data.target_type, target_pk=report_data.target_pk
        )
        await self.target_service.load(target)

        report = await self.report_repo.create_report(
            reporter_pk=reporter.pk,
            target_type=target.target_type,
            target_pk=target.target_pk,
            reason=report_data.reason,
            description=report_data.description,
        )
        logger.info(
            f"Report {report.pk} filed by {reporter.pk} against "
            f"{target.target_type.value} {target.target_pk}"
        )
        return report

    async def get_report(self, report_pk: UUID) -> Report:
        """Fetch a report or raise ``NotFoundError``."""
        report = await self.report_repo.get_by_pk(report_pk)
        if report is None:
            raise NotFoundError("Report not found")
        return report

    async def start_review(self, report_pk: UUID, moderator: User) -> Report:
        """Move a pending report to under review."""
        self._require_moderator(moderator)

        report = await self.report_repo.mark_under_review(report_pk)
        if report is None:
            existing = await self.get_report(report_pk)
            raise ConflictError(
                f"Report is not pending (status: {existing.status.value})"
            )
        return report

    async def resolve_report(
        self, report_pk: UUID, moderator: User, outcome: ReportStatus | str
    ) -> Report:
        """Resolve or dismiss a report exactly once.

        The status, resolver and resolution time are written in one
        conditional update; a report that was already resolved raises
        ``ConflictError``.
        """
        self._require_moderator(moderator)

        try:
            status = ReportStatus(outcome)
        except ValueError as e:
            raise ValidationFailedError(f"Invalid report outcome: {outcome}") from e
        if status not in REPORT_OUTCOMES:
            raise ValidationFailedError(f"Invalid report outcome: {status.value}")

        report = await self.report_repo.resolve_if_unresolved(
            report_pk, status, moderator.pk
        )
        if report is None:
            existing = await self.get_report(report_pk)
            logger.warning(
                f"Report {report_pk} already {existing.status.value}; "
                f"resolution by {moderator.pk} rejected"
            )
            raise ConflictError(f"Report already {existing.status.value}")

        logger.info(f"Report {report_pk} {status.value} by {moderator.pk}")
        return report

    async def apply_resolution(
        self, report_pk: UUID, resolution: ReportResolution, moderator: User
    ) -> tuple[Report, ModerationAction | None]:
        """Resolve a report and carry out the moderator's follow-up action."""
        try:
            action = ReportAction(resolution.action_type)
        except ValueError as e:
            raise BadRequestError("Invalid action") from e

        if action == ReportAction.DISMISS:
            return await self.dismiss(report_pk, moderator), None
        if action == ReportAction.APPROVE:
            return await self.approve(report_pk, moderator, resolution.content_action)
        if action == ReportAction.WARN_USER:
            return await self.warn_user(report_pk, moderator, resolution.warning_reason)
        return await self.suspend_user(
            report_pk,
            moderator,
            resolution.suspension_duration,
            resolution.suspension_reason,
        )

    async def dismiss(self, report_pk: UUID, moderator: User) -> Report:
        """Dismiss a report without further action."""
        return await self.resolve_report(report_pk, moderator, ReportStatus.DISMISSED)

    async def approve(
        self,
        report_pk: UUID,
        moderator: User,
        content_action: ContentAction | str | None,
    ) -> tuple[Report, ModerationAction | None]:
        """Uphold a report and optionally remove or approve the content."""
        if content_action not in (ContentAction.REMOVE, ContentAction.APPROVE):
            report = await self.resolve_report(
                report_pk, moderator, ReportStatus.RESOLVED
            )
            return report, None

        content = await self._load_reported_content(report_pk, moderator)
        report = await self.resolve_report(report_pk, moderator, ReportStatus.RESOLVED)
        if content_action == ContentAction.REMOVE:
            action = await self.action_service.remove_content(content, moderator)
        else:
            action = await self.action_service.approve_content(content, moderator)
        return report, action

    async def warn_user(
        self, report_pk: UUID, moderator: User, reason: str | None
    ) -> tuple[Report, ModerationAction]:
        """Uphold a report and warn the author of the reported content."""
        author = await self._load_reported_author(report_pk, moderator)
        report = await self.resolve_report(report_pk, moderator, ReportStatus.RESOLVED)
        action = await self.action_service.warn(author, reason, moderator)
        return report, action

    async def suspend_user(
        self,
        report_pk: UUID,
        moderator: User,
        duration: str | None,
        reason: str | None,
    ) -> tuple[Report, ModerationAction]:
        """Uphold a report and suspend the author of the reported content."""
        author = await self._load_reported_author(report_pk, moderator)
        report = await self.resolve_report(report_pk, moderator, ReportStatus.RESOLVED)
        action = await self.action_service.suspend(author, duration, reason, moderator)
        return report, action

    async def get_reports(
        self,
        status_filter: ReportStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Report]:
        """List reports for moderators."""
        return await self.report_repo.get_reports_for_review(
            limit, offset, status_filter.value if status_filter else None
        )

    async def get_pending_reports(self, limit: int = 20) -> list[Report]:
        """Get the unresolved report queue."""
        return await self.report_repo.get_unresolved(limit)

    async def get_reports_against_user(self, user_pk: UUID) -> list[Report]:
        """Get reports filed directly against a user."""
        return await self.report_repo.get_target_reports(TargetType.USER, user_pk)

    async def _load_reported_content(
        self, report_pk: UUID, moderator: User
    ) -> ModerationTarget:
        """Load what a report is about before anything is committed."""
        self._require_moderator(moderator)
        report = await self.get_report(report_pk)
        return await self.target_service.load(report.target)

    async def _load_reported_author(self, report_pk: UUID, moderator: User) -> User:
        content = await self._load_reported_content(report_pk, moderator)
        return await self.target_service.load_author(content)

    @staticmethod
    def _require_moderator(user: User) -> None:
        if not user.is_moderator:
            raise ForbiddenError("Moderator privileges required")


def get_report_service() -> ReportService:
    """Dependency injection for report service."""
    return ReportService(
        report_repo=ReportRepository(),
        action_service=ModerationActionService(),
    )
