"""Moderator endpoints: report queue, appeal queue and user discipline."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query

from claycraft_api.auth.dependencies import require_moderator
from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.appeal import AppealDecision
from claycraft_api.database.models.appeal import AppealStatus
from claycraft_api.database.models.appeal import AppealWithAction
from claycraft_api.database.models.dashboard import ModerationDashboard
from claycraft_api.database.models.moderation_action import ModerationAction
from claycraft_api.database.models.moderation_action import SuspensionRequest
from claycraft_api.database.models.moderation_action import WarningRequest
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.report import ReportResolution
from claycraft_api.database.models.report import ReportResolutionResult
from claycraft_api.database.models.report import ReportStatus
from claycraft_api.database.models.user import User
from claycraft_api.database.models.user import UserModerationSummary
from claycraft_api.services.appeal_service import AppealService
from claycraft_api.services.appeal_service import get_appeal_service
from claycraft_api.services.errors import ModerationError
from claycraft_api.services.moderation_action_service import (
    ModerationActionService,
)
from claycraft_api.services.moderation_action_service import (
    get_moderation_action_service,
)
from claycraft_api.services.report_service import ReportService
from claycraft_api.services.report_service import get_report_service
from claycraft_api.services.user_service import UserService
from claycraft_api.services.user_service import get_user_service

router = APIRouter(prefix="/admin/moderation", tags=["admin", "moderation"])


@router.get("/")
async def get_dashboard(
    current_user: Annotated[User, Depends(require_moderator)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
    action_service: Annotated[
        ModerationActionService, Depends(get_moderation_action_service)
    ],
) -> ModerationDashboard:
    """Get the pending reports, recent actions and pending appeals."""
    return ModerationDashboard(
        pending_reports=await report_service.get_pending_reports(limit=20),
        recent_actions=await action_service.get_recent_actions(limit=10),
        pending_appeals=await appeal_service.get_pending_appeals(limit=10),
    )


# Reports
@router.get("/reports")
async def list_reports(
    current_user: Annotated[User, Depends(require_moderator)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
    status_filter: Annotated[ReportStatus | None, Query(alias="status")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[Report]:
    """List reports, optionally by status."""
    return await report_service.get_reports(status_filter, limit, offset)


@router.get("/reports/{report_pk}")
async def get_report(
    report_pk: UUID,
    current_user: Annotated[User, Depends(require_moderator)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
) -> Report:
    """Get a single report."""
    try:
        return await report_service.get_report(report_pk)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.post("/reports/{report_pk}/review")
async def start_report_review(
    report_pk: UUID,
    current_user: Annotated[User, Depends(require_moderator)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
) -> Report:
    """Claim a pending report for review."""
    try:
        return await report_service.start_review(report_pk, current_user)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.post("/reports/{report_pk}/resolve")
async def resolve_report(
    report_pk: UUID,
    resolution: ReportResolution,
    current_user: Annotated[User, Depends(require_moderator)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
) -> ReportResolutionResult:
    """Resolve a report with a dismiss, approve, warn or suspend action."""
    try:
        report, action = await report_service.apply_resolution(
            report_pk, resolution, current_user
        )
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e

    return ReportResolutionResult(report=report, action=action)


# Appeals
@router.get("/appeals")
async def list_appeals(
    current_user: Annotated[User, Depends(require_moderator)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
    status_filter: Annotated[AppealStatus | None, Query(alias="status")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[AppealWithAction]:
    """List appeals, optionally by status."""
    return await appeal_service.get_appeals_queue(status_filter, limit, offset)


@router.post("/appeals/{appeal_pk}/review")
async def start_appeal_review(
    appeal_pk: UUID,
    current_user: Annotated[User, Depends(require_moderator)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
) -> Appeal:
    """Claim a pending appeal for review."""
    try:
        return await appeal_service.start_review(appeal_pk, current_user)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.post("/appeals/{appeal_pk}/resolve")
async def resolve_appeal(
    appeal_pk: UUID,
    decision: AppealDecision,
    current_user: Annotated[User, Depends(require_moderator)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
) -> Appeal:
    """Approve or deny an appeal."""
    try:
        return await appeal_service.resolve_appeal(
            appeal_pk, current_user, decision.decision
        )
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


# Users
@router.get("/users")
async def list_users(
    current_user: Annotated[User, Depends(require_moderator)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    filter_name: Annotated[str | None, Query(alias="filter")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[UserModerationSummary]:
    """List users, optionally only suspended or warned ones."""
    try:
        return await user_service.get_moderation_summaries(filter_name, limit, offset)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.get("/users/{user_pk}/actions")
async def get_user_actions(
    user_pk: UUID,
    current_user: Annotated[User, Depends(require_moderator)],
    action_service: Annotated[
        ModerationActionService, Depends(get_moderation_action_service)
    ],
    *,
    active_only: bool = False,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[ModerationAction]:
    """Get the moderation history of a user."""
    return await action_service.get_user_actions(
        user_pk, active_only=active_only, limit=limit, offset=offset
    )


@router.get("/users/{user_pk}/reports")
async def get_user_reports(
    user_pk: UUID,
    current_user: Annotated[User, Depends(require_moderator)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
) -> list[Report]:
    """Get reports filed against a user's profile."""
    return await report_service.get_reports_against_user(user_pk)


@router.get("/actions/expired")
async def get_expired_actions(
    current_user: Annotated[User, Depends(require_moderator)],
    action_service: Annotated[
        ModerationActionService, Depends(get_moderation_action_service)
    ],
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
) -> list[ModerationAction]:
    """Get actions whose expiry has passed."""
    return await action_service.get_expired_actions(limit)


@router.post("/users/{user_pk}/suspend")
async def suspend_user(
    user_pk: UUID,
    request: SuspensionRequest,
    current_user: Annotated[User, Depends(require_moderator)],
    action_service: Annotated[
        ModerationActionService, Depends(get_moderation_action_service)
    ],
) -> ModerationAction:
    """Suspend a user."""
    try:
        user = await action_service.target_service.load_user(user_pk)
        return await action_service.suspend(
            user, request.duration, request.reason, current_user
        )
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.post("/users/{user_pk}/unsuspend")
async def unsuspend_user(
    user_pk: UUID,
    current_user: Annotated[User, Depends(require_moderator)],
    action_service: Annotated[
        ModerationActionService, Depends(get_moderation_action_service)
    ],
) -> ModerationAction:
    """Lift a user's suspension."""
    try:
        user = await action_service.target_service.load_user(user_pk)
        return await action_service.unsuspend(user, current_user)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.post("/users/{user_pk}/warn")
async def warn_user(
    user_pk: UUID,
    request: WarningRequest,
    current_user: Annotated[User, Depends(require_moderator)],
    action_service: Annotated[
        ModerationActionService, Depends(get_moderation_action_service)
    ],
) -> ModerationAction:
    """Warn a user."""
    try:
        user = await action_service.target_service.load_user(user_pk)
        return await action_service.warn(user, request.reason, current_user)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
