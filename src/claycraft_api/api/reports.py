"""Report submission endpoint."""

from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import status

from claycraft_api.auth.dependencies import get_current_user
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.report import ReportCreate
from claycraft_api.database.models.user import User
from claycraft_api.services.errors import ModerationError
from claycraft_api.services.report_service import ReportService
from claycraft_api.services.report_service import get_report_service

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("/", status_code=status.HTTP_201_CREATED)
async def submit_report(
    report_data: ReportCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    report_service: Annotated[ReportService, Depends(get_report_service)],
) -> Report:
    """Report a post, comment or user to the moderators."""
    try:
        return await report_service.submit_report(report_data, current_user)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
