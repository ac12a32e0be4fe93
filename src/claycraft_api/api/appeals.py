"""Appeals API endpoints for the Clay Craft API."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import status

from claycraft_api.auth.dependencies import get_current_user
from claycraft_api.database.models.appeal import Appeal
from claycraft_api.database.models.appeal import AppealCreate
from claycraft_api.database.models.appeal import AppealWithAction
from claycraft_api.database.models.user import User
from claycraft_api.services.appeal_service import AppealService
from claycraft_api.services.appeal_service import get_appeal_service
from claycraft_api.services.errors import ModerationError

router = APIRouter(prefix="/appeals", tags=["appeals"])


@router.post("/", status_code=status.HTTP_201_CREATED)
async def submit_appeal(
    appeal_data: AppealCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
) -> Appeal:
    """Appeal a moderation action taken against the current user."""
    try:
        return await appeal_service.submit_appeal(current_user, appeal_data)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.get("/")
async def get_my_appeals(
    current_user: Annotated[User, Depends(get_current_user)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[AppealWithAction]:
    """Get the current user's appeals."""
    return await appeal_service.get_user_appeals(current_user.pk, limit, offset)


@router.get("/{appeal_pk}")
async def get_appeal(
    appeal_pk: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    appeal_service: Annotated[AppealService, Depends(get_appeal_service)],
) -> Appeal:
    """Get an appeal filed by the current user."""
    try:
        return await appeal_service.get_appeal(appeal_pk, current_user)
    except ModerationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
