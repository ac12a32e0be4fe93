"""Authentication dependencies for FastAPI endpoints."""

import logging

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends
from fastapi import HTTPException
from fastapi import Request
from fastapi import status

from claycraft_api.auth.jwt_service import JWTService
from claycraft_api.auth.jwt_service import get_jwt_service
from claycraft_api.config.auth import get_auth_settings
from claycraft_api.database.models.base import MODERATOR_ROLES
from claycraft_api.database.models.base import UserRole
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.user import UserRepository
from claycraft_api.database.repositories.user import get_user_repository

logger = logging.getLogger(__name__)


def _extract_token(request: Request) -> str | None:
    """Read the access token from the Authorization header or the cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()

    return request.cookies.get(get_auth_settings().cookie_name)


async def get_current_user(
    request: Request,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> User:
    """Get the current authenticated user from the request."""
    access_token = _extract_token(request)
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required"
        )

    claims = jwt_service.decode_token(access_token)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        )

    user = await user_repo.get_by_pk(claims.sub)
    if user is None:
        logger.warning(f"Token subject not found in database: {claims.sub}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found"
        )

    return user


def require_role(*roles: UserRole) -> Callable:
    """Dependency factory to require one of the given roles."""

    async def role_dependency(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return role_dependency


# Convenience dependencies for common roles
require_moderator = require_role(*MODERATOR_ROLES)
