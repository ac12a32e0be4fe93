"""JWT token verification for the Clay Craft API."""

import logging

from datetime import UTC
from datetime import datetime
from datetime import timedelta
from uuid import UUID

import jwt

from jwt import DecodeError
from jwt import ExpiredSignatureError
from jwt import InvalidTokenError
from pydantic import ValidationError

from claycraft_api.auth.models import TokenClaims
from claycraft_api.config.auth import AuthSettings
from claycraft_api.config.auth import get_auth_settings
from claycraft_api.database.models.base import UserRole

logger = logging.getLogger(__name__)


class JWTService:
    """Verifies access tokens; issuance lives in the account service."""

    def __init__(self, settings: AuthSettings | None = None):
        self._settings = settings or get_auth_settings()

    def create_access_token(
        self,
        user_id: UUID,
        role: UserRole = UserRole.USER,
        lifetime: timedelta = timedelta(hours=1),
    ) -> str:
        """Sign an access token with the shared secret (tooling and tests)."""
        now = datetime.now(UTC)
        claims = TokenClaims(
            sub=user_id,
            role=role,
            iss=self._settings.jwt_issuer,
            aud=self._settings.jwt_audience,
            iat=int(now.timestamp()),
            exp=int((now + lifetime).timestamp()),
            nbf=int(now.timestamp()),
        )
        return jwt.encode(
            claims.model_dump(mode="json", exclude_none=True),
            self._settings.jwt_secret_key,
            algorithm=self._settings.jwt_algorithm,
        )

    def decode_token(self, token: str) -> TokenClaims | None:
        """Decode and validate a JWT token."""
        try:
            claims = jwt.decode(
                token,
                self._settings.jwt_secret_key,
                algorithms=[self._settings.jwt_algorithm],
                audience=self._settings.jwt_audience,
                issuer=self._settings.jwt_issuer,
            )
            return TokenClaims(**claims)
        except ExpiredSignatureError:
            logger.debug("Access token expired")
            return None
        except (DecodeError, InvalidTokenError, ValidationError) as e:
            logger.debug(f"Access token rejected: {e!s}")
            return None


def get_jwt_service() -> JWTService:
    """Get JWT service instance."""
    return JWTService()
