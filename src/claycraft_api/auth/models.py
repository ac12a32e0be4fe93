"""Authentication models for the Clay Craft API."""

from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from claycraft_api.database.models.base import UserRole


class TokenClaims(BaseModel):
    """JWT access token claims issued by the account service."""

    sub: UUID = Field(description="User UUID")
    role: UserRole = Field(default=UserRole.USER, description="User role")
    iss: str = Field(description="Token issuer")
    aud: str = Field(description="Token audience")
    iat: int = Field(description="Issued at timestamp")
    exp: int = Field(description="Expiration timestamp")
    nbf: int | None = Field(default=None, description="Not before timestamp")

    model_config = ConfigDict(use_enum_values=True)
