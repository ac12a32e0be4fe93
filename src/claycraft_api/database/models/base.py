"""Base models and types for the Clay Craft API database."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict


class UserRole(str, Enum):
    """User role enumeration."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


MODERATOR_ROLES = (UserRole.MODERATOR, UserRole.ADMIN)


class TargetType(str, Enum):
    """Kinds of entity a report or moderation action can point at."""

    POST = "post"
    COMMENT = "comment"
    USER = "user"


class TargetRef(BaseModel):
    """Polymorphic reference to a post, comment or user."""

    target_type: TargetType
    target_pk: UUID

    model_config = ConfigDict(frozen=True)


class BaseDBModel(BaseModel):
    """Base model for database entities."""

    pk: UUID
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class Publishable(BaseModel):
    """Capability of content that carries a publish flag."""

    published: bool = True
