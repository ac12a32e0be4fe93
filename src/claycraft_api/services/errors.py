"""Errors raised by the moderation services.

Each error carries the HTTP status a router should answer with.
"""

from fastapi import status


class ModerationError(ValueError):
    """Base class for expected moderation failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST


class NotFoundError(ModerationError):
    """A referenced report, appeal, action, user or content item is missing."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailedError(ModerationError):
    """A field is missing, too long, or not among the allowed values."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class BadRequestError(ModerationError):
    """The requested moderator action is not recognized."""

    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(ModerationError):
    """The acting user may not perform this operation."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(ModerationError):
    """The report or appeal was already resolved."""

    status_code = status.HTTP_409_CONFLICT


class ModerationConfigError(RuntimeError):
    """Moderation is misconfigured; raised at startup."""
