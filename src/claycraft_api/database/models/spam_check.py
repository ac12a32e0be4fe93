"""Spam and behavior check result models."""

from enum import Enum

from pydantic import BaseModel
from pydantic import Field


class Confidence(str, Enum):
    """How strongly a score indicates abuse."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class ModerationVerdict(str, Enum):
    """Outcome of automatic moderation."""

    APPROVED = "approved"
    REVIEW_REQUIRED = "review_required"
    FLAGGED = "flagged"


class ContentCheck(BaseModel):
    """Result of scoring a piece of text."""

    spam: bool = False
    score: int = 0
    reasons: list[str] = Field(default_factory=list)
    confidence: Confidence = Confidence.LOW


class BehaviorCheck(BaseModel):
    """Result of scoring a user's recent activity."""

    suspicious: bool = False
    score: int = 0
    reasons: list[str] = Field(default_factory=list)
    confidence: Confidence = Confidence.LOW


class AutoModerationResult(BaseModel):
    """Verdict of the automatic moderation engine."""

    action: ModerationVerdict
    score: int
