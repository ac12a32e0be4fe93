"""Rule-based spam scoring and automatic moderation."""

import logging
import re

from datetime import UTC
from datetime import datetime
from datetime import timedelta
from typing import TypeAlias
from uuid import UUID

from claycraft_api.config.settings import ModerationSettings
from claycraft_api.config.settings import get_moderation_settings
from claycraft_api.database.models.comment import Comment
from claycraft_api.database.models.post import Post
from claycraft_api.database.models.report import Report
from claycraft_api.database.models.spam_check import AutoModerationResult
from claycraft_api.database.models.spam_check import BehaviorCheck
from claycraft_api.database.models.spam_check import Confidence
from claycraft_api.database.models.spam_check import ContentCheck
from claycraft_api.database.models.spam_check import ModerationVerdict
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.comment import CommentRepository
from claycraft_api.database.repositories.post import PostRepository
from claycraft_api.database.repositories.report import ReportRepository
from claycraft_api.database.repositories.user import UserRepository
from claycraft_api.services.errors import ModerationConfigError

logger = logging.getLogger(__name__)

SPAM_KEYWORDS = (
    "buy now",
    "click here",
    "free money",
    "get rich quick",
    "make money fast",
    "viagra",
    "casino",
    "lottery",
    "winner",
    "congratulations you won",
    "urgent",
    "act now",
    "limited time",
    "special offer",
    "discount",
    "http://",
    "https://",
    "www.",
    ".com",
    ".net",
    ".org",
)

# Matched against the lowercased text, so the capital-letters rule never fires.
# Character classes are ASCII-only.
SUSPICIOUS_PATTERNS = (
    (re.compile(r"\b\d{10,}\b", re.ASCII), "Contains suspicious number pattern"),
    (re.compile(r"[A-Z]{5,}"), "Contains excessive capital letters"),
    (re.compile(r"(.)\1{4,}"), "Contains repeated characters"),
    (re.compile(r"@\w+\.(com|net|org|info)", re.ASCII), "Contains email address"),
    (re.compile(r"\$\d+", re.ASCII), "Contains money amounts"),
)

LINK_PATTERN = re.compile(r"https?://")

AUTO_REPORT_REASON = "Automatic spam detection"
REPORT_DESCRIPTION_LIMIT = 1000

ModeratedContent: TypeAlias = str | Post | Comment | User | None


def calculate_confidence(score: int) -> Confidence:
    """Bucket a score into a confidence level."""
    if score <= 2:
        return Confidence.LOW
    if score <= 6:
        return Confidence.MEDIUM
    if score <= 10:
        return Confidence.HIGH
    return Confidence.VERY_HIGH


def check_content(text: str | None, spam_threshold: int = 5) -> ContentCheck:
    """Score a piece of text for spam signals.

    Reasons are ordered keywords first, then patterns, then link count, then
    exclamation count. Blank input scores zero.
    """
    if text is None or not text.strip():
        return ContentCheck()

    content = text.lower()
    score = 0
    reasons: list[str] = []

    for keyword in SPAM_KEYWORDS:
        if keyword in content:
            score += 3 if "http" in keyword else 2
            reasons.append(f"Contains spam keyword: {keyword}")

    for pattern, reason in SUSPICIOUS_PATTERNS:
        if pattern.search(content):
            score += 2
            reasons.append(reason)

    link_count = len(LINK_PATTERN.findall(content))
    if link_count > 2:
        score += link_count * 2
        reasons.append(f"Contains multiple links ({link_count})")

    exclamation_count = content.count("!")
    if exclamation_count > 3:
        score += exclamation_count
        reasons.append(f"Excessive exclamation marks ({exclamation_count})")

    return ContentCheck(
        spam=score >= spam_threshold,
        score=score,
        reasons=reasons,
        confidence=calculate_confidence(score),
    )


def time_ago_in_words(then: datetime, now: datetime | None = None) -> str:
    """Describe the time elapsed since ``then`` in the largest whole unit."""
    now = now or datetime.now(UTC)
    seconds = max((now - then).total_seconds(), 0)

    if seconds < 60:
        return f"{int(seconds)} seconds"
    if seconds < 3600:
        return f"{int(seconds // 60)} minutes"
    if seconds < 86400:
        return f"{int(seconds // 3600)} hours"
    return f"{int(seconds // 86400)} days"


def extract_text(content: ModeratedContent) -> str:
    """Get the text that represents a content item for scoring."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return content.moderation_text


class SpamDetectionService:
    """Scores content and user behavior and flags likely spam."""

    def __init__(
        self,
        system_actor_pk: UUID,
        post_repo: PostRepository | None = None,
        comment_repo: CommentRepository | None = None,
        report_repo: ReportRepository | None = None,
        settings: ModerationSettings | None = None,
    ) -> None:
        self.system_actor_pk = system_actor_pk
        self.post_repo = post_repo or PostRepository()
        self.comment_repo = comment_repo or CommentRepository()
        self.report_repo = report_repo or ReportRepository()
        self.settings = settings or ModerationSettings()

    def check_content(self, text: str | None) -> ContentCheck:
        """Score text with the configured spam threshold."""
        return check_content(text, spam_threshold=self.settings.spam_threshold)

    async def check_user_behavior(self, user: User | None) -> BehaviorCheck:
        """Score a user's recent activity for suspicious behavior."""
        if user is None:
            return BehaviorCheck()

        now = datetime.now(UTC)
        since = now - timedelta(minutes=self.settings.activity_window_minutes)
        score = 0
        reasons: list[str] = []

        recent_posts = await self.post_repo.count_by_author_since(user.pk, since)
        if recent_posts > 5:
            score += recent_posts * 2
            reasons.append(
                f"High posting frequency ({recent_posts} posts in last hour)"
            )

        recent_comments = await self.comment_repo.count_by_author_since(
            user.pk, since
        )
        if recent_comments > 10:
            score += recent_comments
            reasons.append(
                f"High commenting frequency ({recent_comments} comments in last hour)"
            )

        if user.created_at > now - timedelta(hours=self.settings.new_account_hours):
            score += 3
            reasons.append(
                f"New account (created {time_ago_in_words(user.created_at, now)} ago)"
            )

        if user.warning_count > 0:
            score += user.warning_count * 2
            reasons.append(f"Previous warnings ({user.warning_count})")

        return BehaviorCheck(
            suspicious=score >= self.settings.suspicious_threshold,
            score=score,
            reasons=reasons,
            confidence=calculate_confidence(score),
        )

    async def auto_moderate_content(
        self, content: ModeratedContent, user: User | None
    ) -> AutoModerationResult:
        """Decide whether content is approved, needs review, or is flagged.

        Flagged content items get a pending report filed by the system actor.
        """
        content_check = self.check_content(extract_text(content))
        behavior_check = await self.check_user_behavior(user)
        total_score = content_check.score + behavior_check.score

        if total_score >= self.settings.flag_threshold or content_check.spam:
            await self._create_auto_report(
                content, total_score, content_check, behavior_check
            )
            return AutoModerationResult(
                action=ModerationVerdict.FLAGGED, score=total_score
            )

        if total_score >= self.settings.review_threshold:
            return AutoModerationResult(
                action=ModerationVerdict.REVIEW_REQUIRED, score=total_score
            )

        return AutoModerationResult(action=ModerationVerdict.APPROVED, score=total_score)

    async def _create_auto_report(
        self,
        content: ModeratedContent,
        total_score: int,
        content_check: ContentCheck,
        behavior_check: BehaviorCheck,
    ) -> Report | None:
        """File a system report against flagged content."""
        if content is None or isinstance(content, str):
            logger.warning(
                f"Flagged raw text with score {total_score}; nothing to report"
            )
            return None

        reasons = "; ".join(content_check.reasons + behavior_check.reasons)
        description = (
            f"Auto-detected potential spam. Score: {total_score}. Reasons: {reasons}"
        )[:REPORT_DESCRIPTION_LIMIT]

        target = content.target_ref
        report = await self.report_repo.create_report(
            reporter_pk=self.system_actor_pk,
            target_type=target.target_type,
            target_pk=target.target_pk,
            reason=AUTO_REPORT_REASON,
            description=description,
        )

        logger.info(
            f"Auto-flagged {target.target_type.value} {target.target_pk} "
            f"with score {total_score} (report {report.pk})"
        )
        return report


async def validate_moderation_settings(
    settings: ModerationSettings | None = None,
    user_repo: UserRepository | None = None,
) -> UUID:
    """Check at startup that the system actor is configured and exists."""
    settings = settings or get_moderation_settings()
    if settings.system_actor_pk is None:
        raise ModerationConfigError("MODERATION_SYSTEM_ACTOR_PK is not configured")

    user_repo = user_repo or UserRepository()
    if not await user_repo.exists(settings.system_actor_pk):
        raise ModerationConfigError(
            f"System actor {settings.system_actor_pk} does not exist"
        )

    return settings.system_actor_pk


def get_spam_detection_service() -> SpamDetectionService:
    """Dependency injection for the spam detection service."""
    settings = get_moderation_settings()
    if settings.system_actor_pk is None:
        raise ModerationConfigError("MODERATION_SYSTEM_ACTOR_PK is not configured")

    return SpamDetectionService(
        system_actor_pk=settings.system_actor_pk,
        post_repo=PostRepository(),
        comment_repo=CommentRepository(),
        report_repo=ReportRepository(),
        settings=settings,
    )
