"""Application settings for the Clay Craft API."""

from uuid import UUID

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from claycraft_api.config.auth import AuthSettings
from claycraft_api.config.database import DatabaseSettings


class ModerationSettings(BaseSettings):
    """Spam detection and moderation configuration."""

    system_actor_pk: UUID | None = Field(
        default=None,
        description="User credited as reporter of automatically generated reports",
    )

    # Score thresholds
    spam_threshold: int = Field(
        default=5, description="Content score at which text counts as spam"
    )
    suspicious_threshold: int = Field(
        default=7, description="Behavior score at which a user counts as suspicious"
    )
    flag_threshold: int = Field(
        default=10, description="Combined score that flags content for review"
    )
    review_threshold: int = Field(
        default=7, description="Combined score that requires manual review"
    )

    # Behavior windows
    activity_window_minutes: int = Field(
        default=60, description="Trailing window for posting/commenting frequency"
    )
    new_account_hours: int = Field(
        default=24, description="Accounts younger than this are considered new"
    )

    model_config = SettingsConfigDict(env_prefix="MODERATION_", case_sensitive=False)


class AppSettings(BaseSettings):
    """Main application settings."""

    # App info
    app_name: str = Field(default="Clay Craft API", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Allowed CORS origins",
    )

    # Component settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    moderation: ModerationSettings = Field(default_factory=ModerationSettings)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )


# Global settings instance
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get application settings (singleton pattern)."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = AppSettings()
    return _settings


def get_moderation_settings() -> ModerationSettings:
    """Get moderation settings."""
    return get_settings().moderation
