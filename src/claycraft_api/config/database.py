"""Database configuration for the Clay Craft API."""

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool configuration.

    A full ``DATABASE_URL`` takes precedence over the individual parts.
    """

    url: str = Field(
        default="",
        validation_alias="DATABASE_URL",
        description="Full PostgreSQL DSN",
    )
    username: str = Field(default="postgres", description="Database username")
    password: str = Field(default="password", description="Database password")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="claycraft", description="Database name")
    ssl_mode: str = Field(default="prefer", description="libpq sslmode")

    # Pool
    min_pool_size: int = Field(default=2, ge=1)
    max_pool_size: int = Field(default=10, ge=1)
    pool_timeout: float = Field(default=30.0, description="Seconds to open a connection")
    command_timeout: float = Field(default=60.0, description="Seconds per statement")

    # yoyo bookkeeping table used by scripts/apply_migrations.py
    migration_table: str = Field(default="_yoyo_migration")

    model_config = SettingsConfigDict(
        env_prefix="DATABASE_", case_sensitive=False, populate_by_name=True
    )

    @property
    def dsn(self) -> str:
        """The DSN to connect with."""
        if self.url:
            return self.url
        return (
            f"postgresql://{self.username}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}?sslmode={self.ssl_mode}"
        )


def get_database_settings() -> DatabaseSettings:
    """Get database settings from environment variables."""
    return DatabaseSettings()


def get_database_url() -> str:
    """Get the DSN for the configured database."""
    return get_database_settings().dsn
