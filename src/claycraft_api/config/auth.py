"""Authentication configuration for the Clay Craft API."""

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class AuthSettings(BaseSettings):
    """Authentication configuration settings.

    Tokens are issued by the account service; this API only verifies them.
    """

    jwt_secret_key: str = Field(default="", description="JWT signing secret key")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    jwt_issuer: str = Field(default="claycraft-accounts", description="JWT issuer")
    jwt_audience: str = Field(default="claycraft.app", description="JWT audience")

    # Cookie Configuration
    cookie_name: str = Field(default="cc_at", description="Access token cookie")

    model_config = SettingsConfigDict(env_prefix="AUTH_", case_sensitive=False)


def get_auth_settings() -> AuthSettings:
    """Get authentication settings instance."""
    from claycraft_api.config.settings import get_settings

    return get_settings().auth
