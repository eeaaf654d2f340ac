"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccessAPISettings(BaseModel):
    """Access API configuration."""

    base_url: str = "http://localhost:8080"

    # Seconds before a request to the access API is abandoned
    timeout: float = 30.0


class InvitationSettings(BaseModel):
    """Invitation form defaults."""

    # Days until the invitation link expires
    default_expiry_days: int = Field(default=30, ge=1)

    # Days until a granted role expires for non-guest invitations
    default_role_expiry_days: int = Field(default=366, ge=1)

    # Days until a guest grant expires when no selected role sets a default
    guest_role_expiry_days: int = Field(default=365, ge=1)

    # Latest allowed custom expiry date of the invitation link, in days
    max_expiry_days: int = Field(default=30, ge=1)

    # Allow expiry dates in the past (acceptance environments only)
    past_date_allowed: bool = False


class ObservabilitySettings(BaseModel):
    """Logfire configuration."""

    # Write token of the logfire project; console only when unset
    logfire_token: str | None = None

    # Overrides the token-based decision whether telemetry is shipped
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

        ENVIRONMENT=production
        ACCESS_API__BASE_URL=https://access.example.org
        INVITATIONS__PAST_DATE_ALLOWED=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Locale used to pick localized application names
    locale: str = "en"

    access_api: AccessAPISettings = AccessAPISettings()
    invitations: InvitationSettings = InvitationSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
