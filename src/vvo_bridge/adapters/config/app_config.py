"""12-factor configuration adapter using environment variables."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Loaded once at startup and passed explicitly to the components that need it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level")

    # VVO API configuration
    vvo_base_url: str = Field(
        default="https://webapi.vvo-online.de",
        description="Base URL of the VVO web API",
    )
    upstream_timeout_seconds: float = Field(
        default=30.0, description="Total timeout for a single VVO API request in seconds"
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone all displayed times are rendered in (IANA timezone name)",
    )

    # Cross-origin access for browser dashboards
    cors_allow_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the upstream timeout is positive."""
        if v <= 0:
            raise ValueError("upstream_timeout_seconds must be greater than 0")
        return v

    @field_validator("vvo_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths can be appended directly."""
        return v.rstrip("/")
