"""12-factor configuration adapter using environment variables."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATION_URL = "https://charge.virtaglobal.com/stations/6224"
DEFAULT_USER_AGENT = "EV-Station-Monitor/1.0 (+https://example.com)"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    static_dir: str | None = Field(
        default=None,
        description="Directory with the browser client; auto-discovered when unset",
    )

    # Station API configuration
    station_url: str = Field(
        default=DEFAULT_STATION_URL, description="Station status endpoint to poll"
    )
    station_api_timeout_seconds: float = Field(
        default=15, description="Timeout for station status requests in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent sent to the station endpoint"
    )
    poll_interval_minutes: float = Field(
        default=10, description="Interval between background status polls in minutes"
    )
    log_requests: bool = Field(
        default=False,
        validation_alias="EVSM_LOG_REQUESTS",
        description="Log outgoing station requests",
    )

    # Web Push configuration
    vapid_public_key: str | None = Field(
        default=None, description="VAPID public key (URL-safe base64) handed to browsers"
    )
    vapid_private_key: str | None = Field(
        default=None, description="VAPID private key used to sign push messages"
    )
    vapid_subject: str = Field(
        default="mailto:admin@example.com",
        description="Contact URI sent in the VAPID claims (mailto: or https:)",
    )
    push_ttl_seconds: int = Field(
        default=60, description="How long the push service may hold an undelivered message"
    )
    notification_url: str = Field(
        default="/", description="Page opened when a push notification is clicked"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("poll_interval_minutes")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        """Validate the poll interval is positive."""
        if v <= 0:
            raise ValueError("poll_interval_minutes must be greater than zero")
        return v

    @field_validator("station_api_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("station_api_timeout_seconds must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("vapid_public_key", "vapid_private_key")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """Treat empty or whitespace-only keys as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def poll_interval_seconds(self) -> float:
        """Poll interval converted to seconds."""
        return self.poll_interval_minutes * 60

    @property
    def push_enabled(self) -> bool:
        """Whether both VAPID keys are configured."""
        return bool(self.vapid_public_key and self.vapid_private_key)

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any local ``.env`` file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]
