"""12-factor configuration for the client, read from environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from amtrak_api.adapters.amtraker_api.constants import BASE_API_URL, DEFAULT_TIMEOUT_SECONDS


class ClientConfig(BaseSettings):
    """Client configuration following 12-factor principles.

    Every field can be set through an ``AMTRAK_API_``-prefixed environment
    variable (e.g. ``AMTRAK_API_BASE_URL``) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="AMTRAK_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default=BASE_API_URL, description="Base URL of the Amtraker API (without trailing slash)"
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, description="Total timeout for a single request in seconds"
    )
    debugging: bool = Field(
        default=False,
        description="Report failing field paths and raw bodies on every deserialization error",
    )
    log_requests: bool = Field(default=False, description="Log every outgoing API request")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is http(s) and strip any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with 'http://' or 'https://'")
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v
