"""
Client configuration using Pydantic settings.

Configuration is loaded from environment variables (prefixed TWILIO_)
or a .env file. Nothing in the library reads the environment on its
own: only create_client() and scripts call get_settings().
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_VIDEO_BASE_URL = "https://video.twilio.com/v1"
DEFAULT_WIRELESS_BASE_URL = "https://wireless.twilio.com/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


class Settings(BaseSettings):
    """
    Settings loaded from the environment.

    account_sid and auth_token have no useful default; validate them with
    validate_required_fields() before building a client.
    """

    account_sid: str = Field(
        default="",
        description="Account sid (AC...) used as the Basic auth username"
    )
    auth_token: str = Field(
        default="",
        description="Auth token used as the Basic auth password"
    )
    video_base_url: str = Field(
        default=DEFAULT_VIDEO_BASE_URL,
        description="Base URL for Rooms and Participants"
    )
    wireless_base_url: str = Field(
        default=DEFAULT_WIRELESS_BASE_URL,
        description="Base URL for SIMs"
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="httpx connect/read timeout applied to every request"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for configure_logging (DEBUG, INFO, WARNING, ERROR)"
    )

    model_config = SettingsConfigDict(
        env_prefix="TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_required_fields(self) -> list[str]:
        """Return the names of required variables that are not set."""
        missing = []
        if not self.account_sid:
            missing.append("TWILIO_ACCOUNT_SID")
        if not self.auth_token:
            missing.append("TWILIO_AUTH_TOKEN")
        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    For tests, call get_settings.cache_clear() after changing the environment.
    """
    return Settings()


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration shared by every service of one Client.
    """
    account_sid: str
    auth_token: str
    video_base_url: str = DEFAULT_VIDEO_BASE_URL
    wireless_base_url: str = DEFAULT_WIRELESS_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.account_sid:
            raise ValueError("account_sid is required")
        if not self.auth_token:
            raise ValueError("auth_token is required")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(account_sid={self.account_sid!r}, auth_token='***', "
            f"video_base_url={self.video_base_url!r}, "
            f"wireless_base_url={self.wireless_base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        """Build a config from loaded settings; validation still applies."""
        return cls(
            account_sid=settings.account_sid,
            auth_token=settings.auth_token,
            video_base_url=settings.video_base_url,
            wireless_base_url=settings.wireless_base_url,
            timeout_seconds=settings.timeout_seconds,
        )


def configure_logging(level: Optional[str] = None) -> None:
    """Basic logging setup for scripts. The library itself never calls this."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=(level or get_settings().log_level).upper(),
    )
