"""Daily Word of the Day scheduler settings."""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_scheduler_yaml_source


class SchedulerSettings(BaseSettings):
    """When the daily broadcast fires.

    Environment variables use SCHEDULER_ prefix.
    Example: SCHEDULER_HOUR=9, SCHEDULER_TIMEZONE=Europe/Berlin
    """

    enabled: bool = Field(
        default=True,
        description="Arm the daily broadcast at application startup",
    )
    hour: int = Field(default=9, ge=0, le=23, description="Local hour of the daily broadcast")
    minute: int = Field(default=0, ge=0, le=59, description="Minute of the daily broadcast")
    timezone: str | None = Field(
        default=None,
        description="IANA timezone for the fire time; None uses the host's local time",
    )
    interval_hours: float = Field(
        default=24.0,
        gt=0,
        le=24 * 7,
        description="Fixed period between broadcasts after the first one",
    )
    misfire_grace_time: int = Field(
        default=300,
        ge=1,
        description="Seconds a late broadcast may still run (e.g. after event loop stalls)",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Reject unknown IANA zone names at load time."""
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone: {v}"
            raise ValueError(msg) from exc
        return v

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_scheduler_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Resolved timezone, or None for host local time."""
        return ZoneInfo(self.timezone) if self.timezone else None
