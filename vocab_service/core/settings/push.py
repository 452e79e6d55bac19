"""Web Push (VAPID) delivery settings."""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_push_yaml_source


class PushSettings(BaseSettings):
    """Web Push delivery and Word of the Day payload configuration.

    Environment variables use PUSH_ prefix.
    Example: PUSH_VAPID_PUBLIC_KEY=BEl6..., PUSH_VAPID_PRIVATE_KEY=SJN1...

    Generate a key pair with ``vapid --gen`` (installed with pywebpush).
    """

    vapid_public_key: str | None = Field(
        default=None,
        description="Base64url VAPID application server key handed to browsers",
    )
    vapid_private_key: SecretStr | None = Field(
        default=None,
        description="VAPID private key (base64url DER or path to PEM file)",
    )
    vapid_subject: str = Field(
        default="mailto:admin@example.com",
        pattern=r"^(mailto:|https://).+",
        description="VAPID 'sub' claim identifying the sender",
    )

    ttl: int = Field(
        default=86_400,
        ge=0,
        le=2_419_200,
        description="Seconds the push service should retain an undelivered message",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        le=120.0,
        description="Timeout in seconds for a single delivery request",
    )

    # Payload presentation
    title_prefix: str = Field(
        default="📚 Word of the Day",
        min_length=1,
        max_length=100,
        description="Notification title prefix, followed by ': <word>'",
    )
    icon: str = Field(default="/icon-192x192.png", description="Notification icon URL")
    badge: str = Field(default="/badge-72x72.png", description="Notification badge URL")
    click_url: str = Field(default="/", description="URL opened when the notification is clicked")

    model_config = SettingsConfigDict(
        env_prefix="PUSH_",
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
            create_push_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @property
    def is_configured(self) -> bool:
        """Whether both halves of the VAPID key pair are present."""
        return bool(self.vapid_public_key) and self.vapid_private_key is not None

    def vapid_claims(self) -> dict[str, str]:
        """Build a fresh claims dict; pywebpush mutates it with aud/exp."""
        return {"sub": self.vapid_subject}
