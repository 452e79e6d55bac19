"""Pydantic schemas for push subscriptions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Subscription(BaseModel):
    """A browser push subscription as persisted in the subscription store.

    ``keys`` is opaque encryption material (``p256dh`` and ``auth`` for Web
    Push). Unknown fields sent by the browser are preserved.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    endpoint: str = Field(..., min_length=1, description="Push service delivery URL")
    keys: dict[str, str] = Field(
        default_factory=dict,
        description="Client encryption keys (p256dh, auth)",
    )
    expiration_time: float | None = Field(
        default=None,
        alias="expirationTime",
        description="Browser-reported expiry in epoch milliseconds",
    )
    subscribed_at: datetime = Field(
        default_factory=_utcnow,
        alias="subscribedAt",
        description="When the subscription was first stored",
    )

    def to_subscription_info(self) -> dict[str, Any]:
        """Return the dict shape pywebpush expects."""
        return {"endpoint": self.endpoint, "keys": dict(self.keys)}


class SubscriptionCreate(BaseModel):
    """Subscribe request body: the browser's PushSubscription JSON.

    ``endpoint`` is optional at the schema level so a missing value is
    reported as 400 by the route rather than a 422 validation error. Fields
    beyond the standard three are carried onto the stored record.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    endpoint: str | None = None
    keys: dict[str, str] = Field(default_factory=dict)
    expiration_time: float | None = Field(default=None, alias="expirationTime")

    def to_subscription(self) -> Subscription:
        """Build the stored record, stamping ``subscribedAt`` now."""
        extras = {
            key: value
            for key, value in (self.model_extra or {}).items()
            if key not in ("subscribedAt", "subscribed_at")
        }
        return Subscription(
            endpoint=self.endpoint or "",
            keys=self.keys,
            expiration_time=self.expiration_time,
            **extras,
        )


class UnsubscribeRequest(BaseModel):
    """Unsubscribe request body."""

    endpoint: str | None = None


class SuccessResponse(BaseModel):
    """Generic acknowledgement returned by mutation endpoints."""

    success: bool = True
    message: str | None = None


class VapidKeyResponse(BaseModel):
    """Application server key the browser needs to create a subscription."""

    model_config = ConfigDict(populate_by_name=True)

    public_key: str = Field(..., alias="publicKey")
