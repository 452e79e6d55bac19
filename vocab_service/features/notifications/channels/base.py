"""Base protocol and types for push transports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from vocab_service.features.subscriptions.schemas import Subscription

GONE_STATUS_CODES = frozenset({404, 410})
"""Push service statuses meaning the endpoint is permanently invalid."""

ERROR_GONE = "gone"
ERROR_TRANSIENT = "transient"
ERROR_EXCEPTION = "exception"


@dataclass
class DeliveryResult:
    """Result of one push delivery attempt.

    Attributes:
        success: Whether the push service accepted the message
        status_code: HTTP status returned by the push service, if any
        response_time_ms: Time taken for delivery in milliseconds
        error_message: Error description if failed
        error_category: ``gone`` (endpoint permanently invalid), ``transient``
            (any other push service rejection) or ``exception`` (the transport
            itself raised)
    """

    success: bool
    status_code: int | None = None
    response_time_ms: int | None = None
    error_message: str | None = None
    error_category: str | None = None

    @property
    def is_gone(self) -> bool:
        return not self.success and self.error_category == ERROR_GONE


def classify_status(status_code: int | None) -> str:
    """Map a push service failure status to an error category."""
    if status_code in GONE_STATUS_CODES:
        return ERROR_GONE
    return ERROR_TRANSIENT


class PushTransport(Protocol):
    """Protocol for delivering an encrypted payload to one subscription.

    Implementations classify failures into a DeliveryResult rather than
    raising; the dispatcher still guards against implementations that raise.
    """

    async def send(self, subscription: Subscription, payload: bytes) -> DeliveryResult:
        """Send payload bytes to the subscription's endpoint.

        Args:
            subscription: Target endpoint and its encryption keys
            payload: Serialized notification body

        Returns:
            DeliveryResult with status and timing
        """
        ...
