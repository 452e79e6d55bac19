"""Push transports used by the notification dispatcher."""

from vocab_service.features.notifications.channels.base import (
    GONE_STATUS_CODES,
    DeliveryResult,
    PushTransport,
    classify_status,
)
from vocab_service.features.notifications.channels.webpush import WebPushTransport

__all__ = [
    "GONE_STATUS_CODES",
    "DeliveryResult",
    "PushTransport",
    "WebPushTransport",
    "classify_status",
]
