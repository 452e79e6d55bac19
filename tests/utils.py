"""Test helpers shared across the suite."""

from __future__ import annotations

from vocab_service.features.notifications.channels.base import (
    ERROR_GONE,
    ERROR_TRANSIENT,
    DeliveryResult,
)
from vocab_service.features.subscriptions.schemas import Subscription


def make_subscription(endpoint: str) -> Subscription:
    """Build a subscription with placeholder encryption keys."""
    return Subscription(endpoint=endpoint, keys={"p256dh": "BPk3-key", "auth": "auth-secret"})


class FakeTransport:
    """Push transport returning scripted results per endpoint.

    ``results`` maps an endpoint to a DeliveryResult to return or an
    exception to raise; unlisted endpoints succeed with 201.
    """

    def __init__(self, results: dict[str, DeliveryResult | Exception] | None = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[str, bytes]] = []

    async def send(self, subscription: Subscription, payload: bytes) -> DeliveryResult:
        self.calls.append((subscription.endpoint, payload))
        result = self.results.get(subscription.endpoint)
        if isinstance(result, Exception):
            raise result
        return result or DeliveryResult(success=True, status_code=201, response_time_ms=3)


def gone_result(status_code: int = 410) -> DeliveryResult:
    return DeliveryResult(
        success=False,
        status_code=status_code,
        error_message=f"Push failed: {status_code}",
        error_category=ERROR_GONE,
    )


def transient_result(status_code: int | None = None, message: str = "Read timed out") -> DeliveryResult:
    return DeliveryResult(
        success=False,
        status_code=status_code,
        error_message=message,
        error_category=ERROR_TRANSIENT,
    )
