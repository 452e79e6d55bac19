"""Fan-out dispatcher delivering one payload to every stored subscription."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from vocab_service.core.exceptions import PersistenceError
from vocab_service.features.notifications.channels.base import (
    ERROR_EXCEPTION,
    DeliveryResult,
)
from vocab_service.features.notifications.metrics import (
    push_deliveries_total,
    push_delivery_duration_seconds,
    push_subscriptions_pruned_total,
)
from vocab_service.features.notifications.schemas import (
    DeliveryOutcome,
    DeliveryStatus,
    NotificationPayload,
)
from vocab_service.infra.logging import get_logger

if TYPE_CHECKING:
    from vocab_service.features.notifications.channels.base import PushTransport
    from vocab_service.features.subscriptions.repository import SubscriptionRepository
    from vocab_service.features.subscriptions.schemas import Subscription

logger = get_logger(__name__, component="dispatcher")


class NotificationDispatcher:
    """Deliver a payload to all subscriptions and prune endpoints that are gone.

    Holds no state between calls. Each dispatch works on the subscription
    snapshot taken when it starts; subscribe/unsubscribe calls that land
    mid-dispatch are not reflected. Deliveries run concurrently and one
    endpoint's failure never affects another's.
    """

    def __init__(
        self,
        repository: SubscriptionRepository,
        transport: PushTransport,
    ) -> None:
        self.repository = repository
        self.transport = transport

    async def dispatch(self, payload: NotificationPayload | bytes) -> list[DeliveryOutcome]:
        """Send the payload to every subscription.

        Never raises for individual delivery or pruning failures; those are
        reported on the returned outcomes.

        Args:
            payload: Notification to send, or pre-serialized bytes

        Returns:
            One DeliveryOutcome per subscription in the snapshot
        """
        data = payload.to_bytes() if isinstance(payload, NotificationPayload) else payload
        subscriptions = await self.repository.list_all()

        if not subscriptions:
            logger.info("No subscriptions to notify")
            return []

        logger.info("Dispatching notification", extra={"recipients": len(subscriptions)})

        results = await asyncio.gather(
            *(self._deliver(subscription, data) for subscription in subscriptions),
            return_exceptions=True,
        )

        outcomes: list[DeliveryOutcome] = []
        for subscription, result in zip(subscriptions, results, strict=True):
            if isinstance(result, BaseException):
                logger.error(
                    "Delivery task failed unexpectedly",
                    exc_info=result,
                    extra={"endpoint": subscription.endpoint},
                )
                result = DeliveryOutcome(
                    endpoint=subscription.endpoint,
                    status=DeliveryStatus.FAILED,
                    result=DeliveryResult(
                        success=False,
                        error_message=str(result),
                        error_category=ERROR_EXCEPTION,
                    ),
                )
            outcomes.append(result)

        logger.info(
            "Dispatch complete",
            extra={
                "recipients": len(outcomes),
                "delivered": sum(1 for o in outcomes if o.status is DeliveryStatus.DELIVERED),
                "pruned": sum(1 for o in outcomes if o.pruned),
            },
        )
        return outcomes

    async def _deliver(self, subscription: Subscription, data: bytes) -> DeliveryOutcome:
        endpoint = subscription.endpoint
        log = logger.bind(endpoint=endpoint)
        try:
            result = await self.transport.send(subscription, data)
        except Exception as exc:
            log.exception("Push transport raised")
            result = DeliveryResult(
                success=False,
                error_message=str(exc),
                error_category=ERROR_EXCEPTION,
            )

        if result.response_time_ms is not None:
            push_delivery_duration_seconds.observe(result.response_time_ms / 1000.0)

        if result.success:
            push_deliveries_total.labels(status=DeliveryStatus.DELIVERED.value).inc()
            log.info("Notification delivered")
            return DeliveryOutcome(endpoint=endpoint, status=DeliveryStatus.DELIVERED, result=result)

        if not result.is_gone:
            push_deliveries_total.labels(status=DeliveryStatus.FAILED.value).inc()
            log.warning(
                "Notification delivery failed",
                extra={
                    "status_code": result.status_code,
                    "error_category": result.error_category,
                    "error_message": result.error_message,
                },
            )
            return DeliveryOutcome(endpoint=endpoint, status=DeliveryStatus.FAILED, result=result)

        push_deliveries_total.labels(status=DeliveryStatus.GONE.value).inc()
        pruned = await self._prune(endpoint, result)
        return DeliveryOutcome(
            endpoint=endpoint,
            status=DeliveryStatus.GONE,
            result=result,
            pruned=pruned,
        )

    async def _prune(self, endpoint: str, result: DeliveryResult) -> bool:
        try:
            removed = await self.repository.remove(endpoint)
        except PersistenceError:
            logger.exception(
                "Failed to prune gone subscription",
                extra={"endpoint": endpoint, "status_code": result.status_code},
            )
            return False

        if removed:
            push_subscriptions_pruned_total.inc(removed)
        logger.info(
            "Pruned gone subscription",
            extra={"endpoint": endpoint, "status_code": result.status_code, "removed": removed},
        )
        return removed > 0


# Singleton instance
_dispatcher: NotificationDispatcher | None = None


def get_notification_dispatcher() -> NotificationDispatcher:
    """Get or create the singleton NotificationDispatcher instance.

    Raises:
        ServiceUnavailableException: If VAPID keys are not configured.
    """
    global _dispatcher
    if _dispatcher is None:
        from vocab_service.core.settings import get_push_settings
        from vocab_service.features.notifications.channels.webpush import WebPushTransport
        from vocab_service.features.subscriptions.repository import (
            get_subscription_repository,
        )

        _dispatcher = NotificationDispatcher(
            repository=get_subscription_repository(),
            transport=WebPushTransport(get_push_settings()),
        )
    return _dispatcher


def reset_notification_dispatcher() -> None:
    global _dispatcher
    _dispatcher = None
