"""Web Push transport backed by pywebpush with VAPID authentication."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from pywebpush import WebPushException, webpush

from vocab_service.core.exceptions import ServiceUnavailableException
from vocab_service.features.notifications.channels.base import (
    ERROR_EXCEPTION,
    DeliveryResult,
    classify_status,
)

if TYPE_CHECKING:
    from vocab_service.core.settings.push import PushSettings
    from vocab_service.features.subscriptions.schemas import Subscription

logger = logging.getLogger(__name__)


class WebPushTransport:
    """Deliver payloads through the browser vendor's push service.

    pywebpush is synchronous (it uses requests), so each send runs in a worker
    thread. Failures are classified, never raised.
    """

    def __init__(self, settings: PushSettings) -> None:
        if not settings.is_configured:
            raise ServiceUnavailableException(
                detail="VAPID keys are not configured",
                type="push-not-configured",
            )
        self.settings = settings

    async def send(self, subscription: Subscription, payload: bytes) -> DeliveryResult:
        start_time = time.perf_counter()

        try:
            response = await asyncio.to_thread(self._send_sync, subscription, payload)
        except WebPushException as exc:
            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
            # requests.Response is falsy for 4xx/5xx, so compare against None
            status_code = exc.response.status_code if exc.response is not None else None
            category = classify_status(status_code)
            logger.warning(
                "Push service rejected notification",
                extra={
                    "endpoint": subscription.endpoint,
                    "status_code": status_code,
                    "error_category": category,
                },
            )
            return DeliveryResult(
                success=False,
                status_code=status_code,
                response_time_ms=elapsed_ms,
                error_message=str(exc),
                error_category=category,
            )
        except Exception as exc:
            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
            logger.exception(
                "Push transport failed",
                extra={"endpoint": subscription.endpoint},
            )
            return DeliveryResult(
                success=False,
                response_time_ms=elapsed_ms,
                error_message=str(exc),
                error_category=ERROR_EXCEPTION,
            )

        elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        status_code = getattr(response, "status_code", None)
        logger.debug(
            "Notification sent",
            extra={"endpoint": subscription.endpoint, "status_code": status_code},
        )
        return DeliveryResult(
            success=True,
            status_code=status_code,
            response_time_ms=elapsed_ms,
        )

    def _send_sync(self, subscription: Subscription, payload: bytes):
        private_key = self.settings.vapid_private_key
        return webpush(
            subscription_info=subscription.to_subscription_info(),
            data=payload,
            vapid_private_key=private_key.get_secret_value() if private_key else None,
            # pywebpush adds aud/exp to the claims dict in place
            vapid_claims=self.settings.vapid_claims(),
            ttl=self.settings.ttl,
            timeout=self.settings.request_timeout,
        )
