"""API router for push subscriptions and the Word of the Day broadcast."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from vocab_service.core.exceptions import BadRequestException, ServiceUnavailableException
from vocab_service.features.notifications.dependencies import (
    PushSettingsDep,
    SubscriptionRepositoryDep,
    WordOfTheDayServiceDep,
    get_daily_scheduler,
)
from vocab_service.features.notifications.schemas import BroadcastResponse, ScheduleResponse
from vocab_service.features.subscriptions.schemas import (
    SubscriptionCreate,
    SuccessResponse,
    UnsubscribeRequest,
    VapidKeyResponse,
)
from vocab_service.tasks.scheduler import DailyScheduler

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = logging.getLogger(__name__)


@router.get(
    "/vapid-key",
    response_model=VapidKeyResponse,
    summary="Get VAPID public key",
    description="Application server key the browser passes to PushManager.subscribe().",
)
async def get_vapid_key(settings: PushSettingsDep) -> VapidKeyResponse:
    if not settings.vapid_public_key:
        raise ServiceUnavailableException(
            detail="Push notifications are not configured",
            type="push-not-configured",
        )
    return VapidKeyResponse(public_key=settings.vapid_public_key)


@router.post(
    "/subscribe",
    response_model=SuccessResponse,
    summary="Subscribe to Word of the Day",
    description="Store a browser PushSubscription. Subscribing the same endpoint twice is a no-op.",
)
async def subscribe(
    payload: SubscriptionCreate,
    repo: SubscriptionRepositoryDep,
) -> SuccessResponse:
    """Register a push subscription.

    Raises:
        BadRequestException: If the subscription has no endpoint.
        PersistenceError: If the subscription store could not be written.
    """
    if not payload.endpoint or not payload.endpoint.strip():
        raise BadRequestException(
            detail="Invalid subscription: endpoint is required",
            type="missing-endpoint",
        )

    await repo.add(payload.to_subscription())
    return SuccessResponse(success=True, message="Subscribed successfully")


@router.post(
    "/unsubscribe",
    response_model=SuccessResponse,
    summary="Unsubscribe from Word of the Day",
    description="Remove a push subscription by endpoint. Unknown endpoints are ignored.",
)
async def unsubscribe(
    payload: UnsubscribeRequest,
    repo: SubscriptionRepositoryDep,
) -> SuccessResponse:
    if not payload.endpoint:
        raise BadRequestException(
            detail="Endpoint is required",
            type="missing-endpoint",
        )

    await repo.remove(payload.endpoint)
    return SuccessResponse(success=True, message="Unsubscribed successfully")


@router.post(
    "/broadcast",
    response_model=BroadcastResponse,
    summary="Broadcast now",
    description="Send the Word of the Day immediately, outside the daily schedule.",
)
async def broadcast(service: WordOfTheDayServiceDep) -> BroadcastResponse:
    report = await service.broadcast()
    return BroadcastResponse.from_report(report)


@router.get(
    "/schedule",
    response_model=ScheduleResponse,
    summary="Daily schedule status",
)
async def get_schedule(
    scheduler: Annotated[DailyScheduler | None, Depends(get_daily_scheduler)],
) -> ScheduleResponse:
    if scheduler is None:
        return ScheduleResponse(state="disabled")
    return ScheduleResponse.model_validate(scheduler.get_job_status())
