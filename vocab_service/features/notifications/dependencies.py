"""FastAPI dependencies for the notifications feature.

Provides Annotated type aliases for clean dependency injection in route handlers.

Example usage:
    from vocab_service.features.notifications.dependencies import (
        SubscriptionRepositoryDep,
        WordOfTheDayServiceDep,
    )

    @router.post("/broadcast")
    async def broadcast(service: WordOfTheDayServiceDep) -> BroadcastResponse:
        report = await service.broadcast()
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from vocab_service.core.settings import get_push_settings
from vocab_service.core.settings.push import PushSettings
from vocab_service.features.notifications.service import (
    WordOfTheDayService,
    get_word_of_the_day_service,
)
from vocab_service.features.subscriptions.repository import (
    SubscriptionRepository,
    get_subscription_repository,
)
from vocab_service.tasks.scheduler import DailyScheduler

PushSettingsDep = Annotated[PushSettings, Depends(get_push_settings)]

SubscriptionRepositoryDep = Annotated[
    SubscriptionRepository, Depends(get_subscription_repository)
]

# Resolving this raises ServiceUnavailableException (503) without VAPID keys
WordOfTheDayServiceDep = Annotated[WordOfTheDayService, Depends(get_word_of_the_day_service)]


def get_daily_scheduler(request: Request) -> DailyScheduler | None:
    """Return the scheduler armed by the lifespan, if any."""
    return getattr(request.app.state, "daily_scheduler", None)
