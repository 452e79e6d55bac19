"""Application lifespan management.

Startup Order:
1. Core (logging, application info metric)
2. Storage (create empty JSON data files if missing, warm snapshots)
3. Daily scheduler (arm the Word of the Day job) - conditional on
   configuration and on VAPID keys being present

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from vocab_service.core.settings import (
    get_app_settings,
    get_push_settings,
    get_scheduler_settings,
)
from vocab_service.features.subscriptions.repository import get_subscription_repository
from vocab_service.features.words.repository import get_word_repository
from vocab_service.infra.logging.config import setup_logging
from vocab_service.infra.metrics.prometheus import application_info, scheduler_armed

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

    from vocab_service.tasks.scheduler import DailyScheduler

logger = logging.getLogger(__name__)


async def _startup_core() -> None:
    setup_logging()

    app_settings = get_app_settings()
    application_info.labels(
        version=app_settings.version,
        service=app_settings.service_name,
        environment=app_settings.environment,
    ).set(1)


async def _startup_storage() -> None:
    """Create both data files with an empty list if they do not exist yet."""
    for repository in (get_subscription_repository(), get_word_repository()):
        await repository.initialize()
        logger.info("Data file ready", extra={"path": str(repository.path)})


async def _startup_scheduler() -> DailyScheduler | None:
    scheduler_settings = get_scheduler_settings()
    if not scheduler_settings.enabled:
        logger.info("Daily Word of the Day scheduler disabled")
        return None

    if not get_push_settings().is_configured:
        logger.warning(
            "VAPID keys are not configured; daily Word of the Day scheduler not started",
        )
        return None

    from vocab_service.features.notifications.service import get_word_of_the_day_service
    from vocab_service.tasks.scheduler import create_daily_scheduler

    service = get_word_of_the_day_service()
    daily = create_daily_scheduler(service.broadcast, scheduler_settings)
    first_run = daily.start()
    scheduler_armed.set(1)
    logger.info(
        "Next Word of the Day notification scheduled for %s",
        first_run.isoformat() if first_run else "never",
    )
    return daily


async def _shutdown_scheduler(daily: DailyScheduler | None) -> None:
    if daily is None:
        return
    daily.stop()
    scheduler_armed.set(0)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    # =========================================================================
    # STARTUP PHASE
    # =========================================================================
    await _startup_core()
    await _startup_storage()
    daily = await _startup_scheduler()
    app.state.daily_scheduler = daily

    app_settings = get_app_settings()
    logger.info(
        "Application startup complete - listening on %s:%s",
        app_settings.host,
        app_settings.port,
        extra={
            "service": app_settings.service_name,
            "environment": app_settings.environment,
            "scheduler_armed": daily is not None,
        },
    )

    try:
        yield
    finally:
        # =====================================================================
        # SHUTDOWN PHASE
        # =====================================================================
        logger.info("Application shutdown initiated")
        await _shutdown_scheduler(daily)
        app.state.daily_scheduler = None
        logger.info("Application shutdown complete")
