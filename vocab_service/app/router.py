"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vocab_service.core.settings import get_app_settings
from vocab_service.features.health.router import router as health_router
from vocab_service.features.metrics.router import router as metrics_router
from vocab_service.features.notifications.router import router as notifications_router
from vocab_service.features.words.router import router as words_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from vocab_service.core.settings.app import AppSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Register all feature routers with the application.

    Args:
        app: FastAPI application instance.
        app_settings: Optional application settings override for the API prefix.
    """
    app_settings = app_settings or get_app_settings()
    api_prefix = app_settings.api_prefix

    # Probes and scrape endpoint live outside the API prefix
    app.include_router(metrics_router)
    app.include_router(health_router)

    app.include_router(words_router, prefix=api_prefix)
    app.include_router(notifications_router, prefix=api_prefix)

    logger.debug("Routers registered under %s", api_prefix)
