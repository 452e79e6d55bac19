"""Health check endpoints."""
from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from vocab_service.core.settings import get_app_settings, get_storage_settings
from vocab_service.core.settings.app import AppSettings
from vocab_service.core.settings.storage import StorageSettings
from vocab_service.features.health.schemas import HealthResponse, ReadinessResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(
    settings: Annotated[AppSettings, Depends(get_app_settings)],
) -> HealthResponse:
    return HealthResponse(status="ok", service=settings.service_name, version=settings.version)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Data files are not accessible"}},
    summary="Readiness probe",
    description="Returns 200 when both data files exist and are readable, 503 otherwise",
)
async def readiness_check(
    response: Response,
    storage: Annotated[StorageSettings, Depends(get_storage_settings)],
) -> ReadinessResponse:
    paths = {
        "subscriptions": storage.subscriptions_path,
        "dictionary": storage.dictionary_path,
    }
    checks = {
        name: await asyncio.to_thread(path.is_file) for name, path in paths.items()
    }
    ready = all(checks.values())
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(ready=ready, checks=checks)
