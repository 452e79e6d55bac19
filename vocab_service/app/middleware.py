"""HTTP middleware: CORS, request correlation and response timing."""
from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from vocab_service.core.settings import get_app_settings, get_logging_settings
from vocab_service.infra.logging import clear_log_context, set_log_context

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"
MAX_REQUEST_ID_LENGTH = 128


def _request_id_from(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
        return incoming
    return uuid.uuid4().hex


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID, expose it on the response and in log records.

    A client-supplied ``X-Request-ID`` is reused when it is short enough to log.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _request_id_from(request)
        request.state.request_id = request_id
        set_log_context(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            clear_log_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Report handler time in seconds as ``X-Process-Time``."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        response.headers[PROCESS_TIME_HEADER] = f"{time.perf_counter() - started:.6f}"
        return response


def configure_middleware(app: FastAPI) -> None:
    """Install middleware; the last one added runs first on a request."""
    app_settings = get_app_settings()
    log_settings = get_logging_settings()

    # Service worker pages may be served from another origin during development
    cors_origins = app_settings.cors_origins or ["*"]
    logger.debug("Configuring CORS with origins: %s", cors_origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
        expose_headers=[REQUEST_ID_HEADER, PROCESS_TIME_HEADER],
        max_age=3600,
    )

    app.add_middleware(TimingMiddleware)
    if log_settings.include_request_id:
        app.add_middleware(RequestIDMiddleware)
