"""Health check response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(default="ok", description="Overall service status")
    service: str | None = None
    version: str | None = None


class ReadinessResponse(BaseModel):
    """Readiness result with one entry per checked data file."""

    ready: bool
    checks: dict[str, bool] = Field(default_factory=dict)
