"""Prometheus metrics endpoint for observability.

Endpoints:
    GET /metrics - Prometheus scrape endpoint

Metrics Exposed:
    Push Metrics:
        - push_broadcasts_total - Broadcast cycles by outcome
        - push_deliveries_total - Delivery attempts by status
        - push_delivery_duration_seconds - Push service round-trip time
        - push_subscriptions_pruned_total - Endpoints removed after 404/410

    Process Metrics:
        - process_* / python_* - Default prometheus_client collectors
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

router = APIRouter(tags=["observability"])


@router.get("/metrics")
async def metrics() -> Response:
    """Expose Prometheus metrics in text exposition format."""
    data = generate_latest(REGISTRY)
    return Response(
        content=data,
        media_type=CONTENT_TYPE_LATEST,
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"},
    )
