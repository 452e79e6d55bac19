"""Prometheus metrics for Word of the Day push delivery.

Usage:
    from vocab_service.features.notifications.metrics import (
        push_deliveries_total,
        push_broadcasts_total,
    )

    push_deliveries_total.labels(status="delivered").inc()
    push_broadcasts_total.labels(outcome="sent").inc()
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# =============================================================================
# Broadcast Metrics
# =============================================================================

push_broadcasts_total = Counter(
    "push_broadcasts_total",
    "Total number of Word of the Day broadcasts by outcome",
    labelnames=["outcome"],
)
"""
Counter for tracking broadcast cycles.

Labels:
    outcome: sent, skipped (empty dictionary) or error (broadcast raised)
"""

# =============================================================================
# Delivery Metrics
# =============================================================================

push_deliveries_total = Counter(
    "push_deliveries_total",
    "Total number of push delivery attempts by status",
    labelnames=["status"],
)
"""
Counter for tracking per-endpoint delivery results.

Labels:
    status: delivered, gone or failed
"""

push_delivery_duration_seconds = Histogram(
    "push_delivery_duration_seconds",
    "Push delivery duration in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)
"""
Histogram tracking push service round-trip time.

Buckets cover fast push service acks up to the request timeout.
"""

push_subscriptions_pruned_total = Counter(
    "push_subscriptions_pruned_total",
    "Total number of subscriptions removed after a gone response",
)
