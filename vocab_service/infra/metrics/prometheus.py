"""Process-wide Prometheus collectors.

Feature-specific metrics live next to their feature (see
``vocab_service.features.notifications.metrics``); this module only holds
collectors that describe the running process. All register with the
default prometheus_client REGISTRY scraped at ``/metrics``.
"""

from __future__ import annotations

from prometheus_client import Gauge

application_info = Gauge(
    "application_info",
    "Application information",
    ["version", "service", "environment"],
)

scheduler_armed = Gauge(
    "word_of_the_day_scheduler_armed",
    "1 while the daily broadcast job is registered, else 0",
)
