"""Process-wide Prometheus collectors."""

from vocab_service.infra.metrics.prometheus import application_info, scheduler_armed

__all__ = ["application_info", "scheduler_armed"]
