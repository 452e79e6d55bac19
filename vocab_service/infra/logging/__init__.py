"""Logging infrastructure.

Structured logging with:
- JSONL format for Loki/Elasticsearch ingestion
- Automatic context injection (request_id, broadcast_id, ...)
- QueueHandler + QueueListener for non-blocking I/O

Basic usage:
    from vocab_service.infra.logging import set_log_context
    import logging

    logger = logging.getLogger(__name__)

    set_log_context(broadcast_id="abc-123")
    logger.info("Dispatching")  # Automatically includes broadcast_id
"""

from vocab_service.infra.logging.config import configure_logging, setup_logging, shutdown
from vocab_service.infra.logging.context import (
    ContextBoundLogger,
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    get_logger,
    remove_from_log_context,
    set_log_context,
)
from vocab_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextBoundLogger",
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "get_logger",
    "remove_from_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
