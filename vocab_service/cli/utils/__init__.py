"""CLI helpers: async command runner and terminal output."""

from vocab_service.cli.utils.async_runner import coro
from vocab_service.cli.utils.formatters import (
    delivery_line,
    error,
    header,
    info,
    shorten_endpoint,
    success,
    warning,
)

__all__ = [
    "coro",
    "delivery_line",
    "error",
    "header",
    "info",
    "shorten_endpoint",
    "success",
    "warning",
]
