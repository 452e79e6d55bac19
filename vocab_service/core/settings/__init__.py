"""Modular Pydantic Settings v2 configuration.

One frozen settings class per domain (app, logging, push, storage, scheduler),
each reading its own environment prefix, with optional YAML/conf.d files for
local development and LRU-cached loaders.

Import settings via cached loaders:
    from vocab_service.core.settings import get_push_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (optional, local/dev)
    3. Environment variables (production)
    4. .env file (development only)
    5. secrets_dir (Kubernetes/Docker secrets)
"""

from __future__ import annotations

from .loader import (
    clear_all_caches,
    get_app_settings,
    get_logging_settings,
    get_push_settings,
    get_scheduler_settings,
    get_storage_settings,
)

__all__ = [
    "clear_all_caches",
    "get_app_settings",
    "get_logging_settings",
    "get_push_settings",
    "get_scheduler_settings",
    "get_storage_settings",
]
