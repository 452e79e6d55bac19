"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the process.

Usage:
    from vocab_service.core.settings.loader import get_push_settings

    settings = get_push_settings()  # First call: loads and validates
    settings = get_push_settings()  # Subsequent calls: returns cached instance

Testing:
    In tests, clear the cache to force reload:
    clear_all_caches()

    Or construct settings directly with overrides:
    settings = PushSettings(vapid_public_key="...")
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .logs import LoggingSettings
from .push import PushSettings
from .scheduler import SchedulerSettings
from .storage import StorageSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached application settings.

    Returns:
        Validated and frozen AppSettings instance.
    """
    return AppSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_push_settings() -> PushSettings:
    """Get cached Web Push settings.

    Returns:
        Validated and frozen PushSettings instance.
    """
    return PushSettings()


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Get cached storage settings.

    Returns:
        Validated and frozen StorageSettings instance.
    """
    return StorageSettings()


@lru_cache(maxsize=1)
def get_scheduler_settings() -> SchedulerSettings:
    """Get cached scheduler settings.

    Returns:
        Validated and frozen SchedulerSettings instance.
    """
    return SchedulerSettings()


def clear_all_caches() -> None:
    """Clear all settings caches.

    Useful for testing or when you need to force reload settings.
    In production, prefer process restarts over cache clearing.
    """
    get_app_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_push_settings.cache_clear()
    get_storage_settings.cache_clear()
    get_scheduler_settings.cache_clear()
