"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings that keep tests off real push services and files
    - Store Fixtures: JSON-backed repositories rooted in tmp_path
    - Push Fixtures: a fake transport with scripted per-endpoint results
    - Application Fixtures: FastAPI app with overridden dependencies and client
    - Logging Fixtures: the queue-backed root handler with no output handlers
"""

from __future__ import annotations

import logging
import os
import queue
import random
from collections.abc import AsyncGenerator, Callable
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from tests.utils import FakeTransport
from vocab_service.core.settings import clear_all_caches, get_push_settings
from vocab_service.core.settings.push import PushSettings
from vocab_service.features.notifications.dispatcher import (
    NotificationDispatcher,
    reset_notification_dispatcher,
)
from vocab_service.features.notifications.service import (
    WordOfTheDayService,
    get_word_of_the_day_service,
    reset_word_of_the_day_service,
)
from vocab_service.features.subscriptions.repository import (
    SubscriptionRepository,
    get_subscription_repository,
    reset_subscription_repository,
)
from vocab_service.features.words.repository import (
    WordRepository,
    get_word_repository,
    reset_word_repository,
)
from vocab_service.infra.logging import config as logging_config
from vocab_service.infra.logging import configure_logging, shutdown

if TYPE_CHECKING:
    from pathlib import Path

    from fastapi import FastAPI

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("SCHEDULER_ENABLED", "false")


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Drop cached settings and repository singletons around every test."""
    clear_all_caches()
    reset_subscription_repository()
    reset_word_repository()
    reset_notification_dispatcher()
    reset_word_of_the_day_service()
    yield
    clear_all_caches()
    reset_subscription_repository()
    reset_word_repository()
    reset_notification_dispatcher()
    reset_word_of_the_day_service()


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
async def subscription_repo(data_dir: Path) -> SubscriptionRepository:
    """Subscription store backed by an empty file under tmp_path."""
    repo = SubscriptionRepository(data_dir / "subscriptions.json")
    await repo.initialize()
    return repo


@pytest.fixture
async def word_repo(data_dir: Path) -> WordRepository:
    """Word store backed by an empty file under tmp_path."""
    repo = WordRepository(data_dir / "dictionary.json")
    await repo.initialize()
    return repo


# ============================================================================
# Push Fixtures
# ============================================================================


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def push_settings() -> PushSettings:
    """Push settings with a placeholder VAPID key pair."""
    return PushSettings(
        vapid_public_key="BPublicKeyForTests",
        vapid_private_key="private-key-for-tests",
        vapid_subject="mailto:test@example.com",
    )


@pytest.fixture
def dispatcher(subscription_repo: SubscriptionRepository, fake_transport: FakeTransport) -> NotificationDispatcher:
    return NotificationDispatcher(repository=subscription_repo, transport=fake_transport)


@pytest.fixture
def word_service(
    word_repo: WordRepository,
    dispatcher: NotificationDispatcher,
    push_settings: PushSettings,
) -> WordOfTheDayService:
    return WordOfTheDayService(
        words=word_repo,
        dispatcher=dispatcher,
        settings=push_settings,
        rng=random.Random(7),
    )


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(
    subscription_repo: SubscriptionRepository,
    word_repo: WordRepository,
    push_settings: PushSettings,
    word_service: WordOfTheDayService,
) -> FastAPI:
    """FastAPI application wired to tmp_path stores and the fake transport."""
    from vocab_service.app.main import create_app

    application = create_app()
    application.dependency_overrides[get_subscription_repository] = lambda: subscription_repo
    application.dependency_overrides[get_word_repository] = lambda: word_repo
    application.dependency_overrides[get_push_settings] = lambda: push_settings
    application.dependency_overrides[get_word_of_the_day_service] = lambda: word_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for the app; lifespan is not run."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def queued_log_records() -> Callable[[], list[logging.LogRecord]]:
    """Install the queue handler with no outputs; call the result to drain records."""
    root = logging.getLogger()
    level = root.level
    configure_logging(console_enabled=False, capture_warnings=False, json_logs=False)
    log_queue = logging_config._log_queue

    def drain() -> list[logging.LogRecord]:
        records = []
        while True:
            try:
                records.append(log_queue.get_nowait())
            except queue.Empty:
                return records

    yield drain
    shutdown()
    root.setLevel(level)
