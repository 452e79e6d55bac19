"""Subscription store: push endpoints persisted as a JSON list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vocab_service.features.subscriptions.schemas import Subscription
from vocab_service.infra.persistence import JsonListRepository

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class SubscriptionRepository(JsonListRepository[Subscription]):
    """Durable set of push subscriptions keyed by endpoint.

    Endpoints are unique within the store. ``add`` is idempotent and
    ``remove`` of an absent endpoint is a no-op.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(Subscription, path)

    async def list_all(self) -> list[Subscription]:
        """Return a snapshot copy of all subscriptions (order not meaningful)."""
        return await self._load()

    async def add(self, subscription: Subscription) -> bool:
        """Insert a subscription unless its endpoint is already stored.

        Returns:
            True if a record was inserted, False if the endpoint already existed.

        Raises:
            PersistenceError: The store could not be written.
        """
        async with self._lock:
            records = await self._load()
            if any(record.endpoint == subscription.endpoint for record in records):
                logger.debug("Subscription already stored", extra={"endpoint": subscription.endpoint})
                return False
            records.append(subscription)
            await self._save(records)

        logger.info(
            "Subscription added",
            extra={"endpoint": subscription.endpoint, "subscriptions": len(records)},
        )
        return True

    async def remove(self, endpoint: str) -> int:
        """Delete every record matching the endpoint.

        Returns:
            Number of records removed (0 when the endpoint was not stored).

        Raises:
            PersistenceError: The store could not be written.
        """
        async with self._lock:
            records = await self._load()
            kept = [record for record in records if record.endpoint != endpoint]
            removed = len(records) - len(kept)
            if removed == 0:
                return 0
            await self._save(kept)

        logger.info(
            "Subscription removed",
            extra={"endpoint": endpoint, "subscriptions": len(kept)},
        )
        return removed


_subscription_repository: SubscriptionRepository | None = None


def get_subscription_repository() -> SubscriptionRepository:
    """Get SubscriptionRepository singleton instance bound to the configured file."""
    global _subscription_repository
    if _subscription_repository is None:
        from vocab_service.core.settings import get_storage_settings

        _subscription_repository = SubscriptionRepository(
            get_storage_settings().subscriptions_path
        )
    return _subscription_repository


def reset_subscription_repository() -> None:
    """Drop the singleton so the next call rebinds to current settings."""
    global _subscription_repository
    _subscription_repository = None
