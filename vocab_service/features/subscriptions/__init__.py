"""Push subscription lifecycle: schemas and the JSON-backed subscription store."""

from vocab_service.features.subscriptions.repository import (
    SubscriptionRepository,
    get_subscription_repository,
)
from vocab_service.features.subscriptions.schemas import Subscription, SubscriptionCreate

__all__ = [
    "Subscription",
    "SubscriptionCreate",
    "SubscriptionRepository",
    "get_subscription_repository",
]
