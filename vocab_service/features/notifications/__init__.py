"""Word of the Day push notifications.

Fan-out delivery to every stored subscription, pruning of endpoints the
push service reports as gone, and the broadcast service driven by the
daily scheduler.
"""

from vocab_service.features.notifications.dispatcher import (
    NotificationDispatcher,
    get_notification_dispatcher,
)
from vocab_service.features.notifications.schemas import (
    BroadcastReport,
    DeliveryOutcome,
    DeliveryStatus,
    NotificationPayload,
    build_word_payload,
)
from vocab_service.features.notifications.service import (
    WordOfTheDayService,
    get_word_of_the_day_service,
)

__all__ = [
    "BroadcastReport",
    "DeliveryOutcome",
    "DeliveryStatus",
    "NotificationDispatcher",
    "NotificationPayload",
    "WordOfTheDayService",
    "build_word_payload",
    "get_notification_dispatcher",
    "get_word_of_the_day_service",
]
