"""Word of the Day broadcast: pick a word, build the payload, fan it out."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING
from uuid import uuid4

from vocab_service.features.notifications.metrics import push_broadcasts_total
from vocab_service.features.notifications.schemas import BroadcastReport, build_word_payload
from vocab_service.features.words.selection import pick_random_entry
from vocab_service.infra.logging import remove_from_log_context, set_log_context

if TYPE_CHECKING:
    from vocab_service.core.settings.push import PushSettings
    from vocab_service.features.notifications.dispatcher import NotificationDispatcher
    from vocab_service.features.words.repository import WordRepository

logger = logging.getLogger(__name__)

SKIPPED_EMPTY_DICTIONARY = "empty_dictionary"


class WordOfTheDayService:
    """Run one Word of the Day broadcast cycle.

    Shared by the daily scheduler, the broadcast endpoint and the CLI so all
    three go through the same code path.
    """

    def __init__(
        self,
        words: WordRepository,
        dispatcher: NotificationDispatcher,
        settings: PushSettings,
        rng: random.Random | None = None,
    ) -> None:
        self.words = words
        self.dispatcher = dispatcher
        self.settings = settings
        self.rng = rng

    async def broadcast(self) -> BroadcastReport:
        """Send a random dictionary word to every subscriber.

        An empty dictionary skips the cycle without contacting any endpoint.
        """
        set_log_context(broadcast_id=uuid4().hex)
        try:
            entries = await self.words.list_all()
            entry = pick_random_entry(entries, self.rng)
            if entry is None:
                logger.info("Dictionary is empty, skipping Word of the Day")
                push_broadcasts_total.labels(outcome="skipped").inc()
                return BroadcastReport(skipped_reason=SKIPPED_EMPTY_DICTIONARY)

            logger.info("Broadcasting Word of the Day", extra={"word": entry.word})
            payload = build_word_payload(entry, self.settings)
            outcomes = await self.dispatcher.dispatch(payload)

            report = BroadcastReport(word=entry.word, outcomes=outcomes)
            push_broadcasts_total.labels(outcome="sent").inc()
            logger.info(
                "Word of the Day broadcast finished",
                extra={
                    "word": entry.word,
                    "delivered": report.delivered,
                    "failed": report.failed,
                    "pruned": report.pruned,
                },
            )
            return report
        except Exception:
            push_broadcasts_total.labels(outcome="error").inc()
            raise
        finally:
            remove_from_log_context("broadcast_id")


_service: WordOfTheDayService | None = None


def get_word_of_the_day_service() -> WordOfTheDayService:
    """Get WordOfTheDayService singleton instance."""
    global _service
    if _service is None:
        from vocab_service.core.settings import get_push_settings
        from vocab_service.features.notifications.dispatcher import (
            get_notification_dispatcher,
        )
        from vocab_service.features.words.repository import get_word_repository

        _service = WordOfTheDayService(
            words=get_word_repository(),
            dispatcher=get_notification_dispatcher(),
            settings=get_push_settings(),
        )
    return _service


def reset_word_of_the_day_service() -> None:
    global _service
    _service = None
