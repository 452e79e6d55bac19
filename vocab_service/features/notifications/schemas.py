"""Schemas for Word of the Day notifications and broadcast results."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from vocab_service.features.notifications.channels.base import DeliveryResult

if TYPE_CHECKING:
    from vocab_service.core.settings.push import PushSettings
    from vocab_service.features.words.schemas import DictionaryEntry


class NotificationData(BaseModel):
    url: str = "/"
    word: str


class NotificationPayload(BaseModel):
    """Body handed to the service worker's ``push`` event handler."""

    title: str
    body: str
    icon: str | None = None
    badge: str | None = None
    data: NotificationData

    def to_bytes(self) -> bytes:
        """Serialize to the UTF-8 JSON bytes the transport encrypts."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")


def build_word_payload(entry: DictionaryEntry, settings: PushSettings) -> NotificationPayload:
    """Build the Word of the Day notification for a dictionary entry."""
    return NotificationPayload(
        title=f"{settings.title_prefix}: {entry.word}",
        body=entry.meaning,
        icon=settings.icon,
        badge=settings.badge,
        data=NotificationData(url=settings.click_url, word=entry.word),
    )


class DeliveryStatus(StrEnum):
    DELIVERED = "delivered"
    GONE = "gone"
    FAILED = "failed"


class DeliveryOutcome(BaseModel):
    """What happened to one endpoint during a dispatch."""

    endpoint: str
    status: DeliveryStatus
    result: DeliveryResult
    pruned: bool = False


class BroadcastReport(BaseModel):
    """Summary of one Word of the Day broadcast."""

    word: str | None = None
    skipped_reason: str | None = None
    outcomes: list[DeliveryOutcome] = Field(default_factory=list)

    @property
    def delivered(self) -> int:
        return sum(1 for o in self.outcomes if o.status is DeliveryStatus.DELIVERED)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status is not DeliveryStatus.DELIVERED)

    @property
    def pruned(self) -> int:
        return sum(1 for o in self.outcomes if o.pruned)

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


class BroadcastResponse(BaseModel):
    """HTTP view of a BroadcastReport."""

    model_config = ConfigDict(populate_by_name=True)

    word: str | None = None
    skipped_reason: str | None = Field(default=None, alias="skippedReason")
    recipients: int = 0
    delivered: int = 0
    failed: int = 0
    pruned: int = 0

    @classmethod
    def from_report(cls, report: BroadcastReport) -> BroadcastResponse:
        return cls(
            word=report.word,
            skipped_reason=report.skipped_reason,
            recipients=len(report.outcomes),
            delivered=report.delivered,
            failed=report.failed,
            pruned=report.pruned,
        )


class ScheduleResponse(BaseModel):
    """Current state of the daily scheduler."""

    model_config = ConfigDict(populate_by_name=True)

    state: str
    next_run_time: datetime | None = Field(default=None, alias="nextRunTime")
    interval_seconds: float | None = Field(default=None, alias="intervalSeconds")
