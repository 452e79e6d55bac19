"""APScheduler integration for the daily Word of the Day broadcast.

The broadcast runs in-process on the application's event loop:

    DailyScheduler.start() → IntervalTrigger(start_date=next 09:00, 24h)
        → DailyScheduler.fire() → WordOfTheDayService.broadcast()

The first run is the next occurrence of the configured wall-clock time (today
if it has not passed yet, otherwise tomorrow); later runs follow on a fixed
interval regardless of how any single broadcast ended.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, tzinfo
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from vocab_service.infra.logging import get_logger

if TYPE_CHECKING:
    from apscheduler.job import Job
    from apscheduler.schedulers.base import BaseScheduler

    from vocab_service.core.settings.scheduler import SchedulerSettings

logger = get_logger(__name__, component="scheduler")

DEFAULT_JOB_ID = "word_of_the_day"


class SchedulerState(StrEnum):
    IDLE = "idle"
    ARMED = "armed"
    STOPPED = "stopped"


def next_fire_time(now: datetime, hour: int = 9, minute: int = 0) -> datetime:
    """Return the next ``hour:minute`` strictly after ``now``.

    Today's slot is used when ``now`` is before it, otherwise tomorrow's.
    The result keeps the tzinfo of ``now``.
    """
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return target


def _local_now(tz: tzinfo | None = None) -> datetime:
    if tz is not None:
        return datetime.now(tz)
    return datetime.now().astimezone()


class DailyScheduler:
    """Arm a recurring daily broadcast on an APScheduler timer.

    States move idle → armed → stopped. ``clock`` and ``scheduler`` are
    injectable so tests can pin the current time and inspect the registered
    job without waiting on a real timer.

    Example:
        daily = DailyScheduler(service.broadcast, hour=9)
        first = daily.start()
        ...
        daily.stop()
    """

    def __init__(
        self,
        broadcast: Callable[[], Awaitable[Any]],
        *,
        hour: int = 9,
        minute: int = 0,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
        scheduler: BaseScheduler | None = None,
        interval: timedelta = timedelta(hours=24),
        misfire_grace_time: int = 300,
        job_id: str = DEFAULT_JOB_ID,
    ) -> None:
        self._broadcast = broadcast
        self.hour = hour
        self.minute = minute
        self.tz = tz
        self.clock = clock or (lambda: _local_now(tz))
        self.interval = interval
        self.misfire_grace_time = misfire_grace_time
        self.job_id = job_id

        self._owns_scheduler = scheduler is None
        if scheduler is None:
            scheduler = AsyncIOScheduler(timezone=tz) if tz is not None else AsyncIOScheduler()
        self._scheduler = scheduler
        self._job: Job | None = None
        self._first_fire: datetime | None = None
        self.state = SchedulerState.IDLE

    @property
    def next_run_time(self) -> datetime | None:
        """Next scheduled broadcast while armed, else None."""
        if self.state is not SchedulerState.ARMED:
            return None
        # Jobs added before the scheduler starts have no next_run_time yet
        return getattr(self._job, "next_run_time", None) or self._first_fire

    def start(self) -> datetime | None:
        """Register the recurring job and start the timer.

        Returns:
            The first fire time, or the current one if already armed.
        """
        if self.state is SchedulerState.ARMED:
            logger.warning("Daily scheduler is already armed")
            return self.next_run_time
        if self.state is SchedulerState.STOPPED:
            logger.warning("Daily scheduler was stopped and cannot be restarted")
            return None

        first = next_fire_time(self.clock(), self.hour, self.minute)
        trigger = IntervalTrigger(
            seconds=int(self.interval.total_seconds()),
            start_date=first,
        )
        self._job = self._scheduler.add_job(
            self.fire,
            trigger=trigger,
            id=self.job_id,
            name="Word of the Day broadcast",
            coalesce=True,  # Collapse missed runs after a stall into one
            max_instances=1,
            misfire_grace_time=self.misfire_grace_time,
            replace_existing=True,
        )
        self._first_fire = first

        if self._owns_scheduler and not self._scheduler.running:
            self._scheduler.start()

        self.state = SchedulerState.ARMED
        logger.info(
            "Word of the Day scheduled",
            extra={"next_run_time": first.isoformat(), "interval_seconds": self.interval.total_seconds()},
        )
        return first

    async def fire(self) -> Any:
        """Run one broadcast; failures are logged and never propagate to the timer."""
        logger.info("Daily broadcast firing")
        try:
            return await self._broadcast()
        except Exception:
            logger.exception("Daily broadcast failed; next run stays scheduled")
            return None

    def stop(self) -> None:
        """Remove the job and, when this object created the timer, shut it down."""
        if self.state is SchedulerState.STOPPED:
            return

        if self.state is SchedulerState.ARMED:
            try:
                self._scheduler.remove_job(self.job_id)
            except JobLookupError:
                logger.debug("Daily broadcast job already removed")

        if self._owns_scheduler and self._scheduler.running:
            self._scheduler.shutdown(wait=False)

        self._job = None
        self.state = SchedulerState.STOPPED
        logger.info("Daily scheduler stopped")

    def get_job_status(self) -> dict[str, Any]:
        """Status of the broadcast job, as served by the schedule endpoint."""
        next_run = self.next_run_time
        return {
            "id": self.job_id,
            "state": self.state.value,
            "next_run_time": next_run.isoformat() if next_run else None,
            "interval_seconds": self.interval.total_seconds(),
        }


def create_daily_scheduler(
    broadcast: Callable[[], Awaitable[Any]],
    settings: SchedulerSettings,
    **overrides: Any,
) -> DailyScheduler:
    """Build a DailyScheduler from SchedulerSettings."""
    options: dict[str, Any] = {
        "hour": settings.hour,
        "minute": settings.minute,
        "tz": settings.tzinfo,
        "interval": timedelta(hours=settings.interval_hours),
        "misfire_grace_time": settings.misfire_grace_time,
    }
    options.update(overrides)
    return DailyScheduler(broadcast, **options)
