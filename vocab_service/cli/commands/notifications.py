"""Word of the Day notification commands.

This module provides CLI commands for the push notification subsystem:
- Broadcast the Word of the Day immediately
- List stored push subscriptions
- Show when the daily broadcast fires next
"""

from __future__ import annotations

import json
import sys
from datetime import datetime

import click

from vocab_service.cli.utils import (
    coro,
    delivery_line,
    error,
    header,
    info,
    shorten_endpoint,
    success,
    warning,
)
from vocab_service.core.exceptions import AppException


@click.group(name="notifications")
def notifications() -> None:
    """Push subscription and broadcast commands."""


@notifications.command(name="broadcast")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@coro
async def broadcast(output_format: str) -> None:
    """Send the Word of the Day to every subscriber now."""
    from vocab_service.features.notifications.service import get_word_of_the_day_service

    try:
        service = get_word_of_the_day_service()
        await service.words.initialize()
        await service.dispatcher.repository.initialize()
        report = await service.broadcast()
    except AppException as e:
        error(f"Broadcast failed: {e.detail}")
        sys.exit(1)

    if output_format == "json":
        click.echo(
            json.dumps(
                {
                    "word": report.word,
                    "skipped_reason": report.skipped_reason,
                    "delivered": report.delivered,
                    "failed": report.failed,
                    "pruned": report.pruned,
                    "outcomes": [
                        {"endpoint": o.endpoint, "status": o.status.value, "pruned": o.pruned}
                        for o in report.outcomes
                    ],
                },
                indent=2,
            )
        )
        return

    if report.skipped:
        warning(f"Broadcast skipped: {report.skipped_reason}")
        return

    header(f"Word of the Day: {report.word}")
    for outcome in report.outcomes:
        delivery_line(outcome.status.value, outcome.endpoint, pruned=outcome.pruned)
    click.echo()
    success(
        f"Delivered {report.delivered}/{len(report.outcomes)}, "
        f"failed {report.failed}, pruned {report.pruned}"
    )


@notifications.command(name="subscriptions")
@coro
async def list_subscriptions() -> None:
    """List stored push subscriptions."""
    from vocab_service.features.subscriptions.repository import get_subscription_repository

    header("Push Subscriptions")
    subscriptions = await get_subscription_repository().list_all()
    if not subscriptions:
        info("No subscriptions stored")
        return

    for subscription in subscriptions:
        click.echo(
            f"  {subscription.subscribed_at:%Y-%m-%d %H:%M}  {shorten_endpoint(subscription.endpoint)}"
        )
    click.echo()
    success(f"Total: {len(subscriptions)} subscriptions")


@notifications.command(name="next-run")
def next_run() -> None:
    """Show when the daily broadcast would fire next."""
    from vocab_service.core.settings import get_scheduler_settings
    from vocab_service.tasks.scheduler import next_fire_time

    settings = get_scheduler_settings()
    if not settings.enabled:
        warning("Daily scheduler is disabled (SCHEDULER_ENABLED=false)")

    tz = settings.tzinfo
    now = datetime.now(tz) if tz else datetime.now().astimezone()
    fire_at = next_fire_time(now, settings.hour, settings.minute)
    hours, remainder = divmod(int((fire_at - now).total_seconds()), 3600)
    minutes = remainder // 60
    info(f"Next Word of the Day: {fire_at.isoformat(timespec='minutes')} (in {hours}h {minutes}m)")
