"""Dictionary commands."""

from __future__ import annotations

import click

from vocab_service.cli.utils import coro, header, info, success


@click.group(name="words")
def words() -> None:
    """Dictionary management commands."""


@words.command(name="list")
@click.option("--query", "-q", default=None, help="Only show words or meanings containing this text")
@coro
async def list_words(query: str | None) -> None:
    """List dictionary entries."""
    from vocab_service.features.words.repository import get_word_repository

    repo = get_word_repository()
    entries = await repo.search(query) if query else await repo.list_all()

    header("Dictionary")
    if not entries:
        info("No words found")
        return

    width = max(len(entry.word) for entry in entries) + 2
    for entry in entries:
        click.echo(f"  {entry.word:<{width}} {entry.meaning}")
    click.echo()
    success(f"Total: {len(entries)} words")
