"""Main CLI entry point for vocab-service management commands."""

import click

from vocab_service import __version__
from vocab_service.cli.commands import notifications, server, words
from vocab_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="vocab-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Vocab Service CLI - manage the dictionary and Word of the Day pushes.

    \b
    Command Groups:
      server         Run the API server
      notifications  Broadcast now, list subscriptions, show next run
      words          Inspect the dictionary

    \b
    Quick Start:
      vocab-service server run
      vocab-service notifications next-run
      vocab-service notifications broadcast
    """
    ctx.ensure_object(dict)


cli.add_command(server.server)
cli.add_command(notifications.notifications)
cli.add_command(words.words)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
